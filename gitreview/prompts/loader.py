"""Review template loading and prompt building.

Contains:
- BUILTIN_TEMPLATES: Templates shipped with gitreview
- load_template: Load a template by name, falling back to the default
- list_templates: List built-in and user template names
- build_focus_instructions / build_ignore_instructions: Optional prompt blocks
- build_prompt: Substitute the diff and instruction blocks into a template

User templates are plain text files named <name>.txt in ./prompts and take
precedence over built-in templates of the same name. A template may use the
placeholders {diff}, {focus_instructions} and {ignore_instructions}.
"""

import logging
from pathlib import Path
from typing import Optional

from gitreview.prompts.default import REVIEW_TEMPLATE_DEFAULT
from gitreview.prompts.performance import REVIEW_TEMPLATE_PERFORMANCE
from gitreview.prompts.security import REVIEW_TEMPLATE_SECURITY

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "default"
USER_TEMPLATES_DIR = Path("prompts")
TEMPLATE_SUFFIX = ".txt"

BUILTIN_TEMPLATES = {
    "default": REVIEW_TEMPLATE_DEFAULT,
    "security": REVIEW_TEMPLATE_SECURITY,
    "performance": REVIEW_TEMPLATE_PERFORMANCE,
}


def _read_user_template(name: str, templates_dir: Path) -> Optional[str]:
    path = templates_dir / f"{name}{TEMPLATE_SUFFIX}"
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


def _load_default_template(templates_dir: Path) -> str:
    try:
        user_default = _read_user_template(DEFAULT_TEMPLATE, templates_dir)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to load user default template: %s. Using built-in default.", e)
        user_default = None
    return user_default or BUILTIN_TEMPLATES[DEFAULT_TEMPLATE]


def load_template(name: Optional[str] = None, templates_dir: Optional[Path] = None) -> str:
    """Load a review template by name.

    Lookup order: ./prompts/<name>.txt, then the built-in template. Unknown
    or unreadable templates fall back to the default template with a warning.

    Args:
        name: Template name. None means "default".
        templates_dir: Directory holding user templates. Defaults to ./prompts.

    Returns:
        The template text.
    """
    templates_dir = templates_dir or USER_TEMPLATES_DIR
    name = name or DEFAULT_TEMPLATE

    if name == DEFAULT_TEMPLATE:
        return _load_default_template(templates_dir)

    try:
        template = _read_user_template(name, templates_dir)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to load template '%s': %s. Using default template.", name, e)
        return _load_default_template(templates_dir)

    if template is None:
        template = BUILTIN_TEMPLATES.get(name)

    if template is None:
        logger.warning("Failed to load template '%s': not found. Using default template.", name)
        return _load_default_template(templates_dir)

    return template


def list_templates(templates_dir: Optional[Path] = None) -> list[str]:
    """List the available template names.

    Args:
        templates_dir: Directory holding user templates. Defaults to ./prompts.

    Returns:
        Sorted names of built-in and user templates.
    """
    templates_dir = templates_dir or USER_TEMPLATES_DIR
    names = set(BUILTIN_TEMPLATES)
    if templates_dir.is_dir():
        names.update(p.stem for p in templates_dir.glob(f"*{TEMPLATE_SUFFIX}"))
    return sorted(names)


def build_focus_instructions(focus: Optional[list[str]]) -> str:
    """Build the prompt block listing areas to prioritize.

    Args:
        focus: Focus areas, e.g. ["security", "error handling"].

    Returns:
        The instruction block, or an empty string if there are no areas.
    """
    if not focus:
        return ""
    areas = "\n".join(f"- {area}" for area in focus)
    return f"\nSpecifically focus on and prioritize these areas in your review:\n{areas}"


def build_ignore_instructions(ignore: Optional[list[str]]) -> str:
    """Build the prompt block listing areas to de-prioritize.

    Args:
        ignore: Areas to skip, e.g. ["style"].

    Returns:
        The instruction block, or an empty string if there are no areas.
    """
    if not ignore:
        return ""
    areas = "\n".join(f"- {area}" for area in ignore)
    return f"\nSkip or minimize attention to these areas unless critical:\n{areas}"


def build_prompt(
    template: str,
    diff: str,
    focus: Optional[list[str]] = None,
    ignore: Optional[list[str]] = None,
) -> str:
    """Substitute the diff and instruction blocks into a template.

    Placeholders are replaced literally, so other braces in the template
    (code samples, JSON) are left untouched. The diff is substituted last
    so its content is never scanned for placeholders.

    Args:
        template: Template text.
        diff: The diff under review.
        focus: Focus areas.
        ignore: Areas to skip.

    Returns:
        The complete prompt.
    """
    prompt = template.replace("{focus_instructions}", build_focus_instructions(focus))
    prompt = prompt.replace("{ignore_instructions}", build_ignore_instructions(ignore))
    return prompt.replace("{diff}", diff)
