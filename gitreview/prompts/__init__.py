"""Review prompt templates for gitreview.

This package contains the prompt templates and the template loader:
- system: The shared system prompt for all templates
- default: General-purpose review
- security: Security-focused review
- performance: Performance-focused review
- loader: Template lookup (user ./prompts/*.txt first) and prompt building
"""

from gitreview.prompts.system import SYSTEM_PROMPT
from gitreview.prompts.default import REVIEW_TEMPLATE_DEFAULT
from gitreview.prompts.security import REVIEW_TEMPLATE_SECURITY
from gitreview.prompts.performance import REVIEW_TEMPLATE_PERFORMANCE
from gitreview.prompts.loader import (
    BUILTIN_TEMPLATES,
    DEFAULT_TEMPLATE,
    build_focus_instructions,
    build_ignore_instructions,
    build_prompt,
    list_templates,
    load_template,
)


__all__ = [
    # System prompt
    "SYSTEM_PROMPT",
    # Built-in templates
    "REVIEW_TEMPLATE_DEFAULT",
    "REVIEW_TEMPLATE_SECURITY",
    "REVIEW_TEMPLATE_PERFORMANCE",
    "BUILTIN_TEMPLATES",
    "DEFAULT_TEMPLATE",
    # Loader
    "load_template",
    "list_templates",
    "build_focus_instructions",
    "build_ignore_instructions",
    "build_prompt",
]
