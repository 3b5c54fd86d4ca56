"""Repository configuration for gitreview.

Reads the optional .gitreview.yaml file in the directory gitreview is run
from. Recognized keys:

    provider: google | openai | anthropic
    model: model id (MODEL_ID in the environment takes precedence)
    max_tokens: output token budget
    temperature: sampling temperature
    template: default review template name
    exclude: list of path patterns always excluded from the diff
"""

from pathlib import Path
from typing import Optional

import yaml


CONFIG_FILE_NAME = ".gitreview.yaml"


class UserConfigError(Exception):
    """Raised when the repo configuration file cannot be read."""

    pass


def get_config_file(root: Path) -> Path:
    """Return path to the .gitreview.yaml file.

    Args:
        root: Directory gitreview is run from.

    Returns:
        Path to .gitreview.yaml.
    """
    return root / CONFIG_FILE_NAME


def load_user_config(root: Path) -> dict:
    """Load the gitreview configuration from .gitreview.yaml.

    Args:
        root: Directory gitreview is run from.

    Returns:
        Configuration dictionary. Empty dict if the file doesn't exist.

    Raises:
        UserConfigError: If the file exists but is not a valid YAML mapping.
    """
    config_file = get_config_file(root)

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise UserConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise UserConfigError(f"Config file {config_file} must contain a mapping")
    return config


def get_default_excludes(root: Path) -> list[str]:
    """Get the exclude patterns configured for the repository.

    Args:
        root: Directory gitreview is run from.

    Returns:
        List of path patterns, empty if none are configured or the file is invalid.
    """
    try:
        config = load_user_config(root)
    except UserConfigError:
        return []
    patterns = config.get("exclude") or []
    if isinstance(patterns, str):
        return [patterns]
    return [str(p) for p in patterns]


def get_default_template(root: Path) -> Optional[str]:
    """Get the review template configured for the repository, if any."""
    try:
        config = load_user_config(root)
    except UserConfigError:
        return None
    template = config.get("template")
    return str(template) if template else None
