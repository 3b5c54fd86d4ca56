"""Configuration for gitreview.

Defaults live here as module-level values. ``load_config()`` overrides the
ACTIVE_* values from the repo config file (.gitreview.yaml) and then from
the environment, which always wins.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class LLMProvider(Enum):
    """Supported LLM providers."""

    GOOGLE = "google"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_PROVIDER = LLMProvider.GOOGLE
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_MAX_TOKENS = 8192
DEFAULT_TEMPERATURE = 0.2

# Environment variables
MODEL_ID_ENV_VAR = "MODEL_ID"
PROVIDER_ENV_VAR = "GITREVIEW_PROVIDER"

# Cache directory, relative to the current working directory
CACHE_DIR_NAME = ".gitreview-cache"


# ============================================================
# ACTIVE CONFIGURATION
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_PROVIDER = DEFAULT_PROVIDER
ACTIVE_MODEL = DEFAULT_MODEL
MAX_TOKENS = DEFAULT_MAX_TOKENS
TEMPERATURE = DEFAULT_TEMPERATURE


# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.GOOGLE: "GOOGLE_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
}


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[provider]


def get_model_id() -> str:
    """Return the model id currently in effect."""
    return ACTIVE_MODEL


def _parse_provider(value: str) -> Optional[LLMProvider]:
    try:
        return LLMProvider(value.strip().lower())
    except ValueError:
        logger.warning("Ignoring unknown provider %r", value)
        return None


def load_config(root: Optional[Path] = None) -> None:
    """Load configuration from the repo config file and the environment.

    Precedence: environment > .gitreview.yaml > defaults.
    This should be called by the CLI before using the LLM.

    Args:
        root: Directory holding .gitreview.yaml. Defaults to the current
            working directory.
    """
    global ACTIVE_PROVIDER, ACTIVE_MODEL, MAX_TOKENS, TEMPERATURE

    # Import here to avoid circular dependency
    from gitreview.user_config import UserConfigError, load_user_config

    root = root or Path.cwd()
    try:
        file_config = load_user_config(root)
    except UserConfigError as e:
        logger.warning("%s", e)
        file_config = {}

    if file_config.get("provider"):
        provider = _parse_provider(str(file_config["provider"]))
        if provider:
            ACTIVE_PROVIDER = provider
    if file_config.get("model"):
        ACTIVE_MODEL = str(file_config["model"])
    if file_config.get("max_tokens") is not None:
        try:
            MAX_TOKENS = int(file_config["max_tokens"])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid max_tokens %r", file_config["max_tokens"])
    if file_config.get("temperature") is not None:
        try:
            TEMPERATURE = float(file_config["temperature"])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid temperature %r", file_config["temperature"])

    env_provider = os.environ.get(PROVIDER_ENV_VAR)
    if env_provider:
        provider = _parse_provider(env_provider)
        if provider:
            ACTIVE_PROVIDER = provider

    env_model = os.environ.get(MODEL_ID_ENV_VAR)
    if env_model:
        ACTIVE_MODEL = env_model

    logger.debug("Using provider=%s model=%s", ACTIVE_PROVIDER.value, ACTIVE_MODEL)
