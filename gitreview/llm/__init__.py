"""LLM provider module for gitreview.

This module provides a unified interface to the supported LLM providers.
The active provider and model are configured in gitreview/config.py.
"""

from dotenv import load_dotenv

import gitreview.config as _config
from gitreview.config import LLMProvider
from gitreview.llm.base import BaseLLMProvider, LLMResult
from gitreview.llm.exceptions import LLMError, MissingAPIKeyError

# Load environment variables from .env file
load_dotenv()


def get_provider(
    provider: LLMProvider | None = None,
    model: str | None = None,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use. Defaults to ACTIVE_PROVIDER from config.
        model: The model to use. Defaults to ACTIVE_MODEL from config.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    provider = provider or _config.ACTIVE_PROVIDER
    model = model or _config.ACTIVE_MODEL

    if provider == LLMProvider.GOOGLE:
        from gitreview.llm.google_provider import GoogleProvider

        return GoogleProvider(model=model)

    elif provider == LLMProvider.OPENAI:
        from gitreview.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(model=model)

    elif provider == LLMProvider.ANTHROPIC:
        from gitreview.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(model=model)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "LLMResult",
    "get_provider",
]
