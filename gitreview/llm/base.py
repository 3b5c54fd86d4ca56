"""Base classes and shared utilities for LLM providers."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

from gitreview.llm.exceptions import LLMError, MissingAPIKeyError


@dataclass
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    text: str
    model: str
    input_tokens: int
    output_tokens: int


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    model: str
    api_key_env_var: str

    @abstractmethod
    def generate(self, prompt: str) -> LLMResult:
        """Generate a review for a fully substituted prompt.

        Args:
            prompt: The complete review prompt, including the diff.

        Returns:
            An LLMResult containing the generated text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors.
        """
        pass

    @abstractmethod
    def get_api_key(self) -> str:
        """Get the API key from the environment.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        pass

    def _get_api_key_from_env(self, env_var_name: str, provider_name: str) -> str:
        """Helper to read an API key from the environment (or a loaded .env file).

        Args:
            env_var_name: Environment variable name to check.
            provider_name: Human-readable provider name for error messages.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        api_key = os.getenv(env_var_name)
        if api_key:
            return api_key

        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var_name}=your_key_here\n"
            f"  2. A .env file in the current directory containing {env_var_name}=your_key_here"
        )


def ensure_text(raw_response: str | None, provider_name: str) -> str:
    """Check that a provider returned non-empty text.

    Args:
        raw_response: The text returned by the provider SDK.
        provider_name: Human-readable provider name for error messages.

    Returns:
        The text unchanged.

    Raises:
        LLMError: If the text is missing or blank.
    """
    if not raw_response or not raw_response.strip():
        raise LLMError(f"{provider_name} returned empty response")
    return raw_response
