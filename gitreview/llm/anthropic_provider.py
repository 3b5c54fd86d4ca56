"""Anthropic Claude provider implementation."""

from anthropic import Anthropic

from gitreview.config import (
    API_KEY_ENV_VARS,
    LLMProvider,
)
import gitreview.config as _config
from gitreview.llm.base import (
    BaseLLMProvider,
    LLMResult,
    ensure_text,
)
from gitreview.llm.exceptions import LLMError, MissingAPIKeyError
from gitreview.prompts import SYSTEM_PROMPT


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    def __init__(self, model: str | None = None):
        """Initialize the Anthropic provider.

        Args:
            model: The model to use. Defaults to ACTIVE_MODEL from config.
        """
        self.model = model or _config.ACTIVE_MODEL
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.ANTHROPIC]

    def get_api_key(self) -> str:
        """Get the Anthropic API key from the environment.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If ANTHROPIC_API_KEY is not found.
        """
        return self._get_api_key_from_env(self.api_key_env_var, "Anthropic")

    def generate(self, prompt: str) -> LLMResult:
        """Generate a review using Anthropic Claude.

        Args:
            prompt: The complete review prompt.

        Returns:
            An LLMResult containing the review text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors.
        """
        api_key = self.get_api_key()

        # Create the Anthropic client
        client = Anthropic(api_key=api_key)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=_config.MAX_TOKENS,
                temperature=_config.TEMPERATURE,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )

            # Concatenate text blocks, skipping anything else the model returns
            raw_response = "".join(
                block.text for block in message.content if getattr(block, "type", "text") == "text"
            )

            input_tokens = message.usage.input_tokens
            output_tokens = message.usage.output_tokens

        except MissingAPIKeyError:
            raise
        except Exception as e:
            raise LLMError(f"Anthropic API call failed: {e}")

        return LLMResult(
            text=ensure_text(raw_response, "Anthropic"),
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
