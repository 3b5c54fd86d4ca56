"""OpenAI GPT provider implementation."""

from openai import OpenAI

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


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    def __init__(self, model: str | None = None):
        """Initialize the OpenAI provider.

        Args:
            model: The model to use. Defaults to ACTIVE_MODEL from config.
        """
        self.model = model or _config.ACTIVE_MODEL
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.OPENAI]

    def get_api_key(self) -> str:
        """Get the OpenAI API key from the environment.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If OPENAI_API_KEY is not set.
        """
        return self._get_api_key_from_env(self.api_key_env_var, "OpenAI")

    def generate(self, prompt: str) -> LLMResult:
        """Generate a review using OpenAI GPT.

        Args:
            prompt: The complete review prompt.

        Returns:
            An LLMResult containing the review text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors.
        """
        api_key = self.get_api_key()

        # Create the OpenAI client
        client = OpenAI(api_key=api_key)

        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=_config.MAX_TOKENS,
                temperature=_config.TEMPERATURE,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )

            raw_response = response.choices[0].message.content

            input_tokens = response.usage.prompt_tokens if response.usage else 0
            output_tokens = response.usage.completion_tokens if response.usage else 0

        except MissingAPIKeyError:
            raise
        except Exception as e:
            raise LLMError(f"OpenAI API call failed: {e}")

        return LLMResult(
            text=ensure_text(raw_response, "OpenAI"),
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
