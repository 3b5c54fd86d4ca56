"""Google Gemini provider implementation."""

from google import genai
from google.genai import types

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

# Gemini models whose internal reasoning is billed against max_output_tokens
THINKING_MODELS = [
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-2.0-flash-thinking",
]

# Output budget multiplier for thinking models
THINKING_TOKEN_MULTIPLIER = 3


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    def __init__(self, model: str | None = None):
        """Initialize the Google provider.

        Args:
            model: The model to use. Defaults to ACTIVE_MODEL from config.
        """
        self.model = model or _config.ACTIVE_MODEL
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.GOOGLE]

    def get_api_key(self) -> str:
        """Get the Google API key from the environment.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If GOOGLE_API_KEY is not found.
        """
        return self._get_api_key_from_env(self.api_key_env_var, "Google")

    def _is_thinking_model(self) -> bool:
        """Return True if the model reasons before answering."""
        return any(name in self.model.lower() for name in THINKING_MODELS)

    def _max_output_tokens(self) -> int:
        """Output token budget for this model, raised for thinking models."""
        if self._is_thinking_model():
            return _config.MAX_TOKENS * THINKING_TOKEN_MULTIPLIER
        return _config.MAX_TOKENS

    def generate(self, prompt: str) -> LLMResult:
        """Generate a review using Google Gemini.

        Args:
            prompt: The complete review prompt.

        Returns:
            An LLMResult containing the review text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors.
        """
        api_key = self.get_api_key()

        # Create the client with API key
        client = genai.Client(api_key=api_key)

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_PROMPT,
                    max_output_tokens=self._max_output_tokens(),
                    temperature=_config.TEMPERATURE,
                ),
            )
        except Exception as e:
            raise LLMError(f"Google Gemini API call failed: {e}")

        try:
            if not response.candidates:
                raise LLMError("Google Gemini returned no candidates in response")

            # Check finish reason - if it's not STOP, there might be an issue
            candidate = response.candidates[0]
            if getattr(candidate, "finish_reason", None) is not None:
                finish_reason = str(candidate.finish_reason)
                if "SAFETY" in finish_reason:
                    raise LLMError(f"Google Gemini blocked response due to safety filters: {finish_reason}")
                elif "MAX_TOKENS" in finish_reason:
                    raise LLMError("Google Gemini response was truncated due to max tokens limit. Try excluding files from the diff.")

            raw_response = ensure_text(response.text, "Google Gemini")

            input_tokens = 0
            output_tokens = 0
            usage = getattr(response, "usage_metadata", None)
            if usage:
                input_tokens = getattr(usage, "prompt_token_count", 0) or 0
                output_tokens = getattr(usage, "candidates_token_count", 0) or 0
                # Thinking tokens consume the output budget too
                output_tokens += getattr(usage, "thoughts_token_count", 0) or 0

        except MissingAPIKeyError:
            raise
        except LLMError:
            raise
        except Exception as e:
            raise LLMError(f"Google Gemini API call failed: {e}")

        return LLMResult(
            text=raw_response,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
