"""Review orchestration for gitreview.

Ties the cache, the template loader and the LLM provider together:
cache lookup first, then prompt building and generation on a miss, then
storing the new review.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from gitreview.cache import ReviewCache
from gitreview.llm import BaseLLMProvider
from gitreview.options import ReviewOptions
from gitreview.output import format_review_sections
from gitreview.prompts import build_prompt, load_template

logger = logging.getLogger(__name__)


@dataclass
class ReviewResult:
    """A review and where it came from."""

    review: str
    cached: bool
    input_tokens: int = 0
    output_tokens: int = 0


def get_ai_review(
    diff: str,
    options: ReviewOptions,
    cache: ReviewCache,
    provider: BaseLLMProvider,
    templates_dir: Optional[Path] = None,
) -> ReviewResult:
    """Get an AI review of a diff, using the cache when possible.

    Args:
        diff: The diff to review.
        options: The review options.
        cache: The review cache.
        provider: The LLM provider used on a cache miss.
        templates_dir: Directory holding user templates. Defaults to ./prompts.

    Returns:
        A ReviewResult with the review text.

    Raises:
        MissingAPIKeyError: If the provider API key is not set.
        LLMError: If generation fails.
    """
    cache_key = cache.derive_key(diff, options)

    if options.regenerate:
        logger.debug("Skipping cache lookup for %s", cache_key)
    else:
        cached_review = cache.get(cache_key, options)
        if cached_review:
            logger.debug("Cache hit for %s", cache_key)
            return ReviewResult(review=cached_review, cached=True)

    template = load_template(options.template, templates_dir)
    prompt = build_prompt(template, diff, options.focus, options.ignore)

    result = provider.generate(prompt)
    review = format_review_sections(result.text)
    logger.debug(
        "Generated review with %s (%d input / %d output tokens)",
        result.model,
        result.input_tokens,
        result.output_tokens,
    )

    cache.put(cache_key, review, options)

    return ReviewResult(
        review=review,
        cached=False,
        input_tokens=result.input_tokens,
        output_tokens=result.output_tokens,
    )
