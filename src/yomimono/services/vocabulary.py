"""Vocabulary Service - story content to word list.

Runs the morphological analyzer and the word extraction pipeline for the
story handlers. The analyzer call is blocking, so it runs in a worker thread
under a timeout; extraction only starts once the whole token sequence is
available.

Usage:
    service = VocabularyService()
    result = await service.analyze(story.content)
    story.apply_extraction(result)
"""

from __future__ import annotations

import asyncio
import logging

from yomimono.core.config import get_settings
from yomimono.text import (
    AnalysisFailure,
    ExtractionResult,
    InvalidInput,
    Tokenizer,
    build_exclusion_set,
    extract_words,
    get_tokenizer,
)

logger = logging.getLogger(__name__)


class VocabularyService:
    """Extracts deduplicated vocabulary from story content."""

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        timeout_seconds: float | None = None,
        exclude: frozenset[str] | None = None,
    ):
        """Initialize the vocabulary service.

        Args:
            tokenizer: Analyzer adapter. Defaults to the cached Sudachi tokenizer.
            timeout_seconds: Limit for one analyzer call. Defaults to settings.
            exclude: Surface forms to drop. Defaults to the built-in set plus
                settings.extra_excluded_words.
        """
        settings = get_settings()
        self.tokenizer = tokenizer or get_tokenizer(settings.tokenizer_split_mode)
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.tokenizer_timeout_seconds
        )
        self.exclude = exclude if exclude is not None else build_exclusion_set(
            settings.extra_excluded_words
        )

    async def analyze(self, text: str) -> ExtractionResult:
        """Tokenize text and extract its vocabulary.

        Args:
            text: Story content

        Returns:
            Unique words in first-occurrence order with their count

        Raises:
            InvalidInput: If text is not a string
            AnalysisFailure: If the analyzer fails or exceeds the timeout
        """
        if not isinstance(text, str):
            raise InvalidInput(f"Expected text to be str, got {type(text).__name__}")

        try:
            tokens = await asyncio.wait_for(
                asyncio.to_thread(self.tokenizer.tokenize, text),
                timeout=self.timeout_seconds,
            )
        except TimeoutError as e:
            logger.warning(
                f"Morphological analysis timed out after {self.timeout_seconds}s "
                f"(len={len(text)})"
            )
            raise AnalysisFailure(
                f"Morphological analysis timed out after {self.timeout_seconds} seconds"
            ) from e

        result = extract_words(tokens, exclude=self.exclude)
        logger.debug(f"Extracted {result.word_count} words from {len(tokens)} tokens")
        return result


_default_service: VocabularyService | None = None


def get_vocabulary_service() -> VocabularyService:
    """FastAPI dependency returning the shared vocabulary service."""
    global _default_service
    if _default_service is None:
        _default_service = VocabularyService()
    return _default_service
