"""Word extraction from analyzer tokens.

Filters out single kana, punctuation and auxiliary fragments, then
deduplicates the remaining tokens on their (surface, reading) pair while
keeping first-seen order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .errors import InvalidInput
from .exclusions import EXCLUSION_SET
from .tokenizer import RawToken, Tokenizer


@dataclass(frozen=True)
class Word:
    """A vocabulary entry extracted from a story."""

    original: str
    reading: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"original": self.original, "reading": self.reading}


@dataclass(frozen=True)
class ExtractionResult:
    """Deduplicated words of a text plus their count."""

    words: tuple[Word, ...] = ()
    word_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "words": [word.to_dict() for word in self.words],
            "wordCount": self.word_count,
        }


def _ensure_token_sequence(tokens: Any) -> Iterable[Any]:
    if tokens is None:
        raise InvalidInput("Token sequence must not be None")
    if isinstance(tokens, (str, bytes, dict)):
        raise InvalidInput(f"Expected a sequence of tokens, got {type(tokens).__name__}")
    try:
        return iter(tokens)
    except TypeError:
        raise InvalidInput(
            f"Expected a sequence of tokens, got {type(tokens).__name__}"
        ) from None


def extract_words(
    tokens: Iterable[RawToken],
    *,
    exclude: frozenset[str] = EXCLUSION_SET,
) -> ExtractionResult:
    """Build the word list for a token sequence.

    Args:
        tokens: Tokens in text order
        exclude: Surface forms to drop, matched exactly

    Returns:
        Unique words in first-occurrence order with their count

    Raises:
        InvalidInput: If tokens is not a sequence of token records
    """
    words: list[Word] = []
    seen: set[Word] = set()

    for token in _ensure_token_sequence(tokens):
        surface = getattr(token, "surface", None)
        if not isinstance(surface, str):
            raise InvalidInput(f"Malformed token: {token!r}")
        if surface in exclude:
            continue

        word = Word(original=surface, reading=getattr(token, "reading", None) or "")
        if word in seen:
            continue
        seen.add(word)
        words.append(word)

    return ExtractionResult(words=tuple(words), word_count=len(words))


def extract_words_from_text(
    text: str,
    tokenizer: Tokenizer,
    *,
    exclude: frozenset[str] = EXCLUSION_SET,
) -> ExtractionResult:
    """Tokenize text and extract its words in one synchronous call."""
    return extract_words(tokenizer.tokenize(text), exclude=exclude)
