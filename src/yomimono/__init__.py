"""Yomimono - Japanese reading stories with extracted vocabulary.

Stories are short Japanese passages. Whenever a story's content is created
or changed, it is run through a morphological analyzer and reduced to a
deduplicated list of words with their readings.

Quick Start:
    from yomimono import SudachiTokenizer, extract_words

    tokens = SudachiTokenizer().tokenize("猫は可愛い")
    result = extract_words(tokens)
    print(result.word_count, [w.original for w in result.words])
"""

__version__ = "0.1.0"

from yomimono.text import (
    AnalysisFailure,
    ExtractionResult,
    InvalidInput,
    RawToken,
    SudachiTokenizer,
    Word,
    extract_words,
    extract_words_from_text,
)
from yomimono.services import VocabularyService

__all__ = [
    # Version
    "__version__",
    # Text processing
    "RawToken",
    "SudachiTokenizer",
    "Word",
    "ExtractionResult",
    "extract_words",
    "extract_words_from_text",
    "AnalysisFailure",
    "InvalidInput",
    # Services
    "VocabularyService",
]
