"""Japanese text processing.

This package contains:
- The SudachiPy tokenizer adapter
- The exclusion lists for single kana, punctuation and fragments
- Word extraction (filter + dedup) over analyzer tokens
"""

from .errors import AnalysisFailure, InvalidInput, TextProcessingError
from .exclusions import EXCLUSION_SET, build_exclusion_set
from .extraction import ExtractionResult, Word, extract_words, extract_words_from_text
from .tokenizer import RawToken, SudachiTokenizer, Tokenizer, get_tokenizer

__all__ = [
    # Errors
    "TextProcessingError",
    "AnalysisFailure",
    "InvalidInput",
    # Exclusions
    "EXCLUSION_SET",
    "build_exclusion_set",
    # Tokenizer
    "RawToken",
    "Tokenizer",
    "SudachiTokenizer",
    "get_tokenizer",
    # Extraction
    "Word",
    "ExtractionResult",
    "extract_words",
    "extract_words_from_text",
]
