"""Morphological analysis adapter backed by SudachiPy.

Turns free-form Japanese text into an ordered list of ``RawToken`` records.
The analyzer is treated as a black box: any failure it raises is wrapped in
``AnalysisFailure`` and propagated to the caller.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from sudachipy import Dictionary, SplitMode

from .errors import AnalysisFailure, InvalidInput

logger = logging.getLogger(__name__)

_SPLIT_MODES = {
    "A": SplitMode.A,
    "B": SplitMode.B,
    "C": SplitMode.C,
}

# Sudachi refuses a single input longer than this many UTF-8 bytes
MAX_INPUT_BYTES = 49149

# Split after line breaks and sentence-ending punctuation, keeping the delimiter
_BREAK_RE = re.compile(r"(?<=[\n。！？!?])")


def _hard_split(segment: str, max_bytes: int) -> list[str]:
    pieces: list[str] = []
    current: list[str] = []
    size = 0
    for ch in segment:
        ch_size = len(ch.encode("utf-8"))
        if current and size + ch_size > max_bytes:
            pieces.append("".join(current))
            current, size = [], 0
        current.append(ch)
        size += ch_size
    if current:
        pieces.append("".join(current))
    return pieces


def split_for_analysis(text: str, max_bytes: int = MAX_INPUT_BYTES) -> list[str]:
    """Split text into pieces the analyzer accepts, preserving order.

    Pieces end at line or sentence breaks where possible. A single sentence
    longer than ``max_bytes`` is cut between characters.
    """
    if len(text.encode("utf-8")) <= max_bytes:
        return [text]

    chunks: list[str] = []
    current: list[str] = []
    size = 0
    for segment in _BREAK_RE.split(text):
        if not segment:
            continue
        seg_size = len(segment.encode("utf-8"))
        if seg_size > max_bytes:
            if current:
                chunks.append("".join(current))
                current, size = [], 0
            chunks.extend(_hard_split(segment, max_bytes))
            continue
        if current and size + seg_size > max_bytes:
            chunks.append("".join(current))
            current, size = [], 0
        current.append(segment)
        size += seg_size
    if current:
        chunks.append("".join(current))
    return chunks


@dataclass(frozen=True)
class RawToken:
    """One word as reported by the analyzer."""

    surface: str
    reading: str = ""
    dictionary_form: str = ""
    part_of_speech: tuple[str, ...] = ()


class Tokenizer(Protocol):
    """Anything that can split text into raw tokens."""

    def tokenize(self, text: str) -> Sequence[RawToken]: ...


class SudachiTokenizer:
    """Tokenizer backed by a Sudachi system dictionary.

    The dictionary is loaded on first use. Each thread gets its own Sudachi
    tokenizer object created from the shared dictionary.

    Usage:
        tokenizer = SudachiTokenizer(split_mode="C")
        tokens = tokenizer.tokenize("猫は可愛い")
    """

    def __init__(self, split_mode: str = "C", dict_type: str | None = None):
        """Initialize the tokenizer.

        Args:
            split_mode: Sudachi split mode, "A" (shortest) to "C" (longest)
            dict_type: Dictionary edition ("core", "small", "full"); None uses
                the installed default
        """
        mode = _SPLIT_MODES.get(split_mode.upper())
        if mode is None:
            raise ValueError(f"Unknown Sudachi split mode: {split_mode!r}")
        self.split_mode = split_mode.upper()
        self.dict_type = dict_type
        self._mode = mode
        self._dictionary: Dictionary | None = None
        self._dictionary_lock = threading.Lock()
        self._local = threading.local()

    def _get_dictionary(self) -> Dictionary:
        with self._dictionary_lock:
            if self._dictionary is None:
                if self.dict_type:
                    self._dictionary = Dictionary(dict=self.dict_type)
                else:
                    self._dictionary = Dictionary()
            return self._dictionary

    def _get_sudachi(self):
        sudachi = getattr(self._local, "sudachi", None)
        if sudachi is None:
            sudachi = self._get_dictionary().tokenizer(mode=self._mode)
            self._local.sudachi = sudachi
        return sudachi

    def tokenize(self, text: str) -> list[RawToken]:
        """Split text into tokens in the order they appear.

        Args:
            text: Arbitrary text, may be empty

        Returns:
            One RawToken per non-whitespace morpheme, across all pieces

        Raises:
            InvalidInput: If text is not a string
            AnalysisFailure: If the analyzer cannot be loaded or fails
        """
        if not isinstance(text, str):
            raise InvalidInput(f"Expected text to be str, got {type(text).__name__}")
        if not text.strip():
            return []

        try:
            sudachi = self._get_sudachi()
            tokens = []
            for chunk in split_for_analysis(text):
                for m in sudachi.tokenize(chunk, self._mode):
                    surface = m.surface()
                    # Sudachi reports whitespace runs as morphemes
                    if not surface.strip():
                        continue
                    tokens.append(
                        RawToken(
                            surface=surface,
                            reading=m.reading_form() or "",
                            dictionary_form=m.dictionary_form(),
                            part_of_speech=tuple(m.part_of_speech()),
                        )
                    )
            return tokens
        except Exception as e:
            logger.error(
                f"Morphological analysis failed for text (len={len(text)}): {e}",
                exc_info=True,
            )
            raise AnalysisFailure(f"Morphological analysis failed: {e}") from e


@lru_cache
def get_tokenizer(split_mode: str = "C") -> SudachiTokenizer:
    """Get the cached process-wide tokenizer for a split mode."""
    return SudachiTokenizer(split_mode=split_mode)
