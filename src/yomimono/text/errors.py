"""Errors raised by the text processing layer."""


class TextProcessingError(Exception):
    """Base class for tokenization and word extraction errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AnalysisFailure(TextProcessingError):
    """The morphological analyzer was unavailable, failed, or timed out."""


class InvalidInput(TextProcessingError, TypeError):
    """Malformed input handed to the tokenizer or the extraction pipeline.

    Signals a defect in the calling code rather than a runtime condition,
    so it is never retried.
    """
