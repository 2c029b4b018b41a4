"""Backend services for Yomimono.

Services:
- vocabulary: morphological analysis and word extraction for story content
"""

from .vocabulary import VocabularyService, get_vocabulary_service

__all__ = [
    "VocabularyService",
    "get_vocabulary_service",
]
