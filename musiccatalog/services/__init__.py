"""
Service Layer for Music Catalog

Wraps external collaborators behind narrow interfaces.
"""

from .tag_extractor import TagExtractor, MutagenTagExtractor

__all__ = [
    'TagExtractor',
    'MutagenTagExtractor'
]
