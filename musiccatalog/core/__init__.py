"""
Music Catalog Core Package

This package contains the data models, exceptions and the per-track and
collection-level pipeline steps.
"""

from .models import CatalogOptions, OutputShape, RawTags, TrackRecord
from .exceptions import MusicCatalogError, ProcessingError, ExtractionError

__all__ = [
    'CatalogOptions',
    'OutputShape',
    'RawTags',
    'TrackRecord',
    'MusicCatalogError',
    'ProcessingError',
    'ExtractionError'
]
