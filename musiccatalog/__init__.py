"""Music Catalog package for building JSON catalogs from tagged audio files.

This package reads embedded tags from a directory of audio files, falls back
to filename parsing where tags are missing, and writes one collection
document with per-track records and summary statistics.
"""

__all__ = ["catalog_builder"]
__version__ = "1.0.0"
