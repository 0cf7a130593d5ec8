"""
Music Catalog Utilities Package

This package contains utility functions used throughout the application.
"""

from .text import parse_filename, generate_track_id, format_duration
from .filesystem import ensure_directory, find_audio_files, write_json_document

__all__ = [
    'parse_filename',
    'generate_track_id',
    'format_duration',
    'ensure_directory',
    'find_audio_files',
    'write_json_document'
]
