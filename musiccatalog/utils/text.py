"""
Text processing utilities for Music Catalog

This module holds the string handling used by the catalog pipeline:
filename fallback parsing, track identifier (slug) generation and
duration formatting.
"""

import math
import os
import re
from typing import Optional

from ..core.models import FilenameGuess


UNKNOWN_ARTIST = "Unknown Artist"
FILENAME_SEPARATOR = " - "

_INVALID_SLUG_CHARS = re.compile(r'[^a-z0-9\s-]')
_WHITESPACE_RUN = re.compile(r'\s+')
_HYPHEN_RUN = re.compile(r'-+')


def display_text(text: str) -> str:
    """
    Make text safe to encode as UTF-8

    Names listed from disk keep undecodable bytes as lone surrogates
    (surrogateescape); those bytes become U+FFFD here.
    """
    return text.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace')


def parse_filename(filename: str) -> FilenameGuess:
    """
    Derive a best-guess artist and title from an "Artist - Title" filename

    The extension is stripped first. Text before the first separator is the
    artist and everything after it is the title, so "A - B - Remix.mp3"
    gives ("A", "B - Remix").

    Args:
        filename: Bare filename (no directory part)

    Returns:
        FilenameGuess, never fails
    """
    stem = os.path.splitext(filename)[0]
    artist, separator, title = stem.partition(FILENAME_SEPARATOR)

    if not separator:
        return FilenameGuess(artist=UNKNOWN_ARTIST, title=stem)

    return FilenameGuess(artist=artist or UNKNOWN_ARTIST, title=title or stem)


def slugify(text: str) -> str:
    """
    Normalize text to a URL-safe slug

    Lowercases, drops everything outside [a-z0-9], whitespace and hyphens,
    turns whitespace runs into a hyphen, collapses hyphen runs and trims
    hyphens from both ends. Applying it to its own output is a no-op.
    """
    if not text:
        return ""

    slug = _INVALID_SLUG_CHARS.sub('', text.lower())
    slug = _WHITESPACE_RUN.sub('-', slug)
    slug = _HYPHEN_RUN.sub('-', slug)
    return slug.strip('-')


def generate_track_id(artist: str, title: str) -> str:
    """
    Generate the stable identifier of a track from its artist and title

    Two tracks with the same artist and title get the same id; no
    deduplication happens here.
    """
    return slugify(f"{artist}-{title}")


def round_duration(seconds: Optional[float]) -> Optional[int]:
    """Round a duration to whole seconds, halves rounding up"""
    if seconds is None:
        return None
    return int(math.floor(seconds + 0.5))


def format_duration(seconds: Optional[int]) -> Optional[str]:
    """Render whole seconds as M:SS (minutes are not wrapped into hours)"""
    if seconds is None:
        return None

    seconds = int(seconds)
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"
