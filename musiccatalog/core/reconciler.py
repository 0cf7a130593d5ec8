"""
Field reconciliation

Merges the tags read from a file with the artist/title guessed from its
filename. Tag values always win when present; the filename only ever
supplies artist and title.
"""

from numbers import Number
from typing import Any, Optional

from .models import FilenameGuess, RawTags, ReconciledFields


def is_present(value: Any) -> bool:
    """
    Whether an extracted value counts as supplied

    None, empty strings, empty sequences and numeric zero are treated as
    missing (mutagen reports 0 for an unknown length or bitrate).
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, Number):
        return value != 0
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return True


def _pick(value: Any) -> Optional[Any]:
    return value if is_present(value) else None


def reconcile_fields(tags: Optional[RawTags], guess: FilenameGuess) -> ReconciledFields:
    """
    Merge extracted tags with the filename guess

    Args:
        tags: Extracted tags, or None when extraction failed
        guess: Artist/title parsed from the filename

    Returns:
        ReconciledFields with artist and title always set
    """
    if tags is None:
        return ReconciledFields(artist=guess.artist, title=guess.title)

    genre = None
    if is_present(tags.genre):
        genre = tuple(tags.genre)

    return ReconciledFields(
        artist=tags.artist if is_present(tags.artist) else guess.artist,
        title=tags.title if is_present(tags.title) else guess.title,
        album=_pick(tags.album),
        year=_pick(tags.year),
        genre=genre,
        duration=_pick(tags.duration),
        bitrate=_pick(tags.bitrate),
        sample_rate=_pick(tags.sample_rate),
        picture=tags.picture,
    )
