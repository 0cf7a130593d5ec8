"""
Collection aggregation

Sorts track records, computes collection statistics and assembles the
document envelope. Nothing here touches the filesystem; the returned
document is a plain dict ready for ``json.dump``.
"""

import locale
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from .models import CollectionStats, OutputShape, TrackRecord
from .records import render_track


def _collation_key(text: str) -> str:
    return locale.strxfrm(text)


def sort_tracks(records: Iterable[TrackRecord]) -> List[TrackRecord]:
    """
    Sort by artist, then title, ascending

    Comparison follows the active locale's collation (plain code point
    order under the default C locale). The sort is stable, so records with
    the same artist and title keep their arrival order.
    """
    return sorted(
        records,
        key=lambda record: (_collation_key(record.artist), _collation_key(record.title))
    )


def compute_stats(records: Iterable[TrackRecord]) -> CollectionStats:
    """Counters over the whole collection; artist/album matching is exact"""
    records = list(records)

    return CollectionStats(
        total_tracks=len(records),
        tracks_with_album_art=sum(1 for record in records if record.has_album_art),
        unique_artists=len({record.artist for record in records}),
        unique_albums=len({record.album for record in records if record.album}),
    )


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 timestamp with UTC offset and millisecond precision"""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec='milliseconds')


def build_collection_document(records: Iterable[TrackRecord], genre: str, base_url: str,
                              shape: OutputShape = OutputShape.BASIC,
                              clock: Optional[Callable[[], datetime]] = None) -> Dict[str, Any]:
    """
    Assemble the collection document

    Args:
        records: Track records in arrival order
        genre: Fixed genre tag of the collection
        base_url: Url prefix of the collection, e.g. "/bedroompop/"
        shape: Output shape; only the basic shape carries a stats block
        clock: Returns the generation time (defaults to the current UTC time)

    Returns:
        Document dict
    """
    tracks = sort_tracks(records)
    generated_at = clock() if clock else None

    document = {
        'genre': genre,
        'total_tracks': len(tracks),
        'base_url': base_url,
        'last_updated': utc_timestamp(generated_at),
    }

    if OutputShape(shape) is OutputShape.BASIC:
        document['stats'] = compute_stats(tracks).to_dict()

    document['tracks'] = [render_track(record) for record in tracks]
    return document
