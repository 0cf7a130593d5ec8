"""
Track record building and rendering

A TrackRecord is built once from reconciled fields and rendered in one of
two shapes:

* basic: flat, rounded duration with an M:SS string, genres joined with
  ", ", artwork reduced to a has_album_art flag
* full: nested ``metadata`` object with the unrounded duration, the genre
  list, the sample rate and the artwork as base64 text
"""

import base64
from typing import Any, Dict, Optional

from .models import EmbeddedPicture, OutputShape, ReconciledFields, TrackRecord
from ..utils.text import format_duration, generate_track_id, round_duration


DEFAULT_ART_DESCRIPTION = "Album Art"


def build_track_url(base_dir: str, filename: str) -> str:
    """Relative url of a track, "/<base_dir>/<filename>"; no filesystem access"""
    base_dir = base_dir.strip('/')
    if not base_dir:
        return f"/{filename}"
    return f"/{base_dir}/{filename}"


def build_track_record(fields: ReconciledFields, filename: str, base_dir: str,
                       shape: OutputShape = OutputShape.BASIC) -> TrackRecord:
    """Assemble the public record of one track"""
    return TrackRecord(
        id=generate_track_id(fields.artist, fields.title),
        filename=filename,
        url=build_track_url(base_dir, filename),
        fields=fields,
        shape=OutputShape(shape),
    )


def render_track(record: TrackRecord) -> Dict[str, Any]:
    """Render a record in its configured shape"""
    if record.shape is OutputShape.FULL:
        return _render_full(record)
    return _render_basic(record)


def _render_basic(record: TrackRecord) -> Dict[str, Any]:
    fields = record.fields
    duration = round_duration(fields.duration)

    return {
        'id': record.id,
        'artist': fields.artist,
        'title': fields.title,
        'album': fields.album,
        'year': fields.year,
        'genre': ", ".join(fields.genre) if fields.genre else None,
        'duration': duration,
        'duration_formatted': format_duration(duration),
        'bitrate': fields.bitrate,
        'has_album_art': fields.has_album_art,
        'filename': record.filename,
        'url': record.url,
    }


def _render_full(record: TrackRecord) -> Dict[str, Any]:
    fields = record.fields

    return {
        'id': record.id,
        'artist': fields.artist,
        'title': fields.title,
        'filename': record.filename,
        'url': record.url,
        'metadata': {
            'title': fields.title,
            'artist': fields.artist,
            'album': fields.album,
            'year': fields.year,
            'genre': list(fields.genre) if fields.genre else None,
            'duration': float(fields.duration) if fields.duration is not None else None,
            'bitrate': fields.bitrate,
            'sampleRate': fields.sample_rate,
            'albumArt': render_album_art(fields.picture),
        },
    }


def render_album_art(picture: Optional[EmbeddedPicture]) -> Optional[Dict[str, str]]:
    """Artwork as format, base64 data and description"""
    if picture is None:
        return None

    return {
        'format': picture.format,
        'data': base64.b64encode(picture.data).decode('ascii'),
        'description': picture.description or DEFAULT_ART_DESCRIPTION,
    }
