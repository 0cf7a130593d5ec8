"""
Tag Extraction Service

Reads embedded metadata from audio files with mutagen and returns it as a
RawTags bundle. Format-specific handling:
1. ID3 frames (MP3, AIFF, WAV)
2. Vorbis comments and FLAC/Ogg picture blocks
3. MP4 atoms (M4A/AAC)

The pipeline only depends on the TagExtractor protocol, so tests and other
callers can plug in any object with a matching ``extract`` method.
"""

import base64
import re
from typing import Any, List, Optional, Protocol, Tuple

from mutagen import File as MutagenFile
from mutagen.flac import Picture
from mutagen.id3 import ID3
from mutagen.mp4 import MP4Cover, MP4Tags

from ..core.exceptions import ExtractionError
from ..core.models import EmbeddedPicture, RawTags


class TagExtractor(Protocol):
    """Capability consumed by the catalog engine"""

    def extract(self, filepath: str) -> RawTags:
        """Return the tags of ``filepath`` or raise ExtractionError"""
        ...


MP4_COVER_FORMATS = {
    MP4Cover.FORMAT_JPEG: 'image/jpeg',
    MP4Cover.FORMAT_PNG: 'image/png',
}


class MutagenTagExtractor:
    """
    Tag extractor backed by mutagen

    Any failure while opening or decoding a file is reported as an
    ExtractionError carrying the file path.
    """

    def extract(self, filepath: str) -> RawTags:
        """
        Extract tags and stream information from an audio file

        Args:
            filepath: Path to audio file

        Returns:
            RawTags with every field mutagen could read

        Raises:
            ExtractionError: If the file cannot be parsed
        """
        try:
            audio_file = MutagenFile(filepath)
        except Exception as e:
            raise ExtractionError(
                f"Could not read audio file: {str(e)}",
                details=type(e).__name__,
                filepath=filepath
            )

        if audio_file is None:
            raise ExtractionError("Unsupported or unrecognized audio format", filepath=filepath)

        try:
            values = self._read_stream_info(getattr(audio_file, 'info', None))

            tags = getattr(audio_file, 'tags', None)
            if tags:
                if isinstance(tags, ID3):
                    values.update(self._read_id3_tags(tags))
                elif isinstance(tags, MP4Tags):
                    values.update(self._read_mp4_tags(tags))
                else:
                    values.update(self._read_vorbis_tags(tags))

            # FLAC keeps artwork in metadata blocks rather than in the comments
            if values.get('picture') is None and getattr(audio_file, 'pictures', None):
                values['picture'] = self._picture_from_flac(audio_file.pictures[0])

            return RawTags(**values)

        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(
                f"Tag decoding failed: {str(e)}",
                details=type(e).__name__,
                filepath=filepath
            )

    def _read_stream_info(self, info) -> dict:
        """Duration, bitrate and sample rate from the stream header"""
        if info is None:
            return {}
        return {
            'duration': getattr(info, 'length', None),
            'bitrate': getattr(info, 'bitrate', None),
            'sample_rate': getattr(info, 'sample_rate', None),
        }

    def _read_id3_tags(self, tags) -> dict:
        """Map ID3 frames to RawTags fields"""
        genre = None
        if 'TCON' in tags:
            genre = self._clean_list(tags['TCON'].genres)

        picture = None
        frames = tags.getall('APIC')
        if frames:
            frame = frames[0]
            picture = EmbeddedPicture(
                format=frame.mime,
                data=bytes(frame.data),
                description=frame.desc or None
            )

        return {
            'title': self._get_text_frame(tags, ['TIT2']),
            'artist': self._get_text_frame(tags, ['TPE1']),
            'album': self._get_text_frame(tags, ['TALB']),
            'year': self._parse_year(self._get_text_frame(tags, ['TDRC', 'TYER', 'TDOR'])),
            'genre': genre,
            'picture': picture,
        }

    def _read_vorbis_tags(self, tags) -> dict:
        """Map Vorbis comments (FLAC, Ogg) or any list-valued tag mapping"""
        picture = None
        blocks = self._get_list(tags, ['metadata_block_picture', 'METADATA_BLOCK_PICTURE'])
        if blocks:
            picture = self._picture_from_flac(Picture(base64.b64decode(blocks[0])))

        return {
            'title': self._first(self._get_list(tags, ['title', 'TITLE'])),
            'artist': self._first(self._get_list(tags, ['artist', 'ARTIST'])),
            'album': self._first(self._get_list(tags, ['album', 'ALBUM'])),
            'year': self._parse_year(self._first(self._get_list(tags, ['date', 'DATE', 'year', 'YEAR']))),
            'genre': self._clean_list(self._get_list(tags, ['genre', 'GENRE'])),
            'picture': picture,
        }

    def _read_mp4_tags(self, tags) -> dict:
        """Map MP4 atoms to RawTags fields"""
        picture = None
        covers = tags.get('covr')
        if covers:
            cover = covers[0]
            picture = EmbeddedPicture(
                format=MP4_COVER_FORMATS.get(getattr(cover, 'imageformat', None), 'image/jpeg'),
                data=bytes(cover)
            )

        return {
            'title': self._first(self._get_list(tags, ['\xa9nam'])),
            'artist': self._first(self._get_list(tags, ['\xa9ART'])),
            'album': self._first(self._get_list(tags, ['\xa9alb'])),
            'year': self._parse_year(self._first(self._get_list(tags, ['\xa9day']))),
            'genre': self._clean_list(self._get_list(tags, ['\xa9gen'])),
            'picture': picture,
        }

    def _get_text_frame(self, tags, frame_ids: List[str]) -> Optional[str]:
        """First non-empty text of the first present ID3 frame"""
        for frame_id in frame_ids:
            if frame_id in tags:
                frame = tags[frame_id]
                texts = getattr(frame, 'text', None) or []
                value = self._first([str(text) for text in texts])
                if value:
                    return value
        return None

    def _get_list(self, tags, keys: List[str]) -> List[Any]:
        for key in keys:
            if key in tags:
                value = tags[key]
                return list(value) if isinstance(value, (list, tuple)) else [value]
        return []

    def _first(self, values: List[Any]) -> Optional[str]:
        for value in values:
            text = str(value).strip()
            if text:
                return text
        return None

    def _clean_list(self, values: List[Any]) -> Optional[Tuple[str, ...]]:
        cleaned = tuple(str(value).strip() for value in values if str(value).strip())
        return cleaned or None

    def _picture_from_flac(self, picture: Picture) -> EmbeddedPicture:
        return EmbeddedPicture(
            format=picture.mime,
            data=bytes(picture.data),
            description=picture.desc or None
        )

    def _parse_year(self, year_str: Optional[str]) -> Optional[int]:
        """Parse year from a date-like string"""
        if not year_str:
            return None

        # Extract 4-digit year
        year_match = re.search(r'(\d{4})', str(year_str))
        if year_match:
            return int(year_match.group(1))
        return None
