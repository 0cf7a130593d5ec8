"""
Data models for Music Catalog

This module defines the data structures that flow through the catalog
pipeline: run options, raw tag bundles, reconciled fields, track records
and processing results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Any, Tuple
import os

from .exceptions import ConfigurationError


class OutputShape(str, Enum):
    """Rendering of track records in the collection document"""

    BASIC = "basic"
    FULL = "full"


@dataclass
class CatalogOptions:
    """Configuration options for a catalog run"""

    # Input / output
    input_dir: str = "./bedroompop"
    output_path: str = os.path.join("./api", "bedroompop.json")

    # Document envelope
    genre: str = "bedroompop"
    base_dir: Optional[str] = None  # defaults to the input directory name
    output_shape: OutputShape = OutputShape.BASIC

    # File selection
    extensions: Tuple[str, ...] = (".mp3",)

    # Processing
    workers: int = 1
    show_progress: bool = True

    def __post_init__(self):
        if not isinstance(self.output_shape, OutputShape):
            try:
                self.output_shape = OutputShape(str(self.output_shape).lower())
            except ValueError:
                choices = ", ".join(shape.value for shape in OutputShape)
                raise ConfigurationError(
                    f"Unknown output shape: {self.output_shape!r}",
                    details=f"Expected one of: {choices}"
                )
        self.extensions = tuple(
            ext.lower() if ext.startswith('.') else f".{ext.lower()}"
            for ext in self.extensions
        )

    @property
    def url_base_dir(self) -> str:
        """Directory name used in track urls and the document base_url"""
        # abspath so "." and "../x" resolve to a real directory name
        base = self.base_dir or os.path.basename(os.path.abspath(self.input_dir))
        return base.strip('/')

    @property
    def base_url(self) -> str:
        base = self.url_base_dir
        return f"/{base}/" if base else "/"

    def validate(self):
        """Raise ConfigurationError for options the pipeline cannot run with"""
        if not self.input_dir:
            raise ConfigurationError("Input directory is not configured")
        if not self.output_path:
            raise ConfigurationError("Output path is not configured")
        if not self.extensions:
            raise ConfigurationError("At least one audio file extension is required")
        if not isinstance(self.workers, int) or self.workers < 1:
            raise ConfigurationError(f"Workers must be a positive integer, got {self.workers!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        data = {
            field.name: getattr(self, field.name)
            for field in self.__dataclass_fields__.values()
        }
        data['output_shape'] = self.output_shape.value
        data['extensions'] = list(self.extensions)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CatalogOptions':
        """Create from dictionary"""
        # Filter only valid field names
        valid_fields = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_fields}
        if 'extensions' in filtered_data:
            filtered_data['extensions'] = tuple(filtered_data['extensions'])
        return cls(**filtered_data)


@dataclass(frozen=True)
class EmbeddedPicture:
    """Artwork embedded in an audio file"""

    format: str
    data: bytes
    description: Optional[str] = None


@dataclass(frozen=True)
class RawTags:
    """Best-effort tag bundle read from an audio file. Every field is optional."""

    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[Tuple[str, ...]] = None
    duration: Optional[float] = None
    bitrate: Optional[int] = None
    sample_rate: Optional[int] = None
    picture: Optional[EmbeddedPicture] = None


@dataclass(frozen=True)
class FilenameGuess:
    """Artist and title inferred from an on-disk filename"""

    artist: str
    title: str


@dataclass(frozen=True)
class ReconciledFields:
    """Per-track fields after merging tags with the filename guess"""

    artist: str
    title: str
    album: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[Tuple[str, ...]] = None
    duration: Optional[float] = None
    bitrate: Optional[int] = None
    sample_rate: Optional[int] = None
    picture: Optional[EmbeddedPicture] = None

    @property
    def has_album_art(self) -> bool:
        return self.picture is not None


@dataclass(frozen=True)
class TrackRecord:
    """Public record for one track, rendered according to its shape"""

    id: str
    filename: str
    url: str
    fields: ReconciledFields
    shape: OutputShape = OutputShape.BASIC

    @property
    def artist(self) -> str:
        return self.fields.artist

    @property
    def title(self) -> str:
        return self.fields.title

    @property
    def album(self) -> Optional[str]:
        return self.fields.album

    @property
    def has_album_art(self) -> bool:
        return self.fields.has_album_art


@dataclass(frozen=True)
class CollectionStats:
    """Summary counters for a collection"""

    total_tracks: int = 0
    tracks_with_album_art: int = 0
    unique_artists: int = 0
    unique_albums: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'total_tracks': self.total_tracks,
            'tracks_with_album_art': self.tracks_with_album_art,
            'unique_artists': self.unique_artists,
            'unique_albums': self.unique_albums,
        }


@dataclass
class TrackResult:
    """Result of processing a single file"""

    filepath: str = ""
    record: Optional[TrackRecord] = None
    tags_extracted: bool = False
    error: Optional[str] = None
    processing_time: float = 0.0


@dataclass
class CatalogSummary:
    """Result of a complete catalog run"""

    document: Dict[str, Any] = field(default_factory=dict)
    output_path: str = ""
    files_processed: int = 0
    extraction_failures: int = 0
    stats: CollectionStats = field(default_factory=CollectionStats)
    output_size_bytes: int = 0
    processing_time: float = 0.0
    results: List[TrackResult] = field(default_factory=list)
