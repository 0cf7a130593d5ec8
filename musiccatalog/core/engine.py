"""
Music Catalog - Core Processing Engine

Runs one audio file through the per-track pipeline: filename fallback,
tag extraction, reconciliation and record building. A file whose tags
cannot be read still produces a record built from its filename.
"""

import os
import time
import threading
from typing import Dict, Optional

from ..utils.logging_config import get_logger
from ..utils.text import display_text, parse_filename

from .models import CatalogOptions, RawTags, TrackResult
from .reconciler import reconcile_fields
from .records import build_track_record


class CatalogEngine:
    """
    Per-file processing engine

    Safe to share between worker threads: the only mutable state is the
    counters, guarded by a lock.
    """

    def __init__(self, extractor, options: CatalogOptions):
        """
        Initialize the processing engine

        Args:
            extractor: Object with ``extract(filepath) -> RawTags``
            options: Catalog options (base dir and output shape are used here)
        """
        self.extractor = extractor
        self.options = options
        self.logger = get_logger('engine')

        # Thread safety
        self._lock = threading.Lock()

        self.engine_stats = {
            'files_processed': 0,
            'extraction_failures': 0,
            'total_processing_time': 0.0,
        }

        self.logger.debug(f"Processing engine initialized with {type(extractor).__name__}")

    def process_file(self, filepath: str) -> TrackResult:
        """
        Process a single audio file

        The real path is handed to the extractor; the record gets a
        printable version of the filename, so undecodable bytes in a name
        never reach the JSON document.

        Args:
            filepath: Path to the audio file

        Returns:
            TrackResult holding the track record and the extraction outcome
        """
        start_time = time.time()
        filename = display_text(os.path.basename(filepath))

        result = TrackResult(filepath=filepath)

        guess = parse_filename(filename)
        tags = self._extract_tags(filepath, filename, result)

        fields = reconcile_fields(tags, guess)
        result.record = build_track_record(
            fields,
            filename,
            self.options.url_base_dir,
            self.options.output_shape,
        )
        result.processing_time = time.time() - start_time

        with self._lock:
            self.engine_stats['files_processed'] += 1
            self.engine_stats['total_processing_time'] += result.processing_time
            if not result.tags_extracted:
                self.engine_stats['extraction_failures'] += 1

        album = f" ({fields.album})" if fields.album else ""
        self.logger.info(f"✓ Processed: {fields.artist} - {fields.title}{album}")

        return result

    def _extract_tags(self, filepath: str, filename: str, result: TrackResult) -> Optional[RawTags]:
        """Read tags; any failure degrades the file to filename-only data"""
        self.logger.debug(f"Extracting metadata from: {filename}")

        try:
            tags = self.extractor.extract(filepath)
        except Exception as e:
            result.error = display_text(str(e))
            self.logger.warning(f"Error extracting metadata from {filename}: {result.error}")
            return None

        result.tags_extracted = True
        return tags

    def get_stats(self) -> Dict[str, float]:
        """Snapshot of the engine counters"""
        with self._lock:
            stats = dict(self.engine_stats)

        processed = stats['files_processed']
        stats['average_processing_time'] = (
            stats['total_processing_time'] / processed if processed else 0.0
        )
        return stats
