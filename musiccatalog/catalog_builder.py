"""
Music Catalog - Pipeline Driver

Orchestrates a complete catalog run:

1. List the audio files of the input directory
2. Run every file through the processing engine (sequentially or with a
   bounded thread pool)
3. Aggregate the track records into the collection document
4. Write the document to the configured output path

Per-file extraction errors are absorbed by the engine. A missing input
directory or an unwritable output path aborts the run.
"""

import os
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, List, Optional

from tqdm import tqdm

from .core.collection import build_collection_document, compute_stats
from .core.engine import CatalogEngine
from .core.exceptions import ProcessingError
from .core.models import CatalogOptions, CatalogSummary, TrackResult
from .services.tag_extractor import MutagenTagExtractor, TagExtractor
from .utils.filesystem import find_audio_files, write_json_document
from .utils.logging_config import get_app_logger, get_logger


class MusicCatalogBuilder:
    """
    Builds one collection document from one directory of audio files

    Every run starts from scratch and overwrites the output file; nothing
    is merged with a previous run.
    """

    def __init__(self, options: Optional[CatalogOptions] = None,
                 extractor: Optional[TagExtractor] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize the builder

        Args:
            options: Catalog options (defaults reproduce the bedroompop catalog)
            extractor: Tag extractor, mutagen-backed by default
            clock: Returns the generation time written to last_updated
        """
        self.options = options or CatalogOptions()
        self.options.validate()

        self.extractor = extractor or MutagenTagExtractor()
        self.clock = clock
        self.app_logger = get_app_logger()
        self.logger = get_logger('main')

    def build(self) -> CatalogSummary:
        """
        Run the pipeline and write the collection document

        Returns:
            CatalogSummary describing the run

        Raises:
            ProcessingError: If the input directory cannot be read
            FileOperationError: If the output cannot be written
        """
        options = self.options
        start_time = time.time()

        audio_files = find_audio_files(options.input_dir, options.extensions)
        self.logger.info(f"Found {len(audio_files)} audio files to process...")
        self.app_logger.log_batch_start(options.input_dir, len(audio_files), options.workers)

        # One engine per run so counters start at zero
        engine = CatalogEngine(self.extractor, options)

        if options.workers > 1 and len(audio_files) > 1:
            results = self._process_files_parallel(engine, audio_files)
        else:
            results = self._process_files_sequential(engine, audio_files)

        records = [result.record for result in results]
        document = build_collection_document(
            records,
            genre=options.genre,
            base_url=options.base_url,
            shape=options.output_shape,
            clock=self.clock,
        )

        output_size = write_json_document(document, options.output_path)

        engine_stats = engine.get_stats()
        self.logger.debug(
            f"Average processing time: {engine_stats['average_processing_time']:.3f}s per file"
        )

        summary = CatalogSummary(
            document=document,
            output_path=options.output_path,
            files_processed=engine_stats['files_processed'],
            extraction_failures=engine_stats['extraction_failures'],
            stats=compute_stats(records),
            output_size_bytes=output_size,
            processing_time=time.time() - start_time,
            results=results,
        )

        self.app_logger.log_batch_complete(
            options.input_dir, summary.files_processed,
            summary.extraction_failures, summary.processing_time
        )
        self.logger.info(f"Successfully processed {summary.files_processed} tracks!")
        self.logger.info(f"Output saved to: {summary.output_path} ({summary.output_size_bytes} bytes)")

        return summary

    def _progress(self, iterable, total: int):
        return tqdm(
            iterable,
            total=total,
            desc="Extracting metadata",
            unit="file",
            disable=not self.options.show_progress,
        )

    def _process_files_sequential(self, engine: CatalogEngine, files: List[str]) -> List[TrackResult]:
        """Process files one after another in listing order"""
        return [engine.process_file(filepath) for filepath in self._progress(files, len(files))]

    def _process_files_parallel(self, engine: CatalogEngine, files: List[str]) -> List[TrackResult]:
        """
        Process files on a bounded thread pool

        The pool size caps how many files are open at once. Results are
        collected in listing order and every future is waited on, so the
        aggregation step always sees one result per file.
        """
        with ThreadPoolExecutor(max_workers=self.options.workers) as executor:
            futures = [executor.submit(engine.process_file, filepath) for filepath in files]

            results = []
            for filepath, future in self._progress(zip(files, futures), len(files)):
                try:
                    results.append(future.result())
                except Exception as e:
                    raise ProcessingError(
                        f"Unexpected error processing {os.path.basename(filepath)}: {str(e)}",
                        filepath=filepath
                    )

        return results
