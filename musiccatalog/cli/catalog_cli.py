"""
Command line interface for Music Catalog

Builds the collection document for one directory of audio files and
prints a short summary of the collection.
"""

import argparse
import sys
import time
from typing import List, Optional

from .. import __version__
from ..catalog_builder import MusicCatalogBuilder
from ..core.exceptions import MusicCatalogError
from ..core.models import CatalogSummary, OutputShape
from ..utils.logging_config import setup_logging
from .config import CLIConfig, create_catalog_options


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser"""

    parser = argparse.ArgumentParser(
        prog='music-catalog',
        description="Music Catalog - build a JSON catalog from tagged audio files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # ./bedroompop -> ./api/bedroompop.json
  %(prog)s ./shoegaze --genre shoegaze --output api/shoegaze.json
  %(prog)s ./bedroompop --shape full         # embed artwork and full metadata
  %(prog)s ./bedroompop --workers 4          # read tags on 4 threads
        """
    )

    # Positional argument (optional, falls back to config)
    parser.add_argument('input_dir', nargs='?', default=None,
                        help='Directory containing the audio files')

    # Output options
    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument('--output', '-o', metavar='FILE', default=None,
                              help='Path of the JSON document to write')
    output_group.add_argument('--shape', choices=[shape.value for shape in OutputShape], default=None,
                              help='Track record shape (default: basic)')
    output_group.add_argument('--genre', default=None,
                              help='Genre tag written to the document (default: bedroompop)')
    output_group.add_argument('--base-dir', dest='base_dir', metavar='NAME', default=None,
                              help='Directory name used in track urls (default: input directory name)')

    # Processing options
    processing_group = parser.add_argument_group('Processing Options')
    processing_group.add_argument('--extension', action='append', dest='extensions', metavar='EXT',
                                  default=None, help='Audio extension to include, repeatable (default: .mp3)')
    processing_group.add_argument('--workers', type=int, metavar='N', default=None,
                                  help='Number of files read in parallel (default: 1)')
    processing_group.add_argument('--no-progress', action='store_false', dest='show_progress', default=None,
                                  help='Hide the progress bar')

    # Logging options
    logging_group = parser.add_argument_group('Logging Options')
    logging_group.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], default=None,
                               help='Console logging level (default: INFO)')
    logging_group.add_argument('--log-dir', metavar='DIR', default=None,
                               help='Directory for log files (default: no log file)')

    # Utility options
    utility_group = parser.add_argument_group('Utility Options')
    utility_group.add_argument('--config', metavar='FILE',
                               help='Load configuration from JSON file')
    utility_group.add_argument('--version', action='version', version=f'Music Catalog {__version__}')

    return parser


def print_summary(summary: CatalogSummary):
    """Print the collection summary"""
    stats = summary.stats
    print(f"\n✅ Successfully processed {summary.files_processed} tracks!")
    print(f"📁 Output saved to: {summary.output_path}")
    print(f"📊 Total file size: {summary.output_size_bytes} bytes")

    print("\n📈 Collection Summary:")
    print(f"🎨 Tracks with album art: {stats.tracks_with_album_art}/{stats.total_tracks}")
    print(f"👤 Unique artists: {stats.unique_artists}")
    print(f"💿 Unique albums: {stats.unique_albums}")
    if summary.extraction_failures:
        print(f"⚠️ Files without readable tags: {summary.extraction_failures}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = CLIConfig(args.config).load_config()

        logging_config = config.get('logging', {})
        setup_logging(
            log_dir=args.log_dir or logging_config.get('log_dir'),
            console_level=args.log_level or logging_config.get('console_level', 'INFO'),
            file_level=logging_config.get('file_level', 'DEBUG'),
            enable_console=logging_config.get('enable_console', True)
        )

        options = create_catalog_options(config, args)

        print("🎵 Starting metadata extraction...\n")
        start_time = time.time()

        summary = MusicCatalogBuilder(options).build()

        print_summary(summary)
        print(f"\n📈 Session completed in {time.time() - start_time:.1f}s")
        return 0

    except MusicCatalogError as e:
        print(f"❌ Error processing tracks: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\n⚠️ Processing interrupted by user", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
