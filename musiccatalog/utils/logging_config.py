"""
Logging Configuration for Music Catalog

This module provides centralized logging configuration for the catalog
builder, ensuring consistent logging across the pipeline components.
"""

import os
import sys
import logging
import logging.handlers
from pathlib import Path
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Colored console formatter for better readability"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class CatalogLogger:
    """Centralized logger configuration for Music Catalog"""

    def __init__(self, log_dir: Optional[str] = None, console_level: str = "INFO",
                 file_level: str = "DEBUG", enable_console: bool = True):
        """
        Initialize logging

        Args:
            log_dir: Directory for log files (no file logging when None)
            console_level: Console logging level
            file_level: File logging level
            enable_console: Whether to enable console logging
        """
        self.log_dir = log_dir
        self.console_level = getattr(logging, console_level.upper())
        self.file_level = getattr(logging, file_level.upper())
        self.enable_console = enable_console

        if self.log_dir:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)

        self._setup_package_logger()

    def _setup_package_logger(self):
        """Attach handlers to the package logger"""
        package_logger = logging.getLogger('musiccatalog')
        package_logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()

        # Console handler (stderr, so stdout stays free for summaries)
        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(self.console_level)
            console_formatter = ColoredFormatter(
                '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt='%H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            package_logger.addHandler(console_handler)

        # Main log file (rotating)
        if self.log_dir:
            main_log_file = os.path.join(self.log_dir, 'music_catalog.log')
            file_handler = logging.handlers.RotatingFileHandler(
                main_log_file, maxBytes=10*1024*1024, backupCount=5, encoding='utf-8'
            )
            file_handler.setLevel(self.file_level)
            file_formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            package_logger.addHandler(file_handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger for a specific component"""
        return get_logger(name)

    def log_batch_start(self, folder_path: str, file_count: int, workers: int):
        """Log start of a catalog run"""
        logger = self.get_logger('batch')
        logger.info(f"Starting catalog build: {folder_path}")
        logger.info(f"Files to process: {file_count}, Workers: {workers}")

    def log_batch_complete(self, folder_path: str, total_files: int, failed: int,
                          total_time: float):
        """Log completion of a catalog run"""
        logger = self.get_logger('batch')

        logger.info(f"Catalog build complete: {folder_path}")
        logger.info(f"Results: {total_files - failed}/{total_files} files with readable tags")
        if total_files > 0:
            logger.info(f"Total time: {total_time:.1f}s, Average: {total_time/total_files:.2f}s per file")


# Global logger instance
_logger_instance = None

def setup_logging(log_dir: Optional[str] = None, console_level: str = "INFO",
                  file_level: str = "DEBUG", enable_console: bool = True) -> CatalogLogger:
    """Setup global logging configuration"""
    global _logger_instance
    _logger_instance = CatalogLogger(log_dir, console_level, file_level, enable_console)
    return _logger_instance

def get_logger(name: str = 'main') -> logging.Logger:
    """Get a component logger"""
    return logging.getLogger(f'musiccatalog.{name}')

def get_app_logger() -> CatalogLogger:
    """Get the application logger instance, configuring defaults on first use"""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = setup_logging()
    return _logger_instance
