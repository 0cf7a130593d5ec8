"""
Music Catalog CLI Package

Command-line interface for the Music Catalog application.
"""

from .catalog_cli import main as cli_main

__all__ = ['cli_main']
