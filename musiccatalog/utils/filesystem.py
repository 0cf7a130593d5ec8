"""
Filesystem utilities for Music Catalog

This module provides directory listing, directory creation and the final
write of the collection document.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ..core.exceptions import FileOperationError, ProcessingError


def ensure_directory(path: str) -> bool:
    """
    Ensure a directory exists, creating it and its parents if needed

    Args:
        path: Directory path to check/create

    Returns:
        True if directory exists or was created successfully

    Raises:
        FileOperationError: If directory creation fails
    """
    path_obj = Path(path)

    if path_obj.exists():
        if path_obj.is_dir():
            return True
        raise FileOperationError(
            f"Path exists but is not a directory: {path}",
            filepath=path
        )

    try:
        path_obj.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileOperationError(
            f"Failed to ensure directory: {str(e)}",
            details=str(e),
            filepath=path
        )
    return True


def has_extension(filename: str, extensions: Iterable[str]) -> bool:
    """Case-insensitive extension check"""
    return filename.lower().endswith(tuple(ext.lower() for ext in extensions))


def find_audio_files(folder_path: str, extensions: Iterable[str]) -> List[str]:
    """
    List audio files directly inside a folder

    Only regular files whose extension matches (case-insensitively) are
    returned; everything else is ignored. Results are ordered by filename
    so repeated runs see the same sequence.

    Raises:
        ProcessingError: If the folder is missing or unreadable
    """
    extensions = tuple(extensions)

    try:
        with os.scandir(folder_path) as entries:
            filenames = [
                entry.name for entry in entries
                if entry.is_file() and has_extension(entry.name, extensions)
            ]
    except OSError as e:
        raise ProcessingError(
            f"Cannot read input directory: {folder_path}",
            details=str(e),
            filepath=folder_path
        )

    return [os.path.join(folder_path, name) for name in sorted(filenames)]


def write_json_document(document: Dict[str, Any], output_path: str) -> int:
    """
    Write a JSON document, creating parent directories as needed

    The file is overwritten wholesale. Returns the size of the written file
    in bytes.

    Raises:
        FileOperationError: If the file cannot be written
    """
    parent = os.path.dirname(output_path)
    if parent:
        ensure_directory(parent)

    # Serialize before opening so a bad value never leaves a truncated file
    try:
        payload = json.dumps(document, indent=2, ensure_ascii=False).encode('utf-8')
    except (TypeError, ValueError) as e:
        raise FileOperationError(
            f"Failed to serialize catalog: {str(e)}",
            details=type(e).__name__,
            filepath=output_path
        )

    try:
        with open(output_path, 'wb') as f:
            f.write(payload)
        return len(payload)
    except OSError as e:
        raise FileOperationError(
            f"Failed to write catalog: {str(e)}",
            details=str(e),
            filepath=output_path
        )
