"""
Atomic file replacement.

The new content is written in full to a sibling temporary file and then
renamed over the target with os.replace. A reader of the target path
therefore sees either the complete old content or the complete new
content, never a partial write.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from paramstore.core.errors import StoreIOError

logger = logging.getLogger(__name__)


def temp_path_for(path: Path, suffix: str = ".tmp") -> Path:
    """Return the temporary sibling used while replacing ``path``."""
    return path.with_name(path.name + suffix)


def _discard(temp_path: Path) -> None:
    try:
        temp_path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Failed to remove temporary file {temp_path}: {e}")


def write_temp(temp_path: Path, data: bytes, fsync: bool = True) -> None:
    """
    Write ``data`` in full to ``temp_path``.

    Raises:
        StoreIOError: If the file cannot be opened or the write is short.
            The temporary file is removed before raising.
    """
    try:
        handle = open(temp_path, "wb")
    except OSError as e:
        raise StoreIOError(f"Failed to open temporary file {temp_path}: {e}", temp_path) from e

    try:
        with handle:
            written = handle.write(data)
            if written != len(data):
                raise StoreIOError(
                    f"Failed to write temporary file {temp_path}, "
                    f"wrote {written} bytes, expected {len(data)}",
                    temp_path,
                )
            handle.flush()
            if fsync:
                os.fsync(handle.fileno())
    except StoreIOError:
        _discard(temp_path)
        raise
    except OSError as e:
        _discard(temp_path)
        raise StoreIOError(f"Failed to write temporary file {temp_path}: {e}", temp_path) from e


def replace_file(path: Path, data: bytes, temp_suffix: str = ".tmp", fsync: bool = True) -> None:
    """
    Atomically replace ``path`` with ``data``.

    Args:
        path: File to replace
        data: Complete new file content
        temp_suffix: Suffix for the temporary sibling file
        fsync: Whether to fsync the temporary file before renaming

    Raises:
        StoreIOError: If writing or renaming fails. The original file is
            left untouched in both cases.
    """
    temp_path = temp_path_for(path, temp_suffix)
    write_temp(temp_path, data, fsync=fsync)

    try:
        os.replace(temp_path, path)
    except OSError as e:
        _discard(temp_path)
        raise StoreIOError(f"Failed to rename {temp_path} to {path}: {e}", path) from e

    logger.debug(f"Replaced {path} ({len(data)} bytes)")
