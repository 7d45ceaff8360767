"""
Storage layer for paramstore.

Provides the file-backed ParameterStore and the atomic replace helper
it persists through.
"""

from paramstore.storage.atomic import replace_file, temp_path_for
from paramstore.storage.store import ParameterStore, close_store, open_store

__all__ = [
    "ParameterStore",
    "open_store",
    "close_store",
    "replace_file",
    "temp_path_for",
]
