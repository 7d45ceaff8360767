"""
JSON-backed parameter store.

This module provides ParameterStore, an in-memory JSON document paired
with the file it was loaded from:

- Get: read a string leaf by dotted key
- Set: replace an existing string leaf and persist the whole document
- Persistence is atomic: the document is written to a temporary sibling
  file and renamed over the original

Thread Safety:
    One reentrant lock per store guards the tree and the file handle.
    Get and Set hold it for their whole duration, so a Get running
    alongside a Set observes either the old or the new value. Set keeps
    the lock across file I/O; concurrent readers wait for it to finish.
    Separate stores opened on the same path are not coordinated.
"""

from __future__ import annotations

import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, BinaryIO, Iterator, Optional, Union

from paramstore.core.config import StoreSettings
from paramstore.core.errors import (
    InvalidArgumentError,
    KeyNotFoundError,
    ParamStoreError,
    StoreClosedError,
    StoreIOError,
    StoreNotFoundError,
)
from paramstore.core.keys import split_key
from paramstore.core.tree import (
    Document,
    parse_document,
    read_leaf,
    serialize_document,
    write_leaf,
)
from paramstore.storage.atomic import replace_file

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]


def _coerce_path(path: Any) -> Path:
    if not isinstance(path, (str, os.PathLike)):
        raise InvalidArgumentError(f"Path must be a string or path-like, got {type(path).__name__}")
    raw = os.fspath(path)
    if not raw:
        raise InvalidArgumentError("Path must not be empty")
    return Path(raw)


class ParameterStore:
    """
    A thread-safe parameter file addressed by dotted keys.

    Usage:
        ```python
        with ParameterStore.open("params.json") as store:
            volume = store.get("system.audio.volume")
            store.set("system.audio.volume", "75")
        ```

    The file must already exist and hold a JSON object. Only existing
    string leaves can be read or written; Set never creates keys.
    """

    def __init__(
        self,
        path: Path,
        root: Document,
        handle: BinaryIO,
        settings: StoreSettings,
    ):
        """
        Wrap an already-loaded document. Use ParameterStore.open instead.

        Args:
            path: Path of the backing file
            root: Parsed document root
            handle: Open read-write handle on ``path``
            settings: Store settings
        """
        self._path = path
        self._root: Optional[Document] = root
        self._handle: Optional[BinaryIO] = handle
        self._settings = settings
        self._lock = threading.RLock()
        self._closed = False

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @classmethod
    def open(cls, path: PathArg, settings: Optional[StoreSettings] = None) -> "ParameterStore":
        """
        Open and parse a parameter file.

        Args:
            path: Path to an existing JSON file
            settings: Store settings (defaults to StoreSettings())

        Returns:
            An open store

        Raises:
            InvalidArgumentError: If path is None, empty or not path-like
            StoreNotFoundError: If the file does not exist
            StoreIOError: If the file cannot be opened or is read short
            ParseError: If the content is not a JSON object
        """
        file_path = _coerce_path(path)
        settings = settings or StoreSettings()

        if not file_path.exists():
            logger.error(f"File {file_path} does not exist")
            raise StoreNotFoundError(f"File not found: {file_path}", file_path)

        try:
            handle = open(file_path, "r+b")
        except OSError as e:
            logger.error(f"Failed to open file {file_path}: {e}")
            raise StoreIOError(f"Failed to open file {file_path}: {e}", file_path) from e

        try:
            root = cls._load(file_path, handle, settings)
        except ParamStoreError as e:
            handle.close()
            logger.error(str(e))
            raise
        except BaseException:
            handle.close()
            raise

        logger.debug(f"Opened parameter file {file_path}")
        return cls(file_path, root, handle, settings)

    @staticmethod
    def _load(path: Path, handle: BinaryIO, settings: StoreSettings) -> Document:
        """Read the whole file through ``handle`` and parse it."""
        try:
            size = os.fstat(handle.fileno()).st_size
            raw = handle.read(size)
        except OSError as e:
            raise StoreIOError(f"Failed to read file {path}: {e}", path) from e

        if len(raw) != size:
            raise StoreIOError(
                f"Failed to read file {path}, read {len(raw)} bytes, expected {size}",
                path,
            )
        return parse_document(raw, settings.encoding, path)

    def close(self) -> None:
        """Release the document and close the file handle. Safe to call twice."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._root = None
            handle, self._handle = self._handle, None
            if handle is not None:
                handle.close()
        logger.debug(f"Closed parameter file {self._path}")

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    @property
    def path(self) -> Path:
        """Path of the backing file."""
        return self._path

    @property
    def settings(self) -> StoreSettings:
        """Settings the store was opened with."""
        return self._settings

    @contextmanager
    def _guard(self) -> Iterator[Document]:
        """Hold the store lock and yield the live document."""
        with self._lock:
            if self._closed or self._root is None:
                raise StoreClosedError(f"Store is closed: {self._path}", self._path)
            yield self._root

    # =========================================================================
    # Access
    # =========================================================================

    def get(self, key: str) -> str:
        """
        Get a string value by dotted key.

        Args:
            key: Key such as "system.audio.volume" or "volume"

        Returns:
            The stored string

        Raises:
            InvalidArgumentError: If key is not a non-empty dotted key
            StoreClosedError: If the store is closed
            KeyNotFoundError: If the key does not resolve to a string leaf
        """
        segments = split_key(key)
        with self._guard() as root:
            try:
                return read_leaf(root, segments, key)
            except KeyNotFoundError as e:
                logger.warning(str(e))
                raise

    def contains(self, key: str) -> bool:
        """Whether ``key`` resolves to a string leaf."""
        segments = split_key(key)
        with self._guard() as root:
            try:
                read_leaf(root, segments, key)
            except KeyNotFoundError:
                return False
            return True

    def set(self, key: str, value: str) -> None:
        """
        Replace an existing string value and persist the document.

        The whole document is rewritten through a temporary file that is
        renamed over the original. If anything fails before the rename,
        the in-memory value is rolled back and the file is untouched.

        Args:
            key: Key of an existing string leaf
            value: New string value

        Raises:
            InvalidArgumentError: If key or value is unusable
            StoreClosedError: If the store is closed
            KeyNotFoundError: If the key does not resolve to a string leaf
            StoreIOError: If writing, renaming or reopening fails. With
                ``persisted=True`` only the reopen failed and the new
                value is on disk.
        """
        segments = split_key(key)
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Value must be a string, got {type(value).__name__}")

        with self._guard() as root:
            try:
                previous = write_leaf(root, segments, key, value)
            except KeyNotFoundError as e:
                logger.warning(str(e))
                raise

            try:
                self._persist(root)
            except StoreIOError as e:
                write_leaf(root, segments, key, previous)
                logger.error(f"Failed to set {key}, rolled back: {e}")
                raise

            self._reopen()
            logger.debug(f"Set {key} in {self._path}")

    # =========================================================================
    # Persistence
    # =========================================================================

    def _persist(self, root: Document) -> None:
        """Serialize the document and atomically replace the file."""
        text = serialize_document(
            root,
            indent=self._settings.indent,
            ensure_ascii=self._settings.ensure_ascii,
        )
        try:
            data = text.encode(self._settings.encoding)
        except UnicodeEncodeError as e:
            raise StoreIOError(
                f"Failed to serialize document as {self._settings.encoding}: {e}",
                self._path,
            ) from e

        replace_file(
            self._path,
            data,
            temp_suffix=self._settings.temp_suffix,
            fsync=self._settings.fsync,
        )

    def _open_handle(self) -> BinaryIO:
        return open(self._path, "r+b")

    def _reopen(self) -> None:
        """Point the file handle at the file that now lives at the path."""
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()

        try:
            self._handle = self._open_handle()
        except OSError as e:
            logger.error(f"Failed to reopen file {self._path}: {e}")
            raise StoreIOError(
                f"Value persisted but failed to reopen {self._path}: {e}",
                self._path,
                persisted=True,
            ) from e

    # =========================================================================
    # Context manager
    # =========================================================================

    def __enter__(self) -> "ParameterStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"ParameterStore(path={str(self._path)!r}, {state})"


def open_store(path: PathArg, settings: Optional[StoreSettings] = None) -> ParameterStore:
    """Open a parameter file. Shorthand for ParameterStore.open."""
    return ParameterStore.open(path, settings)


def close_store(store: Optional[ParameterStore]) -> None:
    """Close a store; None is accepted and ignored."""
    if store is None:
        return
    store.close()
