"""
Error types for paramstore.

Every failure is reported synchronously to the caller as one of these
exceptions. Nothing is retried internally; retry policy belongs to the
caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ParamStoreError(Exception):
    """Base class for all parameter store errors."""
    pass


class InvalidArgumentError(ParamStoreError):
    """
    Error raised for unusable arguments.

    This includes:
    - None or empty path, key or value
    - Values that are not strings
    - Keys with empty segments ("a..b", ".a", "a.")
    """
    pass


class StoreClosedError(InvalidArgumentError):
    """Error raised when an operation is attempted on a closed store."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class StoreNotFoundError(ParamStoreError):
    """Error raised when the parameter file does not exist at open time."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ParseError(ParamStoreError):
    """
    Error raised when the parameter file cannot be parsed.

    This includes malformed JSON, undecodable bytes and documents
    whose root is not a JSON object.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class KeyNotFoundError(ParamStoreError):
    """Error raised when a dotted key does not resolve to a string leaf."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class StoreIOError(ParamStoreError):
    """
    Error raised for read, write, rename or reopen failures.

    ``persisted`` is True when the new document already replaced the
    original file and only the follow-up reopen failed. The data is safe
    in that case, but the store needs a close and reopen to get a live
    file handle back.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        persisted: bool = False,
    ):
        super().__init__(message)
        self.path = path
        self.persisted = persisted
