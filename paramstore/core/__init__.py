"""
Core building blocks for paramstore: errors, dotted keys, the JSON
document tree and settings.
"""

from paramstore.core.config import StoreSettings, configure_logging
from paramstore.core.errors import (
    InvalidArgumentError,
    KeyNotFoundError,
    ParamStoreError,
    ParseError,
    StoreClosedError,
    StoreIOError,
    StoreNotFoundError,
)
from paramstore.core.keys import join_key, split_key
from paramstore.core.tree import (
    parse_document,
    read_leaf,
    resolve_leaf,
    serialize_document,
    write_leaf,
)

__all__ = [
    "StoreSettings",
    "configure_logging",
    "ParamStoreError",
    "InvalidArgumentError",
    "StoreClosedError",
    "StoreNotFoundError",
    "ParseError",
    "KeyNotFoundError",
    "StoreIOError",
    "split_key",
    "join_key",
    "parse_document",
    "serialize_document",
    "resolve_leaf",
    "read_leaf",
    "write_leaf",
]
