"""
paramstore - thread-safe JSON parameter files.

Open a JSON document, read and write string leaves by dotted key
("system.audio.volume"), and persist every write atomically back to the
same path.

Components:
- ParameterStore: open / get / set / close on one parameter file
- StoreSettings: serialization, durability and logging settings
- Errors: typed failures rooted at ParamStoreError
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
from paramstore.core.keys import split_key
from paramstore.storage.store import ParameterStore, close_store, open_store

__version__ = "0.1.0"

__all__ = [
    # Store
    "ParameterStore",
    "open_store",
    "close_store",
    # Configuration
    "StoreSettings",
    "configure_logging",
    # Keys
    "split_key",
    # Errors
    "ParamStoreError",
    "InvalidArgumentError",
    "StoreClosedError",
    "StoreNotFoundError",
    "ParseError",
    "KeyNotFoundError",
    "StoreIOError",
]
