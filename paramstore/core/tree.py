# coding: utf-8
"""
JSON document tree helpers.

The parameter document is held as plain Python objects: JSON objects
are dicts, string leaves are str. Numbers, booleans, null and arrays may
appear in the document but are never addressed; they round-trip through
serialize_document untouched.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from paramstore.core.errors import KeyNotFoundError, ParseError
from paramstore.core.keys import join_key

Document = Dict[str, Any]


def parse_document(raw: bytes, encoding: str = "utf-8", path: Optional[Path] = None) -> Document:
    """
    Parse raw file content into a document tree.

    Args:
        raw: File content as read from disk
        encoding: Text encoding of the file
        path: Source path, used in error messages only

    Returns:
        The root JSON object

    Raises:
        ParseError: If the bytes cannot be decoded, are not valid JSON,
            or the root is not a JSON object
    """
    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise ParseError(f"Failed to decode {path or 'document'} as {encoding}: {e}", path) from e

    try:
        root = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ParseError(f"Failed to parse JSON content of {path or 'document'}: {e}", path) from e

    if not isinstance(root, dict):
        raise ParseError(
            f"Root of {path or 'document'} must be a JSON object, got {type(root).__name__}",
            path,
        )
    return root


def serialize_document(
    root: Document,
    indent: Optional[int] = 4,
    ensure_ascii: bool = False,
) -> str:
    """Serialize the whole tree to JSON text, keeping key order."""
    return json.dumps(root, indent=indent, ensure_ascii=ensure_ascii)


def resolve_leaf(root: Document, segments: tuple[str, ...], key: str) -> Document:
    """
    Walk the tree and return the object that holds the addressed leaf.

    Every segment except the last must name a child object. The last
    segment must name a child holding a string.

    Args:
        root: Document root
        segments: Key segments from split_key
        key: Original dotted key, for error messages

    Returns:
        The parent object; ``parent[segments[-1]]`` is the string leaf

    Raises:
        KeyNotFoundError: If any segment is missing, an intermediate
            node is not an object, or the final node is not a string
    """
    node: Any = root
    for depth, segment in enumerate(segments[:-1]):
        node = node.get(segment)
        if not isinstance(node, dict):
            prefix = join_key(segments[:depth + 1])
            raise KeyNotFoundError(f"Key not found: {key} ({prefix} is not an object)", key)

    leaf = node.get(segments[-1])
    if not isinstance(leaf, str):
        if leaf is None and segments[-1] not in node:
            raise KeyNotFoundError(f"Key not found: {key}", key)
        raise KeyNotFoundError(
            f"Key not found: {key} (value is {type(leaf).__name__}, not a string)",
            key,
        )
    return node


def read_leaf(root: Document, segments: tuple[str, ...], key: str) -> str:
    """Return the string stored at the addressed leaf."""
    return resolve_leaf(root, segments, key)[segments[-1]]


def write_leaf(root: Document, segments: tuple[str, ...], key: str, value: str) -> str:
    """
    Replace the string at an existing leaf.

    Returns:
        The previous value, so callers can roll back a failed write
    """
    parent = resolve_leaf(root, segments, key)
    previous = parent[segments[-1]]
    parent[segments[-1]] = value
    return previous
