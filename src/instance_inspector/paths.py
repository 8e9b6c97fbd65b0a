"""Positional paths for schema nodes: ``/parent/key`` with ``<>`` per unwrapped array."""

from typing import Optional

SEPARATOR = "/"
ARRAY_MARKER = "<>"


def build_path(parent_path: Optional[str], key: Optional[str]) -> str:
    return (parent_path or "") + SEPARATOR + (key or "")


def collection_path(path: str) -> str:
    """Mark a path as produced while unwrapping an array element."""
    return path + ARRAY_MARKER


def is_collection_path(path: str) -> bool:
    return path.endswith(ARRAY_MARKER)
