"""Node classification helpers shared by path and array utilities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any


type Key = int | str


def accessible(value: Any) -> bool:
    """Return True when value can be traversed by key or index."""
    return isinstance(value, (Mapping, list, tuple))


def writable(value: Any) -> bool:
    """Return True when value can be mutated by key or index."""
    return isinstance(value, (MutableMapping, list))


def pairs(data: Any) -> Iterator[tuple[Key, Any]]:
    """Iterate key/value pairs of a mapping or index/value pairs of a sequence."""
    if isinstance(data, Mapping):
        return iter(data.items())
    return enumerate(data)


def as_index(segment: Key) -> int | None:
    """Return segment as a non-negative integer index, or None when it is not one."""
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return None
