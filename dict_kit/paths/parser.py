"""Parsing of dot-delimited key paths."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from dict_kit.nodes import Key


SEPARATOR = "."


def split_path(path: Key, sep: str = SEPARATOR) -> tuple[str, ...]:
    """Split a dot path into its segments."""
    if not sep:
        msg = "sep must not be empty"
        raise ValueError(msg)
    if isinstance(path, int) and not isinstance(path, bool):
        return (str(path),)
    if not isinstance(path, str):
        msg = f"path must be a string or integer, got {type(path).__name__}"
        raise TypeError(msg)
    if not path:
        msg = "path must not be empty"
        raise ValueError(msg)
    parts = tuple(path.split(sep))
    if any(not part for part in parts):
        msg = f"invalid path with empty segment: {path}"
        raise ValueError(msg)
    return parts


def join_path(*parts: Key, sep: str = SEPARATOR) -> str:
    """Build a dot path from one or more segments."""
    if not parts:
        msg = "at least one path part is required"
        raise ValueError(msg)
    rendered = [str(part) for part in parts]
    if any(not part for part in rendered):
        msg = "path parts must not be empty"
        raise ValueError(msg)
    return sep.join(rendered)
