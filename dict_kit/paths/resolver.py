"""Dot-notation access to nested mappings and sequences.

Every function takes the container it operates on explicitly and keeps no
state between calls. Reads never mutate; ``set_path``, ``fill_path`` and
``forget_path`` mutate the given container in place.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping, Sequence
from typing import TYPE_CHECKING, Any

from dict_kit.errors import TypeMismatchError
from dict_kit.nodes import accessible, as_index, pairs, writable
from dict_kit.paths.parser import SEPARATOR, split_path


if TYPE_CHECKING:
    from dict_kit.nodes import Key


_MISSING: Any = object()


def _is_batch(path: Any) -> bool:
    return isinstance(path, (list, tuple))


def _existing_key(node: Mapping[Any, Any], segment: str) -> Key | None:
    if segment in node:
        return segment
    index = as_index(segment)
    if index is not None and index in node:
        return index
    return None


def _child(node: Any, segment: str) -> Any:
    if isinstance(node, Mapping):
        key = _existing_key(node, segment)
        return _MISSING if key is None else node[key]
    if isinstance(node, (list, tuple)):
        index = as_index(segment)
        if index is None or index >= len(node):
            return _MISSING
        return node[index]
    return _MISSING


def _assign(node: Any, segment: str, value: Any) -> None:
    if isinstance(node, MutableMapping):
        key = _existing_key(node, segment)
        node[segment if key is None else key] = value
        return
    if isinstance(node, list):
        index = as_index(segment)
        if index is None or index > len(node):
            msg = f"cannot address list of length {len(node)} with segment {segment!r}"
            raise TypeMismatchError(msg)
        if index == len(node):
            node.append(value)
        else:
            node[index] = value
        return
    msg = f"cannot assign into {type(node).__name__} node"
    raise TypeMismatchError(msg)


def _delete(node: Any, segment: str) -> None:
    if isinstance(node, MutableMapping):
        key = _existing_key(node, segment)
        if key is not None:
            del node[key]
    elif isinstance(node, list):
        index = as_index(segment)
        if index is not None and index < len(node):
            del node[index]


def _replace(container: Any, value: Any) -> None:
    if isinstance(container, MutableMapping) and isinstance(value, Mapping):
        snapshot = dict(value)
        container.clear()
        container.update(snapshot)
    elif isinstance(container, list) and isinstance(value, (list, tuple)):
        container[:] = list(value)
    else:
        msg = f"cannot replace {type(container).__name__} contents with {type(value).__name__}"
        raise TypeMismatchError(msg)


def _get_one(container: Any, path: Key, default: Any) -> Any:
    node = container
    for segment in split_path(path):
        node = _child(node, segment)
        if node is _MISSING:
            return default
    return node


def _set_one(container: Any, path: Key, value: Any, *, overwrite: bool) -> None:
    segments = split_path(path)
    node = container
    for segment in segments[:-1]:
        child = _child(node, segment)
        if not writable(child):
            child = {}
            _assign(node, segment, child)
        node = child

    last = segments[-1]
    if not overwrite and _child(node, last) is not _MISSING:
        return
    _assign(node, last, value)


def get_path(container: Any, path: Key | Sequence[Key] | None = None, default: Any = None) -> Any:
    """Return the value at path, or default when any segment is missing.

    Parameters
    ----------
    container
        Nested mapping/sequence structure to read from.
    path
        ``None`` returns the whole container. A list or tuple of paths returns
        a dict of each path to its resolved value.
    default
        Value returned for every path that does not resolve.
    """
    if path is None:
        return container
    if _is_batch(path):
        return {item: _get_one(container, item, default) for item in path}
    return _get_one(container, path, default)


def set_path(
    container: Any,
    path: Key | Mapping[Key, Any] | None,
    value: Any = None,
    *,
    overwrite: bool = True,
) -> bool:
    """Set value at path, creating intermediate dicts as needed.

    Parameters
    ----------
    container
        Mutable nested structure to write into.
    path
        ``None`` replaces the container contents with ``value``. A mapping sets
        each of its path/value pairs and ignores ``value``.
    value
        Value to store.
    overwrite
        When False, an existing value at the final segment is kept.
    """
    if path is None:
        _replace(container, value)
    elif isinstance(path, Mapping):
        for key, item in path.items():
            _set_one(container, key, item, overwrite=overwrite)
    else:
        _set_one(container, path, value, overwrite=overwrite)
    return True


def fill_path(container: Any, path: Key | Mapping[Key, Any] | None, value: Any = None) -> bool:
    """Set value at path only where nothing is stored yet."""
    return set_path(container, path, value, overwrite=False)


def has_path(container: Any, path: Key | Sequence[Key]) -> bool:
    """Return True when every given path resolves to an existing key."""
    paths = list(path) if _is_batch(path) else [path]
    if not paths:
        return False
    return all(_get_one(container, item, _MISSING) is not _MISSING for item in paths)


def has_any_path(container: Any, path: Key | Sequence[Key]) -> bool:
    """Return True when at least one given path resolves to an existing key."""
    paths = list(path) if _is_batch(path) else [path]
    return any(_get_one(container, item, _MISSING) is not _MISSING for item in paths)


def forget_path(container: Any, path: Key | Sequence[Key]) -> None:
    """Remove the key at path; missing segments make this a no-op."""
    for item in list(path) if _is_batch(path) else [path]:
        segments = split_path(item)
        node = container
        for segment in segments[:-1]:
            node = _child(node, segment)
            if node is _MISSING:
                break
        else:
            _delete(node, segments[-1])


def flatten_paths(container: Any, prefix: str = "") -> dict[str, Any]:
    """Flatten a nested structure into a single-level dict of dot paths to leaves.

    Sequence indices become numeric segments. Empty mappings and sequences are
    kept as leaf values since they have no other flat representation.
    """
    flat: dict[str, Any] = {}
    for key, value in pairs(container):
        full_key = f"{prefix}{SEPARATOR}{key}" if prefix else str(key)
        if accessible(value) and value:
            flat.update(flatten_paths(value, full_key))
        else:
            flat[full_key] = value
    return flat


def expand_paths(flat: Mapping[Key, Any]) -> dict[str, Any]:
    """Rebuild a nested dict from a mapping of dot paths to values."""
    expanded: dict[str, Any] = {}
    for key, value in flat.items():
        _ = set_path(expanded, key, value)
    return expanded


def _typed(container: Any, path: Key, default: Any, check: Callable[[Any], bool], label: str) -> Any:
    value = get_path(container, path, default)
    if not check(value):
        msg = f"value at {path!r} must be {label}, got {type(value).__name__}"
        raise TypeMismatchError(msg)
    return value


def get_str(container: Any, path: Key, default: Any = None) -> str:
    """Return the value at path, which must be a string."""
    return _typed(container, path, default, lambda value: isinstance(value, str), "a string")


def get_int(container: Any, path: Key, default: Any = None) -> int:
    """Return the value at path, which must be an integer (booleans excluded)."""
    return _typed(
        container,
        path,
        default,
        lambda value: isinstance(value, int) and not isinstance(value, bool),
        "an integer",
    )


def get_float(container: Any, path: Key, default: Any = None) -> float:
    """Return the value at path, which must be a float."""
    return _typed(container, path, default, lambda value: isinstance(value, float), "a float")


def get_bool(container: Any, path: Key, default: Any = None) -> bool:
    """Return the value at path, which must be a boolean."""
    return _typed(container, path, default, lambda value: isinstance(value, bool), "a boolean")


def get_array(container: Any, path: Key, default: Any = None) -> Any:
    """Return the value at path, which must be a mapping or sequence."""
    return _typed(container, path, default, accessible, "an array")


def pluck_paths(container: Any, path: Key | Sequence[Key], default: Any = None) -> dict[Key, Any]:
    """Return a dict of each requested path to its value, even for a single path."""
    paths = list(path) if _is_batch(path) else [path]
    return {item: _get_one(container, item, default) for item in paths}


def all_items(container: Any) -> Any:
    """Return the container itself."""
    return container


def tap(container: Any, callback: Callable[[Any], object]) -> Any:
    """Call callback with the container and return the container unchanged."""
    _ = callback(container)
    return container


def offset_exists(container: Any, key: Key) -> bool:
    return has_path(container, key)


def offset_get(container: Any, key: Key, default: Any = None) -> Any:
    return get_path(container, key, default)


def offset_set(container: Any, key: Key, value: Any) -> None:
    _ = set_path(container, key, value)


def offset_unset(container: Any, key: Key) -> None:
    forget_path(container, key)
