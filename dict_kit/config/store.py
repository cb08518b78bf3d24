"""Configuration store with dot-notation access and optional value hooks."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self, override

from dict_kit.hooks import HookRegistry
from dict_kit.paths import (
    flatten_paths,
    forget_path,
    get_path,
    has_any_path,
    has_path,
    set_path,
)

from .loader import load_config_file


if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from dict_kit.hooks import Transform
    from dict_kit.nodes import Key


logger = logging.getLogger(__name__)

_MISSING: Any = object()


def _deep_merge(left: dict[Any, Any], right: Mapping[Any, Any]) -> dict[Any, Any]:
    merged = dict(left)
    for key, value in right.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, Mapping):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class Config:
    """Hold a configuration mapping and resolve dot paths against it."""

    def __init__(self, items: Mapping[Key, Any] | None = None) -> None:
        super().__init__()
        self._items: dict[Key, Any] = {}
        if items is not None:
            self.load(items)

    @classmethod
    def from_file(cls, path: str | Path) -> Self:
        """Create a store from a YAML, JSON or TOML file."""
        config = cls()
        config.load_file(path)
        return config

    def load_file(self, path: str | Path, *, merge: bool = False) -> None:
        """Load a file, replacing the current items or deep-merging into them."""
        self.load(load_config_file(path), merge=merge)

    def load(self, items: Mapping[Key, Any], *, merge: bool = False) -> None:
        """Load a mapping, replacing the current items or deep-merging into them."""
        if not isinstance(items, Mapping):
            msg = f"config items must be a mapping, got {type(items).__name__}"
            raise TypeError(msg)
        self._items = _deep_merge(self._items, items) if merge else copy.deepcopy(dict(items))
        logger.debug("config now holds %d top-level keys", len(self._items))

    def all(self) -> dict[Key, Any]:
        """Return the underlying configuration mapping."""
        return self._items

    def get(self, path: Key | Sequence[Key] | None = None, default: Any = None) -> Any:
        """Return the value at path, or default when it is not set."""
        return get_path(self._items, path, default)

    def set(self, path: Key | Mapping[Key, Any] | None, value: Any = None, *, overwrite: bool = True) -> bool:
        """Store value at path."""
        return set_path(self._items, path, value, overwrite=overwrite)

    def fill(self, path: Key | Mapping[Key, Any], value: Any = None) -> bool:
        """Store value at path only when nothing is stored there yet."""
        return self.set(path, value, overwrite=False)

    def has(self, path: Key | Sequence[Key]) -> bool:
        return has_path(self._items, path)

    def has_any(self, path: Key | Sequence[Key]) -> bool:
        return has_any_path(self._items, path)

    def forget(self, path: Key | Sequence[Key]) -> None:
        forget_path(self._items, path)

    def _as_list(self, path: Key) -> list[Any]:
        current = self.get(path)
        if current is None:
            return []
        if isinstance(current, (list, tuple)):
            return list(current)
        return [current]

    def append(self, path: Key, value: Any) -> bool:
        """Add value to the end of the list stored at path."""
        return self.set(path, [*self._as_list(path), value])

    def prepend(self, path: Key, value: Any) -> bool:
        """Add value to the front of the list stored at path."""
        return self.set(path, [value, *self._as_list(path)])

    def flatten(self) -> dict[str, Any]:
        """Return the configuration as a single-level dict of dot paths."""
        return flatten_paths(self._items)

    def __contains__(self, path: object) -> bool:
        if isinstance(path, bool) or not isinstance(path, (str, int)):
            return False
        return self.has(path)

    def __len__(self) -> int:
        return len(self._items)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class HookedConfig(Config):
    """Config store that transforms values through per-path hooks.

    On-get transforms see the stored value and return what the caller gets;
    the store is not changed. On-set transforms see the incoming value and
    return what is stored.
    """

    def __init__(self, items: Mapping[Key, Any] | None = None, hooks: HookRegistry | None = None) -> None:
        super().__init__(items)
        self.hooks = hooks if hooks is not None else HookRegistry()

    def on_get(self, path: Key, transform: Transform) -> Self:
        self.hooks.on_get(path, transform)
        return self

    def on_set(self, path: Key, transform: Transform) -> Self:
        self.hooks.on_set(path, transform)
        return self

    def _read(self, path: Key, default: Any) -> Any:
        value = get_path(self._items, path, _MISSING)
        if value is _MISSING:
            return default
        return self.hooks.apply_get(path, value)

    @override
    def get(self, path: Key | Sequence[Key] | None = None, default: Any = None) -> Any:
        if path is None:
            return self._items
        if isinstance(path, (list, tuple)):
            return {item: self._read(item, default) for item in path}
        return self._read(path, default)

    @override
    def set(self, path: Key | Mapping[Key, Any] | None, value: Any = None, *, overwrite: bool = True) -> bool:
        if path is None:
            return super().set(path, value, overwrite=overwrite)
        if isinstance(path, Mapping):
            transformed = {key: self.hooks.apply_set(key, item) for key, item in path.items()}
            return set_path(self._items, transformed, overwrite=overwrite)
        return set_path(self._items, path, self.hooks.apply_set(path, value), overwrite=overwrite)


__all__ = ["Config", "HookedConfig"]
