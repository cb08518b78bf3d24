"""Per-path value transforms applied on read and on write."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from dict_kit.nodes import Key


logger = logging.getLogger(__name__)

type Transform = Callable[[Any], Any]


class HookRegistry:
    """Store at most one on-get and one on-set transform per exact path."""

    def __init__(self) -> None:
        super().__init__()
        self._get_hooks: dict[str, Transform] = {}
        self._set_hooks: dict[str, Transform] = {}

    @staticmethod
    def _normalize(path: Key) -> str:
        if isinstance(path, bool) or not isinstance(path, (str, int)):
            msg = f"hook path must be a string or integer, got {type(path).__name__}"
            raise TypeError(msg)
        normalized = str(path)
        if not normalized:
            msg = "hook path must not be empty"
            raise ValueError(msg)
        return normalized

    def on_get(self, path: Key, transform: Transform) -> None:
        """Register the transform applied to values read from path."""
        if not callable(transform):
            msg = "transform must be callable"
            raise TypeError(msg)
        key = self._normalize(path)
        if key in self._get_hooks:
            logger.debug("replacing on-get hook for %s", key)
        self._get_hooks[key] = transform

    def on_set(self, path: Key, transform: Transform) -> None:
        """Register the transform applied to values written to path."""
        if not callable(transform):
            msg = "transform must be callable"
            raise TypeError(msg)
        key = self._normalize(path)
        if key in self._set_hooks:
            logger.debug("replacing on-set hook for %s", key)
        self._set_hooks[key] = transform

    def has_get_hook(self, path: Key) -> bool:
        return self._normalize(path) in self._get_hooks

    def has_set_hook(self, path: Key) -> bool:
        return self._normalize(path) in self._set_hooks

    def remove(self, path: Key) -> None:
        """Drop both transforms registered for path, if any."""
        key = self._normalize(path)
        _ = self._get_hooks.pop(key, None)
        _ = self._set_hooks.pop(key, None)

    def apply_get(self, path: Key, value: Any) -> Any:
        """Return value passed through the on-get transform for path, if one exists."""
        transform = self._get_hooks.get(self._normalize(path))
        return value if transform is None else transform(value)

    def apply_set(self, path: Key, value: Any) -> Any:
        """Return value passed through the on-set transform for path, if one exists."""
        transform = self._set_hooks.get(self._normalize(path))
        return value if transform is None else transform(value)

    def __len__(self) -> int:
        return len(self._get_hooks.keys() | self._set_hooks.keys())
