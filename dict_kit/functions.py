"""Top-level convenience functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dict_kit.arrays.base import compare
from dict_kit.mappings import Collection
from dict_kit.paths import get_path, set_path


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from dict_kit.nodes import Key


__all__ = ["array_get", "array_set", "collect", "compare", "is_callable"]


def array_get(array: Any, key: Key | Sequence[Key] | None = None, default: Any = None) -> Any:
    """Retrieve one or several values from array using dot notation."""
    return get_path(array, key, default)


def array_set(
    array: Any,
    key: Key | Mapping[Key, Any] | None,
    value: Any = None,
    *,
    overwrite: bool = True,
) -> bool:
    """Set one or several values in array using dot notation."""
    return set_path(array, key, value, overwrite=overwrite)


def is_callable(value: Any) -> bool:
    """Return True when value is callable and not a string."""
    return not isinstance(value, str) and callable(value)


def collect(data: Any = None) -> Collection:
    """Wrap data in a Collection."""
    return Collection.make(data)
