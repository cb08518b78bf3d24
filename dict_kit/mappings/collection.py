"""MutableMapping facade over a list or dict with dot-notation index access."""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, Self, override

from dict_kit.errors import InvalidInvocationError
from dict_kit.hooks import HookRegistry
from dict_kit.paths import (
    forget_path,
    get_path,
    has_any_path,
    has_path,
    offset_exists,
    offset_get,
    offset_set,
    offset_unset,
    set_path,
)
from dict_kit.paths.parser import SEPARATOR

from .pipeline import Pipeline


if TYPE_CHECKING:
    from collections.abc import Sequence

    from dict_kit.hooks import Transform
    from dict_kit.nodes import Key


logger = logging.getLogger(__name__)

_MISSING: Any = object()


def _addressable(key: object) -> bool:
    if isinstance(key, bool):
        return False
    return isinstance(key, int) or (isinstance(key, str) and key != "")


def _arrayable(items: Any) -> Any:
    if isinstance(items, Collection):
        return copy.copy(items.all())
    if items is None:
        return []
    if isinstance(items, Mapping):
        return dict(items)
    if isinstance(items, (str, bytes)):
        return [items]
    if isinstance(items, Iterable):
        return list(items)
    return [items]


class Collection(MutableMapping[Any, Any]):
    """Dict-like wrapper over one list or dict.

    Keys are list indices or mapping keys. A key stored as-is wins; otherwise
    string keys containing a dot are resolved as paths into nested data.
    Missing keys read as ``None``, deleting a missing key does nothing, and
    assigning to ``None`` appends.
    """

    def __init__(self, data: Any = None) -> None:
        super().__init__()
        self._data: Any = _arrayable(data)
        self._pipeline: Pipeline | None = None

    @classmethod
    def make(cls, data: Any = None) -> Self:
        """Create a collection from a collection, mapping, iterable or scalar."""
        return cls(data)

    def process(self) -> Pipeline:
        """Return the pipeline bound to this collection."""
        if self._pipeline is None:
            self._pipeline = Pipeline(self)
        return self._pipeline

    def invoke(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Run the named pipeline operation."""
        if name not in Pipeline.OPERATIONS:
            msg = f"method {name} does not exist on {type(self).__name__}"
            raise InvalidInvocationError(msg)
        logger.debug("dispatching %s to pipeline", name)
        return getattr(self.process(), name)(*args, **kwargs)

    def replace(self, data: Any) -> Self:
        """Swap in new underlying data and return the collection."""
        self._data = data
        return self

    def _stored(self, key: object) -> bool:
        if isinstance(self._data, Mapping):
            try:
                return key in self._data
            except TypeError:
                return False
        return isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(self._data)

    @override
    def __getitem__(self, key: Key) -> Any:
        if self._stored(key):
            return self._data[key]
        if _addressable(key):
            return offset_get(self._data, key)
        return None

    @override
    def __setitem__(self, key: Key | None, value: Any) -> None:
        if key is None:
            self.append(value)
        elif isinstance(self._data, MutableMapping) and (
            self._stored(key) or not (isinstance(key, str) and SEPARATOR in key)
        ):
            self._data[key] = value
        else:
            offset_set(self._data, key, value)

    @override
    def __delitem__(self, key: Key) -> None:
        if self._stored(key):
            del self._data[key]
        elif _addressable(key):
            offset_unset(self._data, key)

    @override
    def __iter__(self) -> Iterator[Any]:
        if isinstance(self._data, Mapping):
            return iter(list(self._data))
        return iter(range(len(self._data)))

    @override
    def __len__(self) -> int:
        return len(self._data)

    @override
    def __contains__(self, key: object) -> bool:
        if self._stored(key):
            return True
        return _addressable(key) and offset_exists(self._data, key)

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._data == other.all()
        return self._data == other

    __hash__ = None  # type: ignore[assignment]

    @override
    def get(self, key: Key | Sequence[Key] | None = None, default: Any = None) -> Any:
        """Return the value at a key, dot path or list of paths."""
        return get_path(self._data, key, default)

    def set(self, key: Key | Mapping[Key, Any] | None, value: Any = None) -> bool:
        """Store value at a key or dot path."""
        return set_path(self._data, key, value)

    def has(self, key: Key | Sequence[Key]) -> bool:
        return has_path(self._data, key)

    def has_any(self, key: Key | Sequence[Key]) -> bool:
        return has_any_path(self._data, key)

    def forget(self, key: Key | Sequence[Key]) -> None:
        forget_path(self._data, key)

    def append(self, value: Any) -> None:
        """Add value after the last item, using the next integer key for mappings."""
        if isinstance(self._data, list):
            self._data.append(value)
            return
        int_keys = [key for key in self._data if isinstance(key, int) and not isinstance(key, bool)]
        self._data[max(int_keys) + 1 if int_keys else 0] = value

    @override
    def pop(self, key: Key, default: Any = _MISSING) -> Any:
        if key not in self:
            if default is _MISSING:
                raise KeyError(key)
            return default
        value = self[key]
        del self[key]
        return value

    @override
    def setdefault(self, key: Key, default: Any = None) -> Any:
        if key not in self:
            self[key] = default
        return self[key]

    @override
    def clear(self) -> None:
        self._data = {} if isinstance(self._data, Mapping) else []

    def all(self) -> Any:
        """Return the underlying list or dict."""
        return self._data

    def is_empty(self) -> bool:
        return not self._data

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self._data, **kwargs)

    def copy(self) -> Any:
        """Return a detached plain snapshot of the underlying data."""
        return copy.deepcopy(self._data)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    @override
    def __str__(self) -> str:
        return self.to_json()


class HookedCollection(Collection):
    """Collection that transforms values through per-key hooks on index access and get/set."""

    def __init__(self, data: Any = None, hooks: HookRegistry | None = None) -> None:
        super().__init__(data)
        self.hooks = hooks if hooks is not None else HookRegistry()

    def on_get(self, key: Key, transform: Transform) -> Self:
        self.hooks.on_get(key, transform)
        return self

    def on_set(self, key: Key, transform: Transform) -> Self:
        self.hooks.on_set(key, transform)
        return self

    def _transform_get(self, key: object, value: Any) -> Any:
        return self.hooks.apply_get(key, value) if _addressable(key) else value

    def _transform_set(self, key: object, value: Any) -> Any:
        return self.hooks.apply_set(key, value) if _addressable(key) else value

    @override
    def __getitem__(self, key: Key) -> Any:
        if key not in self:
            return None
        return self._transform_get(key, super().__getitem__(key))

    @override
    def __setitem__(self, key: Key | None, value: Any) -> None:
        super().__setitem__(key, self._transform_set(key, value))

    def _read(self, key: Key, default: Any) -> Any:
        value = get_path(self._data, key, _MISSING)
        if value is _MISSING:
            return default
        return self._transform_get(key, value)

    @override
    def get(self, key: Key | Sequence[Key] | None = None, default: Any = None) -> Any:
        """Return the value at a key or dot path, passed through its on-get hook."""
        if key is None:
            return self._data
        if isinstance(key, (list, tuple)):
            return {item: self._read(item, default) for item in key}
        return self._read(key, default)

    @override
    def set(self, key: Key | Mapping[Key, Any] | None, value: Any = None) -> bool:
        """Store value at a key or dot path, passed through its on-set hook."""
        if key is None:
            return super().set(key, value)
        if isinstance(key, Mapping):
            return set_path(self._data, {path: self._transform_set(path, item) for path, item in key.items()})
        return set_path(self._data, key, self._transform_set(key, value))
