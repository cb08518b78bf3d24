"""Chainable array operations bound to a collection."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, ClassVar

from dict_kit.arrays import multi, single
from dict_kit.arrays.base import SortFlag, is_multi_dimensional, unwrap, wrap


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from dict_kit.nodes import Key

    from .collection import Collection


class Pipeline:
    """Run array helpers against a collection's data.

    Chainable operations replace the collection's data and return the
    collection. Terminal operations return a plain value.
    """

    OPERATIONS: ClassVar[frozenset[str]] = frozenset(
        {
            "any",
            "avg",
            "between",
            "chunk",
            "collapse",
            "combine",
            "contains",
            "depth",
            "duplicates",
            "each",
            "every",
            "except_",
            "exists",
            "filter",
            "first",
            "flatten",
            "flatten_by_key",
            "group_by",
            "is_assoc",
            "is_list",
            "is_multi_dimensional",
            "is_unique",
            "last",
            "map",
            "median",
            "mode",
            "nth",
            "only",
            "paginate",
            "partition",
            "pipe",
            "pluck",
            "prepend",
            "reduce",
            "reject",
            "search",
            "separate",
            "shuffle",
            "skip",
            "skip_until",
            "skip_while",
            "slice",
            "sort_by",
            "sort_recursive",
            "sum",
            "tap",
            "transpose",
            "unique",
            "unless",
            "unwrap",
            "when",
            "where",
            "where_callback",
            "where_in",
            "where_not_in",
            "where_not_null",
            "where_null",
            "wrap",
        }
    )

    def __init__(self, collection: Collection) -> None:
        super().__init__()
        self._collection = collection

    @property
    def working(self) -> Any:
        return self._collection.all()

    def _apply(self, data: Any) -> Collection:
        return self._collection.replace(data)

    # single-dimensional

    def prepend(self, value: Any, key: Key | None = None) -> Collection:
        return self._apply(single.prepend(self.working, value, key))

    def separate(self) -> Collection:
        """Replace the data with ``{"keys": [...], "values": [...]}``."""
        return self._apply(single.separate(self.working))

    def only(self, keys: Key | Iterable[Key]) -> Collection:
        return self._apply(single.only(self.working, keys))

    def except_(self, keys: Key | Iterable[Key]) -> Collection:
        return self._apply(single.except_(self.working, keys))

    def nth(self, step: int, offset: int = 0) -> Collection:
        return self._apply(single.nth(self.working, step, offset))

    def duplicates(self) -> Collection:
        return self._apply(single.duplicates(self.working))

    def slice(self, offset: int, length: int | None = None) -> Collection:
        return self._apply(single.slice_(self.working, offset, length))

    def paginate(self, page: int, per_page: int) -> Collection:
        return self._apply(single.paginate(self.working, page, per_page))

    def combine(self, values: Any) -> Collection:
        """Use the current values as keys for values."""
        return self._apply(single.combine(self.working, values))

    def map(self, callback: Callable[[Any], Any]) -> Collection:
        return self._apply(single.map_(self.working, callback))

    def filter(self, callback: Callable[[Any], Any] | None = None) -> Collection:
        return self._apply(single.filter_(self.working, callback))

    def chunk(self, size: int, *, preserve_keys: bool = False) -> Collection:
        return self._apply(single.chunk(self.working, size, preserve_keys=preserve_keys))

    def unique(self, *, strict: bool = False) -> Collection:
        return self._apply(single.unique(self.working, strict=strict))

    def reject(self, callback: Any = True) -> Collection:
        return self._apply(single.reject(self.working, callback))

    def skip(self, count: int) -> Collection:
        return self._apply(single.skip(self.working, count))

    def skip_while(self, callback: Callable[[Any], Any]) -> Collection:
        return self._apply(single.skip_while(self.working, callback))

    def skip_until(self, callback: Callable[[Any], Any]) -> Collection:
        return self._apply(single.skip_until(self.working, callback))

    def partition(self, callback: Callable[[Any], Any]) -> Collection:
        """Replace the data with ``[passing, failing]``."""
        return self._apply(list(single.partition(self.working, callback)))

    def shuffle(self, seed: int | None = None) -> Collection:
        return self._apply(single.shuffle(self.working, seed))

    # multi-dimensional

    def flatten(self, depth: float = math.inf) -> Collection:
        return self._apply(multi.flatten(self.working, depth))

    def flatten_by_key(self) -> Collection:
        return self._apply(multi.flatten_by_key(self.working))

    def sort_recursive(self, options: SortFlag = SortFlag.REGULAR, *, descending: bool = False) -> Collection:
        return self._apply(multi.sort_recursive(self.working, options, descending=descending))

    def collapse(self) -> Collection:
        return self._apply(multi.collapse(self.working))

    def group_by(self, key: Key | Callable[[Any], Any], *, preserve_keys: bool = False) -> Collection:
        return self._apply(multi.group_by(self.working, key, preserve_keys=preserve_keys))

    def between(self, key: Key, low: Any, high: Any) -> Collection:
        return self._apply(multi.between(self.working, key, low, high))

    def where_callback(self, callback: Callable[[Any], Any]) -> Collection:
        return self._apply(multi.where_callback(self.working, callback))

    def where(self, key: Key, operator: Any = None, value: Any = None) -> Collection:
        return self._apply(multi.where(self.working, key, operator, value))

    def where_in(self, key: Key, values: Iterable[Any], *, strict: bool = False) -> Collection:
        return self._apply(multi.where_in(self.working, key, values, strict=strict))

    def where_not_in(self, key: Key, values: Iterable[Any], *, strict: bool = False) -> Collection:
        return self._apply(multi.where_not_in(self.working, key, values, strict=strict))

    def where_null(self, key: Key) -> Collection:
        return self._apply(multi.where_null(self.working, key))

    def where_not_null(self, key: Key) -> Collection:
        return self._apply(multi.where_not_null(self.working, key))

    def sort_by(
        self,
        by: Key | Callable[[Any], Any],
        *,
        desc: bool = False,
        options: SortFlag = SortFlag.REGULAR,
    ) -> Collection:
        return self._apply(multi.sort_by(self.working, by, desc=desc, options=options))

    def pluck(self, column: Key, index_by: Key | None = None) -> Collection:
        return self._apply(multi.pluck(self.working, column, index_by))

    def transpose(self) -> Collection:
        return self._apply(multi.transpose(self.working))

    def wrap(self) -> Collection:
        return self._apply(wrap(self.working))

    def unwrap(self) -> Collection:
        """Unwrap a single-element container, keeping a scalar result wrapped in a list."""
        unwrapped = unwrap(self.working)
        return self._apply(unwrapped if isinstance(unwrapped, (list, dict)) else [unwrapped])

    # control flow

    def each(self, callback: Callable[[Any], Any]) -> Collection:
        """Call callback for every value until it returns False."""
        _ = single.each(self.working, callback)
        return self._collection

    def tap(self, callback: Callable[[Any], object]) -> Collection:
        _ = callback(self.working)
        return self._collection

    def pipe(self, callback: Callable[[Any], Any]) -> Collection:
        return self._apply(callback(self.working))

    def when(
        self,
        condition: bool,  # noqa: FBT001
        callback: Callable[[Any], Any],
        default: Callable[[Any], Any] | None = None,
    ) -> Collection:
        """Pipe through callback when condition holds, otherwise through default."""
        if condition:
            return self._apply(callback(self.working))
        if default is not None:
            return self._apply(default(self.working))
        return self._collection

    def unless(
        self,
        condition: bool,  # noqa: FBT001
        callback: Callable[[Any], Any],
        default: Callable[[Any], Any] | None = None,
    ) -> Collection:
        return self.when(not condition, callback, default)

    # terminal

    def sum(self, key: Key | Callable[[Any], Any] | None = None) -> int | float:
        """Sum the values, the row values at key, or the callback results."""
        return multi.sum_(self.working, key)

    def avg(self, callback: Callable[[Any], Any] | None = None) -> int | float:
        return single.avg(self.working, callback)

    def median(self) -> int | float:
        return single.median(self.working)

    def mode(self) -> list[Any]:
        return single.mode(self.working)

    def first(self, callback: Callable[[Any], Any] | None = None, default: Any = None) -> Any:
        return multi.first(self.working, callback, default)

    def last(self, callback: Callable[[Any], Any] | None = None, default: Any = None) -> Any:
        return multi.last(self.working, callback, default)

    def reduce(self, callback: Callable[[Any, Any], Any], initial: Any = None) -> Any:
        return single.reduce(self.working, callback, initial)

    def any(self, callback: Callable[[Any], Any]) -> bool:
        return single.some(self.working, callback)

    def every(self, callback: Callable[[Any], Any]) -> bool:
        return single.every(self.working, callback)

    def contains(self, needle: Any, *, strict: bool = False) -> bool:
        return single.contains(self.working, needle, strict=strict)

    def search(self, needle: Any, *, strict: bool = False) -> Key | None:
        return single.search(self.working, needle, strict=strict)

    def is_multi_dimensional(self) -> bool:
        return is_multi_dimensional(self.working)

    def depth(self) -> int:
        return multi.depth(self.working)

    def exists(self, key: Key) -> bool:
        return single.exists(self.working, key)

    def is_list(self) -> bool:
        return single.is_list(self.working)

    def is_assoc(self) -> bool:
        return single.is_assoc(self.working)

    def is_unique(self) -> bool:
        return single.is_unique(self.working)
