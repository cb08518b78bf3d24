"""Helpers for nested data and for sequences of mapping rows.

Row columns are addressed with dot paths, so ``"address.city"`` reaches into
nested rows. Row filters keep the original row keys.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from dict_kit.paths import get_path

from . import single
from .base import OPERATORS, SortFlag, accessible, compare, pairs, rebuild, sort_key
from .single import chunk, each, every, map_, partition, reduce, some


if TYPE_CHECKING:
    from dict_kit.nodes import Key


__all__ = [
    "between",
    "chunk",
    "collapse",
    "depth",
    "each",
    "every",
    "first",
    "flatten",
    "flatten_by_key",
    "group_by",
    "last",
    "map_",
    "only",
    "partition",
    "pluck",
    "reduce",
    "some",
    "sort_by",
    "sort_recursive",
    "sum_",
    "transpose",
    "where",
    "where_callback",
    "where_in",
    "where_not_in",
    "where_not_null",
    "where_null",
]


_MISSING: Any = object()


def _value_of(row: Any, column: Key | Callable[[Any], Any], default: Any = None) -> Any:
    if callable(column):
        return column(row)
    if not accessible(row):
        return default
    return get_path(row, column, default)


def _compact(items: dict[Key, Any]) -> Any:
    if list(items.keys()) == list(range(len(items))):
        return list(items.values())
    return items


def only(rows: Any, keys: Key | Iterable[Key]) -> Any:
    """Project every row onto the given keys."""
    return rebuild(rows, ((key, single.only(row, keys)) for key, row in pairs(rows)))


def flatten(data: Any, depth: float = math.inf) -> list[Any]:
    """Inline nested containers into one list, up to depth levels.

    ``depth=1`` inlines exactly one level. A non-integer depth flattens fully.
    """
    if not isinstance(depth, int) or isinstance(depth, bool):
        depth = math.inf
    result: list[Any] = []
    for _, value in pairs(data):
        if not accessible(value):
            result.append(value)
        elif depth <= 1:
            result.extend(item for _, item in pairs(value))
        else:
            result.extend(flatten(value, depth - 1))
    return result


def _leaves(data: Any) -> Iterator[Any]:
    for _, value in pairs(data):
        if accessible(value):
            yield from _leaves(value)
        else:
            yield value


def flatten_by_key(data: Any) -> list[Any]:
    """Concatenate every leaf value, discarding all keys."""
    return list(_leaves(data))


def collapse(data: Any) -> list[Any]:
    """Merge the nested containers of data into one list, one level deep.

    Scalar elements of data are not containers and are dropped.
    """
    result: list[Any] = []
    for _, value in pairs(data):
        if accessible(value):
            result.extend(item for _, item in pairs(value))
    return result


def depth(data: Any) -> int:
    """Return the nesting depth: a flat container is 1, each wrapping level adds 1."""
    if not accessible(data):
        return 0
    return 1 + max((depth(value) for _, value in pairs(data)), default=0)


def sort_recursive(data: Any, options: SortFlag = SortFlag.REGULAR, *, descending: bool = False) -> Any:
    """Sort mapping keys and list values at every level, depth first."""
    if not accessible(data):
        return data
    items = [(key, sort_recursive(value, options, descending=descending)) for key, value in pairs(data)]
    if single.is_list(data):
        values = sorted((value for _, value in items), key=lambda value: sort_key(value, options), reverse=descending)
        return rebuild(data, enumerate(values))
    items.sort(key=lambda item: sort_key(item[0], options), reverse=descending)
    return dict(items)


def group_by(rows: Any, key: Key | Callable[[Any], Any], *, preserve_keys: bool = False) -> dict[Any, Any]:
    """Bucket rows by their value at key (or the callback result), in encounter order."""
    groups: dict[Any, Any] = {}
    for row_key, row in pairs(rows):
        bucket = _value_of(row, key)
        if preserve_keys:
            groups.setdefault(bucket, {})[row_key] = row
        else:
            groups.setdefault(bucket, []).append(row)
    return groups


def pluck(rows: Any, column: Key, index_by: Key | None = None) -> Any:
    """Extract one column from every row, optionally keyed by another column."""
    if index_by is None:
        return [_value_of(row, column) for _, row in pairs(rows)]
    return {_value_of(row, index_by): _value_of(row, column) for _, row in pairs(rows)}


def transpose(rows: Any) -> Any:
    """Swap rows and columns; ragged rows produce partial columns."""
    columns: dict[Key, dict[Key, Any]] = {}
    for row_key, row in pairs(rows):
        if not accessible(row):
            continue
        for column_key, value in pairs(row):
            columns.setdefault(column_key, {})[row_key] = value
    return _compact({column_key: _compact(cells) for column_key, cells in columns.items()})


def between(rows: Any, key: Key, low: Any, high: Any) -> dict[Key, Any]:
    """Keep rows whose value at key lies within [low, high]."""
    at_least = OPERATORS[">="]
    at_most = OPERATORS["<="]
    result: dict[Key, Any] = {}
    for row_key, row in pairs(rows):
        value = _value_of(row, key, _MISSING)
        if value is not _MISSING and at_least(value, low) and at_most(value, high):
            result[row_key] = row
    return result


def where(rows: Any, key: Key, operator: Any = None, value: Any = None) -> dict[Key, Any]:
    """Keep rows whose value at key satisfies the comparison.

    With two arguments (``where(rows, "status", "active")``) the operator
    defaults to loose equality.
    """
    if value is None and operator is not None and not (isinstance(operator, str) and operator in OPERATORS):
        operator, value = "==", operator
    return {row_key: row for row_key, row in pairs(rows) if compare(_value_of(row, key), value, operator)}


def where_in(rows: Any, key: Key, values: Iterable[Any], *, strict: bool = False) -> dict[Key, Any]:
    """Keep rows whose value at key is one of values."""
    candidates = list(values)
    return {
        row_key: row for row_key, row in pairs(rows) if single.contains(candidates, _value_of(row, key), strict=strict)
    }


def where_not_in(rows: Any, key: Key, values: Iterable[Any], *, strict: bool = False) -> dict[Key, Any]:
    """Keep rows whose value at key is none of values."""
    candidates = list(values)
    return {
        row_key: row
        for row_key, row in pairs(rows)
        if not single.contains(candidates, _value_of(row, key), strict=strict)
    }


def where_null(rows: Any, key: Key) -> dict[Key, Any]:
    """Keep rows whose value at key is None or missing."""
    return {row_key: row for row_key, row in pairs(rows) if _value_of(row, key) is None}


def where_not_null(rows: Any, key: Key) -> dict[Key, Any]:
    """Keep rows with a non-None value at key."""
    return {row_key: row for row_key, row in pairs(rows) if _value_of(row, key) is not None}


def where_callback(rows: Any, callback: Callable[[Any], Any]) -> dict[Key, Any]:
    """Keep rows passing callback."""
    return {row_key: row for row_key, row in pairs(rows) if callback(row)}


def sort_by(
    rows: Any,
    by: Key | Callable[[Any], Any],
    *,
    desc: bool = False,
    options: SortFlag = SortFlag.REGULAR,
) -> Any:
    """Stable sort of rows by the value at by (or the callback result)."""
    items = sorted(pairs(rows), key=lambda item: sort_key(_value_of(item[1], by), options), reverse=desc)
    return rebuild(rows, items)


def first(rows: Any, callback: Callable[[Any], Any] | None = None, default: Any = None) -> Any:
    """Return the first row, or the first row passing callback."""
    for _, row in pairs(rows):
        if callback is None or callback(row):
            return row
    return default


def last(rows: Any, callback: Callable[[Any], Any] | None = None, default: Any = None) -> Any:
    """Return the last row, or the last row (in original order) passing callback."""
    for _, row in reversed(list(pairs(rows))):
        if callback is None or callback(row):
            return row
    return default


def sum_(rows: Any, key: Key | Callable[[Any], Any] | None = None) -> int | float:
    """Sum the numeric values found at key (or returned by the callback) across rows."""
    if key is None:
        return single.sum_(rows)
    return single.sum_(rows, lambda row: _value_of(row, key))
