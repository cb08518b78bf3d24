"""Shared building blocks for the single- and multi-dimensional array helpers."""

from __future__ import annotations

import operator as op
import re
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any

from dict_kit.nodes import Key, accessible, pairs


__all__ = [
    "OPERATORS",
    "SortFlag",
    "accessible",
    "as_number",
    "compare",
    "is_multi_dimensional",
    "loose_equals",
    "loose_key",
    "pairs",
    "rebuild",
    "sort_key",
    "strict_key",
    "unwrap",
    "wrap",
]


class SortFlag(Enum):
    """Comparison mode used when ordering values."""

    REGULAR = "regular"
    NUMERIC = "numeric"
    STRING = "string"


def loose_key(value: Any) -> str:
    """Return the normalized string form used for loose equality."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float, str)):
        return str(value)
    return repr(value)


def strict_key(value: Any) -> tuple[str, Any]:
    """Return a hashable form that distinguishes values by type and value."""
    try:
        _ = hash(value)
    except TypeError:
        return (type(value).__name__, repr(value))
    return (type(value).__name__, value)


_NUMERIC = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*")
_INTEGER = re.compile(r"\s*[+-]?\d+\s*")


def as_number(value: Any) -> int | float | None:
    """Return value as a number when it is one or is a numeric string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and _NUMERIC.fullmatch(value):
        return int(value) if _INTEGER.fullmatch(value) else float(value)
    return None


def loose_equals(left: Any, right: Any) -> bool:
    """Compare the way a loosely typed language does.

    Booleans compare by truthiness, ``None`` equals empty values, numbers and
    numeric strings compare numerically, and anything else by string form.
    """
    if left == right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return bool(left) == bool(right)
    if left is None or right is None:
        other = right if left is None else left
        return other == "" if isinstance(other, str) else not other
    left_number, right_number = as_number(left), as_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number
    return loose_key(left) == loose_key(right)


def _ordered(compare_fn: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    def check(left: Any, right: Any) -> bool:
        left_number, right_number = as_number(left), as_number(right)
        if left_number is not None and right_number is not None:
            return bool(compare_fn(left_number, right_number))
        # incomparable values never satisfy an ordering
        try:
            return bool(compare_fn(left, right))
        except TypeError:
            return False

    return check


OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "==": loose_equals,
    "=": loose_equals,
    "!=": lambda left, right: not loose_equals(left, right),
    "<>": lambda left, right: not loose_equals(left, right),
    "ne": lambda left, right: not loose_equals(left, right),
    "<": _ordered(op.lt),
    "lt": _ordered(op.lt),
    ">": _ordered(op.gt),
    "gt": _ordered(op.gt),
    "<=": _ordered(op.le),
    "lte": _ordered(op.le),
    ">=": _ordered(op.ge),
    "gte": _ordered(op.ge),
    "===": lambda left, right: strict_key(left) == strict_key(right),
    "!==": lambda left, right: strict_key(left) != strict_key(right),
}


def compare(retrieved: Any, value: Any, operator: str | None = None) -> bool:
    """Compare two values with the given operator (loose equality by default)."""
    if operator is None:
        return loose_equals(retrieved, value)
    check = OPERATORS.get(operator) if isinstance(operator, str) else None
    if check is None:
        msg = f"unsupported comparison operator: {operator}"
        raise ValueError(msg)
    return check(retrieved, value)


def sort_key(value: Any, flag: SortFlag = SortFlag.REGULAR) -> tuple[Any, ...]:
    """Return a key that orders heterogeneous values consistently.

    Regular ordering ranks ``None`` first, then numbers (numeric strings
    included), other strings, and finally containers (by size, then element
    by element).
    """
    if flag is SortFlag.NUMERIC:
        number = as_number(value)
        return (0, 0 if number is None else number)
    if flag is SortFlag.STRING:
        return (0, loose_key(value))
    if value is None:
        return (0, 0)
    if isinstance(value, bool):
        return (1, int(value))
    number = as_number(value)
    if number is not None:
        return (1, number)
    if isinstance(value, str):
        return (2, value)
    if accessible(value):
        return (3, len(value), tuple(sort_key(item, flag) for _, item in pairs(value)))
    return (4, repr(value))


def is_multi_dimensional(data: Any) -> bool:
    """Return True when any element of data is itself a mapping or sequence."""
    return any(accessible(value) for _, value in pairs(data))


def wrap(value: Any) -> Any:
    """Return value as a container: None becomes [], scalars become [value]."""
    if value is None:
        return []
    if accessible(value):
        return value
    return [value]


def unwrap(data: Any) -> Any:
    """Return the only element of a single-element container, else data itself."""
    if accessible(data) and len(data) == 1:
        return next(iter(value for _, value in pairs(data)))
    return data


def rebuild(data: Any, items: Iterable[tuple[Key, Any]]) -> Any:
    """Build a result shaped like data: a dict for mappings, a list otherwise."""
    if isinstance(data, Mapping):
        return dict(items)
    return [value for _, value in items]
