"""Helpers for single-dimensional lists and mappings.

Callbacks receive each value. Functions that preserve keys return a dict of
original key (or list index) to value; the remaining functions return a list
for list input and a dict for mapping input.
"""

from __future__ import annotations

import random
import statistics
from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from .base import loose_equals, loose_key, pairs, rebuild, strict_key


if TYPE_CHECKING:
    from dict_kit.nodes import Key


def _as_keys(keys: Key | Iterable[Key]) -> list[Key]:
    if isinstance(keys, (str, int)):
        return [keys]
    return list(keys)


def _numbers(data: Any, callback: Callable[[Any], Any] | None = None) -> list[Any]:
    values = [value for _, value in pairs(data)]
    if callback is not None:
        values = [callback(value) for value in values]
    return [value for value in values if isinstance(value, (int, float))]


def exists(data: Any, key: Key) -> bool:
    """Return True when key (or list index) is present in data."""
    if isinstance(data, Mapping):
        return key in data
    return isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(data)


def is_list(data: Any) -> bool:
    """Return True when keys are exactly 0..n-1 in order."""
    if isinstance(data, Mapping):
        return list(data.keys()) == list(range(len(data)))
    return isinstance(data, (list, tuple))


def is_assoc(data: Any) -> bool:
    """Return True when data is a mapping whose keys are not 0..n-1 in order."""
    return not is_list(data)


def is_unique(data: Any) -> bool:
    """Return True when no value appears twice under loose comparison."""
    return not duplicates(data)


def only(data: Any, keys: Key | Iterable[Key]) -> dict[Key, Any]:
    """Keep only the given keys, in their original order."""
    wanted = set(_as_keys(keys))
    return {key: value for key, value in pairs(data) if key in wanted}


def except_(data: Any, keys: Key | Iterable[Key]) -> dict[Key, Any]:
    """Drop the given keys, keeping the rest in their original order."""
    unwanted = set(_as_keys(keys))
    return {key: value for key, value in pairs(data) if key not in unwanted}


def separate(data: Any) -> dict[str, list[Any]]:
    """Split data into its keys and its values."""
    items = list(pairs(data))
    return {"keys": [key for key, _ in items], "values": [value for _, value in items]}


def prepend(data: Any, value: Any, key: Key | None = None) -> Any:
    """Return a copy of data with value placed first (under key for mappings)."""
    if isinstance(data, Mapping):
        if key is None:
            msg = "key is required when prepending to a mapping"
            raise ValueError(msg)
        result = {key: value}
        result.update((item_key, item) for item_key, item in data.items() if item_key != key)
        return result
    return [value, *data]


def duplicates(data: Any) -> dict[Key, Any]:
    """Return every value whose loose form already appeared at an earlier key."""
    seen: set[str] = set()
    found: dict[Key, Any] = {}
    for key, value in pairs(data):
        normalized = loose_key(value)
        if normalized in seen:
            found[key] = value
        else:
            seen.add(normalized)
    return found


def unique(data: Any, *, strict: bool = False) -> Any:
    """Drop repeated values, keeping the first occurrence of each."""
    seen: set[Any] = set()
    kept: list[tuple[Key, Any]] = []
    for key, value in pairs(data):
        marker = strict_key(value) if strict else loose_key(value)
        if marker not in seen:
            seen.add(marker)
            kept.append((key, value))
    return rebuild(data, kept)


def slice_(data: Any, offset: int, length: int | None = None) -> dict[Key, Any]:
    """Return a key-preserving slice; negative offset/length count from the end."""
    items = list(pairs(data))
    if offset < 0:
        offset = max(len(items) + offset, 0)
    if length is None:
        selected = items[offset:]
    elif length >= 0:
        selected = items[offset : offset + length]
    else:
        selected = items[offset:length]
    return dict(selected)


def paginate(data: Any, page: int, per_page: int) -> Any:
    """Return the values of a 1-indexed page; out-of-range pages are empty."""
    if page < 1 or per_page < 1:
        return rebuild(data, [])
    return rebuild(data, slice_(data, (page - 1) * per_page, per_page).items())


def nth(data: Any, step: int, offset: int = 0) -> list[Any]:
    """Return every step-th value starting at offset."""
    if step < 1:
        msg = "step must be at least 1"
        raise ValueError(msg)
    values = [value for _, value in pairs(data)]
    return values[offset::step]


def chunk(data: Any, size: int, *, preserve_keys: bool = False) -> list[Any]:
    """Split data into groups of size; the last group may be smaller."""
    if size < 1:
        msg = "size must be at least 1"
        raise ValueError(msg)
    items = list(pairs(data))
    groups = [items[start : start + size] for start in range(0, len(items), size)]
    if preserve_keys:
        return [dict(group) for group in groups]
    return [[value for _, value in group] for group in groups]


def combine(keys: Any, values: Any) -> dict[Any, Any]:
    """Zip the values of keys against the values of values, truncating to the shorter."""
    return dict(zip((key for _, key in pairs(keys)), (value for _, value in pairs(values)), strict=False))


def map_(data: Any, callback: Callable[[Any], Any]) -> Any:
    """Apply callback to every value, keeping keys."""
    return rebuild(data, ((key, callback(value)) for key, value in pairs(data)))


def each(data: Any, callback: Callable[[Any], Any]) -> Any:
    """Call callback for every value until it returns False; return data."""
    for _, value in pairs(data):
        if callback(value) is False:
            break
    return data


def filter_(data: Any, callback: Callable[[Any], Any] | None = None) -> dict[Key, Any]:
    """Keep values passing callback (truthy values when no callback is given)."""
    predicate = callback if callback is not None else bool
    return {key: value for key, value in pairs(data) if predicate(value)}


where = filter_


def reject(data: Any, callback: Any = True) -> dict[Key, Any]:
    """Drop values passing callback, or values loosely equal to it when not callable."""
    if callable(callback):
        return {key: value for key, value in pairs(data) if not callback(value)}
    return {key: value for key, value in pairs(data) if not loose_equals(value, callback)}


def partition(data: Any, callback: Callable[[Any], Any]) -> tuple[dict[Key, Any], dict[Key, Any]]:
    """Split data into (passing, failing) by callback, keeping keys."""
    passing: dict[Key, Any] = {}
    failing: dict[Key, Any] = {}
    for key, value in pairs(data):
        target = passing if callback(value) else failing
        target[key] = value
    return passing, failing


def skip(data: Any, count: int) -> dict[Key, Any]:
    """Drop the first count items."""
    return dict(list(pairs(data))[max(count, 0) :])


def skip_while(data: Any, callback: Callable[[Any], Any]) -> dict[Key, Any]:
    """Drop items while callback passes; keep everything from the first failure on."""
    items = list(pairs(data))
    for position, (_, value) in enumerate(items):
        if not callback(value):
            return dict(items[position:])
    return {}


def skip_until(data: Any, callback: Callable[[Any], Any]) -> dict[Key, Any]:
    """Drop items until callback passes; keep everything from the first match on."""
    return skip_while(data, lambda value: not callback(value))


def sum_(data: Any, callback: Callable[[Any], Any] | None = None) -> int | float:
    """Sum the numeric values (or callback results)."""
    return sum(_numbers(data, callback))


def avg(data: Any, callback: Callable[[Any], Any] | None = None) -> int | float:
    """Return the mean of the numeric values, or 0 when there are none."""
    numbers = _numbers(data, callback)
    if not numbers:
        return 0
    return sum(numbers) / len(numbers)


def median(data: Any) -> int | float:
    """Return the median of the numeric values, or 0 when there are none."""
    numbers = _numbers(data)
    if not numbers:
        return 0
    return statistics.median(numbers)


def mode(data: Any) -> list[Any]:
    """Return every value tied for the highest frequency, in encounter order."""
    values = [value for _, value in pairs(data)]
    counts = Counter(strict_key(value) for value in values)
    if not counts:
        return []
    highest = max(counts.values())
    result: list[Any] = []
    emitted: set[Any] = set()
    for value in values:
        marker = strict_key(value)
        if counts[marker] == highest and marker not in emitted:
            emitted.add(marker)
            result.append(value)
    return result


def reduce(data: Any, callback: Callable[[Any, Any], Any], initial: Any = None) -> Any:
    """Fold values left to right into a single result."""
    carry = initial
    for _, value in pairs(data):
        carry = callback(carry, value)
    return carry


def some(data: Any, callback: Callable[[Any], Any]) -> bool:
    """Return True when at least one value passes callback."""
    return any(callback(value) for _, value in pairs(data))


def every(data: Any, callback: Callable[[Any], Any]) -> bool:
    """Return True when every value passes callback."""
    return all(callback(value) for _, value in pairs(data))


def _matcher(needle: Any, *, strict: bool) -> Callable[[Any], Any]:
    if callable(needle):
        return needle
    if strict:
        marker = strict_key(needle)
        return lambda value: strict_key(value) == marker
    return lambda value: loose_equals(value, needle)


def contains(data: Any, needle: Any, *, strict: bool = False) -> bool:
    """Return True when a value equals needle (or passes it, when callable)."""
    return search(data, needle, strict=strict) is not None


def search(data: Any, needle: Any, *, strict: bool = False) -> Key | None:
    """Return the key of the first value matching needle, or None."""
    matches = _matcher(needle, strict=strict)
    for key, value in pairs(data):
        if matches(value):
            return key
    return None


def shuffle(data: Any, seed: int | None = None) -> Any:
    """Return the items in random order; a seed makes the order reproducible."""
    items = list(pairs(data))
    random.Random(seed).shuffle(items)  # noqa: S311
    return rebuild(data, items)
