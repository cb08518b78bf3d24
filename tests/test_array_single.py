import pytest
from hypothesis import given
from hypothesis import strategies as st

from dict_kit.arrays import single


_INT_LISTS = st.lists(st.integers(min_value=-100, max_value=100), max_size=20)


def test_exists_only_and_except() -> None:
    data = {"name": "Alice", "age": 30, "job": "Developer"}
    assert single.exists(data, "age")
    assert not single.exists(data, "email")
    assert single.exists([1, 2], 1)
    assert not single.exists([1, 2], 2)
    assert not single.exists([1, 2], -1)
    assert not single.exists([1, 2], True)
    assert single.only(data, ["job", "name"]) == {"name": "Alice", "job": "Developer"}
    assert list(single.only(data, ["job", "name"])) == ["name", "job"]
    assert single.except_(data, "age") == {"name": "Alice", "job": "Developer"}
    assert single.only([10, 20, 30], [0, 2]) == {0: 10, 2: 30}


def test_is_list_and_is_assoc() -> None:
    assert single.is_list([10, 20, 30])
    assert single.is_list({0: "a", 1: "b"})
    assert not single.is_list({1: "a", 0: "b"})
    assert not single.is_list({"a": 1, "b": 2})
    assert single.is_assoc({"a": 1})


def test_duplicates_keyed_by_original_index() -> None:
    assert single.duplicates([1, 2, "1", 3, 2, 2]) == {2: "1", 4: 2, 5: 2}
    assert single.is_unique([1, 2, 3])
    assert not single.is_unique([1, 1.0])


def test_unique_loose_and_strict() -> None:
    assert single.unique([1, 2, 2, 3, 3, 4]) == [1, 2, 3, 4]
    assert single.unique([1, "1", 2, 3]) == [1, 2, 3]
    assert single.unique([1, "1", 2, 3], strict=True) == [1, "1", 2, 3]
    assert single.unique({"a": 1, "b": 1, "c": 2}) == {"a": 1, "c": 2}


def test_slice_preserves_keys() -> None:
    data = [1, 2, 3, 4, 5]
    assert single.slice_(data, 1, 3) == {1: 2, 2: 3, 3: 4}
    assert single.slice_(data, 1) == {1: 2, 2: 3, 3: 4, 4: 5}
    assert single.slice_(data, -2) == {3: 4, 4: 5}
    assert single.slice_(data, 1, -1) == {1: 2, 2: 3, 3: 4}


def test_paginate() -> None:
    assert single.paginate([1, 2, 3, 2], 1, 2) == [1, 2]
    assert single.paginate([1, 2, 3, 2], 2, 3) == [2]
    assert single.paginate([1, 2, 3, 2], 5, 2) == []
    assert single.paginate([1, 2, 3, 2], 0, 2) == []
    assert single.paginate({"a": 1, "b": 2, "c": 3}, 2, 2) == {"c": 3}


def test_nth_and_chunk() -> None:
    assert single.nth([1, 2, 3, 4, 5, 6], 2) == [1, 3, 5]
    assert single.nth([1, 2, 3, 4, 5, 6], 2, 1) == [2, 4, 6]
    assert single.chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert single.chunk([1, 2, 3], 2, preserve_keys=True) == [{0: 1, 1: 2}, {2: 3}]
    with pytest.raises(ValueError, match="size must be at least 1"):
        _ = single.chunk([1], 0)


def test_partition_reject_and_filter() -> None:
    passing, failing = single.partition([1, 2, 3, 4, 5], lambda value: value % 2 == 0)
    assert passing == {1: 2, 3: 4}
    assert failing == {0: 1, 2: 3, 4: 5}

    mixed = [1, 2, 3, 4, 5, "a", "b", "c"]
    kept = single.reject(mixed, lambda value: isinstance(value, int) and value > 3)
    assert list(kept.values()) == [1, 2, 3, "a", "b", "c"]
    assert single.reject([1, 2, 1, 3], 1) == {1: 2, 3: 3}

    assert single.filter_([1, 2, 3, 4], lambda value: value % 2 == 0) == {1: 2, 3: 4}
    assert single.filter_([0, 1, "", "x", None]) == {1: 1, 3: "x"}
    assert single.where is single.filter_


def test_skip_family_keeps_later_failures() -> None:
    data = [1, 2, 3, 4, 5, 6]
    assert list(single.skip(data, 3).values()) == [4, 5, 6]
    assert single.skip(data, 4) == {4: 5, 5: 6}
    assert list(single.skip_while([1, 2, 3, 1, 5], lambda value: value < 3).values()) == [3, 1, 5]
    assert list(single.skip_until([1, 2, 3, 1, 5], lambda value: value == 3).values()) == [3, 1, 5]
    assert single.skip_while([1, 2], lambda value: value < 3) == {}


def test_combine_truncates_to_shorter() -> None:
    assert single.combine(["a", "b", "c"], [1, 2, 3]) == {"a": 1, "b": 2, "c": 3}
    assert single.combine(["a", "b", "c"], [1, 2]) == {"a": 1, "b": 2}
    assert single.combine(["a"], [1, 2]) == {"a": 1}


def test_map_and_each() -> None:
    assert single.map_([1, 2, 3], lambda value: value * 10) == [10, 20, 30]
    assert single.map_({"a": 1}, lambda value: value + 1) == {"a": 2}

    seen: list[int] = []

    def visit(value: int) -> bool:
        seen.append(value)
        return value < 2

    assert single.each([1, 2, 3], visit) == [1, 2, 3]
    assert seen == [1, 2]


def test_statistics() -> None:
    assert single.sum_([1, 2, 3]) == 6
    assert single.sum_([1, 2, 3], lambda value: value * 2) == 12
    assert single.avg([2, 4, 6, 8]) == 5
    assert single.median([5, 1, 3]) == 3
    assert single.median([4, 1, 3, 2]) == 2.5
    assert single.mode([1, 2, 2, 3, 3]) == [2, 3]
    assert single.mode([4]) == [4]


def test_statistics_on_empty_input() -> None:
    assert single.sum_([]) == 0
    assert single.avg([]) == 0
    assert single.median([]) == 0
    assert single.mode([]) == []


def test_reduce_some_every_contains_search() -> None:
    assert single.reduce([1, 2, 3], lambda carry, value: carry + value, 0) == 6
    assert single.some([1, 2, 3], lambda value: value > 2)
    assert not single.some([], lambda value: True)
    assert single.every([2, 4], lambda value: value % 2 == 0)
    assert single.contains([1, 2, 3], "2")
    assert not single.contains([1, 2, 3], "2", strict=True)
    assert single.search([1, 2, 3, 4], lambda value: value == 3) == 2
    assert single.search({"a": 1, "b": 2}, 2) == "b"
    assert single.search([1, 2], 9) is None


def test_separate_and_prepend() -> None:
    assert single.separate({"a": 1, "b": 2}) == {"keys": ["a", "b"], "values": [1, 2]}
    assert single.prepend([2, 3], 1) == [1, 2, 3]
    assert list(single.prepend({"b": 2}, 1, "a").items()) == [("a", 1), ("b", 2)]
    with pytest.raises(ValueError, match="key is required"):
        _ = single.prepend({"b": 2}, 1)


def test_shuffle_is_deterministic_with_seed() -> None:
    data = list(range(20))
    assert single.shuffle(data, seed=7) == single.shuffle(data, seed=7)
    assert sorted(single.shuffle(data)) == data
    shuffled = single.shuffle({"a": 1, "b": 2, "c": 3}, seed=1)
    assert shuffled == {"a": 1, "b": 2, "c": 3}


@given(values=_INT_LISTS, page=st.integers(min_value=1, max_value=10), per_page=st.integers(min_value=1, max_value=5))
def test_paginate_matches_list_slicing_property(values: list[int], page: int, per_page: int) -> None:
    start = (page - 1) * per_page
    assert single.paginate(values, page, per_page) == values[start : start + per_page]


@given(values=_INT_LISTS)
def test_partition_halves_cover_input_property(values: list[int]) -> None:
    passing, failing = single.partition(values, lambda value: value > 0)
    assert sorted([*passing, *failing]) == list(range(len(values)))
    assert all(value > 0 for value in passing.values())
    assert not any(value > 0 for value in failing.values())
