import dict_kit
from dict_kit import Collection, array_get, array_set, collect, compare, is_callable


def test_array_get_and_set() -> None:
    data: dict[str, object] = {"user": {"name": "Ann"}}
    assert array_get(data, "user.name") == "Ann"
    assert array_get(data, "user.email", "none") == "none"
    assert array_get(data, ["user.name"]) == {"user.name": "Ann"}

    assert array_set(data, "user.email", "ann@example.com") is True
    _ = array_set(data, "user.name", "Bob", overwrite=False)
    assert data == {"user": {"name": "Ann", "email": "ann@example.com"}}


def test_is_callable_excludes_strings() -> None:
    assert is_callable(len)
    assert is_callable(lambda: None)
    assert not is_callable("len")
    assert not is_callable(None)


def test_collect_wraps_data() -> None:
    collection = collect([1, 2])
    assert isinstance(collection, Collection)
    assert collection.all() == [1, 2]
    assert collect().all() == []


def test_compare_is_reexported() -> None:
    assert compare(1, "1")
    assert compare(1, 2, "<")


def test_package_exposes_version() -> None:
    assert isinstance(dict_kit.__version__, str)
