import pytest

from dict_kit.paths.parser import join_path, split_path


def test_split_path_and_join_path() -> None:
    assert split_path("user.roles.0") == ("user", "roles", "0")
    assert split_path(3) == ("3",)
    assert join_path("user", "roles", 0) == "user.roles.0"


def test_split_path_custom_separator() -> None:
    assert split_path("a/b", sep="/") == ("a", "b")


def test_path_parser_rejects_invalid_inputs() -> None:
    with pytest.raises(ValueError, match="path must not be empty"):
        _ = split_path("")
    with pytest.raises(ValueError, match="invalid path with empty segment"):
        _ = split_path("user..name")
    with pytest.raises(ValueError, match="invalid path with empty segment"):
        _ = split_path(".user")
    with pytest.raises(ValueError, match="sep must not be empty"):
        _ = split_path("a.b", sep="")
    with pytest.raises(TypeError, match="path must be a string or integer"):
        _ = split_path(1.5)  # type: ignore[arg-type]

    with pytest.raises(ValueError, match="at least one path part is required"):
        _ = join_path()
    with pytest.raises(ValueError, match="path parts must not be empty"):
        _ = join_path("user", "")
