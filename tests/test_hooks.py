import pytest

from dict_kit.hooks import HookRegistry


def test_apply_without_hooks_returns_value_unchanged() -> None:
    hooks = HookRegistry()
    assert hooks.apply_get("a.b", 5) == 5
    assert hooks.apply_set("a.b", 5) == 5
    assert len(hooks) == 0


def test_register_and_apply_hooks() -> None:
    hooks = HookRegistry()
    hooks.on_get("user.name", str.upper)
    hooks.on_set("user.name", str.strip)
    hooks.on_get(7, lambda value: value * 2)

    assert hooks.has_get_hook("user.name")
    assert hooks.has_set_hook("user.name")
    assert not hooks.has_set_hook("7")
    assert hooks.apply_get("user.name", "ann") == "ANN"
    assert hooks.apply_set("user.name", "  ann ") == "ann"
    assert hooks.apply_get("7", 3) == 6
    assert len(hooks) == 2


def test_later_registration_replaces_earlier() -> None:
    hooks = HookRegistry()
    hooks.on_set("n", lambda value: value + 1)
    hooks.on_set("n", lambda value: value - 1)
    assert hooks.apply_set("n", 10) == 9


def test_hooks_match_exact_path_only() -> None:
    hooks = HookRegistry()
    hooks.on_get("user", lambda value: "hooked")
    assert hooks.apply_get("user.name", "ann") == "ann"


def test_remove_drops_both_directions() -> None:
    hooks = HookRegistry()
    hooks.on_get("a", str)
    hooks.on_set("a", str)
    hooks.remove("a")
    hooks.remove("never-registered")
    assert not hooks.has_get_hook("a")
    assert not hooks.has_set_hook("a")


def test_invalid_registrations() -> None:
    hooks = HookRegistry()
    with pytest.raises(TypeError, match="transform must be callable"):
        hooks.on_get("a", "upper")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="hook path must not be empty"):
        hooks.on_set("", str)
    with pytest.raises(TypeError, match="hook path must be a string or integer"):
        hooks.on_get(None, str)  # type: ignore[arg-type]
