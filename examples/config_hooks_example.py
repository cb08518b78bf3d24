"""Minimal example for HookedConfig with dot-notation access."""

from dict_kit import HookedConfig


def main() -> None:
    """Run a basic load/get/set flow with per-path hooks."""
    config = HookedConfig({"app": {"name": "demo", "debug": "false"}, "db": {"port": 5432}})
    _ = config.on_get("app.debug", lambda value: value == "true")
    _ = config.on_set("db.port", int)

    print(f"{config=}")
    print("app.name:", config.get("app.name"))
    print("app.debug:", config.get("app.debug"))

    _ = config.set("db.port", "6543")
    _ = config.append("app.plugins", "auth")
    print("db.port:", config.get("db.port"))
    print("flat:", config.flatten())


if __name__ == "__main__":
    main()
