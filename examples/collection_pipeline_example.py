"""Minimal example for Collection and its chainable pipeline."""

from dict_kit import collect


def main() -> None:
    """Filter, sort and pluck rows through a collection pipeline."""
    people = collect(
        [
            {"name": "Ann", "age": 16, "team": "red"},
            {"name": "Bob", "age": 21, "team": "blue"},
            {"name": "Cid", "age": 30, "team": "red"},
        ]
    )
    names = collect(people.copy())
    print("first adult:", people.process().first(lambda row: row["age"] >= 18))
    print("teams:", list(people.process().group_by("team").keys()))

    _ = names.process().where("age", ">=", 18).process().sort_by("age", desc=True).process().pluck("name")
    print("adults, oldest first:", names.all())
    print("as json:", names.to_json())


if __name__ == "__main__":
    main()
