import json
from typing import TYPE_CHECKING

import pytest

from dict_kit.__main__ import main


if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "app.yaml"
    _ = path.write_text("app:\n  name: demo\n  ports: [80, 443]\n", encoding="utf-8")
    return path


def test_get_prints_value_as_json(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["get", str(config_file), "app.ports"])
    assert json.loads(capsys.readouterr().out) == [80, 443]


def test_get_prints_default_for_missing_path(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["get", str(config_file), "app.missing", "--default", "fallback"])
    assert json.loads(capsys.readouterr().out) == "fallback"


def test_flatten_prints_dot_paths(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["flatten", str(config_file)])
    assert json.loads(capsys.readouterr().out) == {"app.name": "demo", "app.ports.0": 80, "app.ports.1": 443}


def test_version_flag_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["--version"])
    assert capsys.readouterr().out.strip()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        main(["get", str(tmp_path / "nope.yaml"), "a"])
