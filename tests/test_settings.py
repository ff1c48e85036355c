import json
from pathlib import Path

import pytest

from heaven.settings import Schema, Settings, SettingsError
from heaven.settings_schema import SCHEMA


@pytest.fixture
def schema() -> Schema:
    return Schema(SCHEMA)


def write_settings(path: Path, settings: object) -> Path:
    path.write_text(json.dumps(settings), "utf-8")
    return path


def test_schema_keys(schema: Schema) -> None:
    assert schema.keys == ["ui.theme", "logging.level"]


def test_schema_defaults(schema: Schema) -> None:
    assert schema.defaults == {
        "ui": {"theme": "textual-dark"},
        "logging": {"level": "info"},
    }


def test_missing_file(schema: Schema, tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    settings = Settings.read(schema, path)
    assert settings.get("ui.theme") == "textual-dark"
    assert settings.get_str("logging.level") == "info"
    assert not path.exists()


def test_read(schema: Schema, tmp_path: Path) -> None:
    path = write_settings(
        tmp_path / "settings.json",
        {"ui": {"theme": "nord"}, "logging": {"level": "debug"}},
    )
    settings = Settings.read(schema, path)
    assert settings.get_str("ui.theme") == "nord"
    assert settings.get_str("logging.level") == "debug"


def test_partial_file_keeps_defaults(schema: Schema, tmp_path: Path) -> None:
    path = write_settings(tmp_path / "settings.json", {"ui": {"theme": "dracula"}})
    settings = Settings.read(schema, path)
    assert settings.get("ui.theme") == "dracula"
    assert settings.get("logging.level") == "info"


@pytest.mark.parametrize(
    "settings, key",
    [
        ({"ui": {"theme": "paisley"}}, "ui.theme"),
        ({"ui": {"theme": 3}}, "ui.theme"),
        ({"ui": {"theme": True}}, "ui.theme"),
        ({"logging": {"level": "verbose"}}, "logging.level"),
        ({"logging": {"level": None}}, "logging.level"),
        ({"ui": {"colour": "blue"}}, "ui.colour"),
        ({"view": {"iterations": 100}}, "view.iterations"),
    ],
)
def test_invalid_values(
    schema: Schema, tmp_path: Path, settings: dict, key: str
) -> None:
    path = write_settings(tmp_path / "settings.json", settings)
    with pytest.raises(SettingsError) as exc_info:
        Settings.read(schema, path)
    assert exc_info.value.key == key


def test_not_a_choice_message(schema: Schema) -> None:
    with pytest.raises(SettingsError, match="'verbose' is not one of debug, info"):
        schema.validate("logging.level", "verbose")


def test_invalid_json(schema: Schema, tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{ui: ", "utf-8")
    with pytest.raises(SettingsError, match="invalid JSON"):
        Settings.read(schema, path)


def test_not_an_object(schema: Schema, tmp_path: Path) -> None:
    path = write_settings(tmp_path / "settings.json", [1, 2, 3])
    with pytest.raises(SettingsError, match="expected an object"):
        Settings.read(schema, path)
