"""Read-only settings, described by a schema.

Settings are loaded from a JSON file if it exists. Nothing is ever written back.
They cover presentation only; the view always starts from the built-in defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal, Required, TypeAlias, TypedDict

import rich.repr
from typeguard import TypeCheckError, check_type

log = logging.getLogger("heaven.settings")


SettingsType: TypeAlias = dict[str, object]


class SchemaDict(TypedDict, total=False):
    key: Required[str]
    title: Required[str]
    type: Required[Literal["object", "boolean", "integer", "number", "string", "choices"]]
    help: str
    default: object
    fields: list[SchemaDict]
    choices: list[str]


PYTHON_TYPES: dict[str, Any] = {
    "boolean": bool,
    "integer": int,
    "number": int | float,
    "string": str,
    "choices": str,
}


@rich.repr.auto
class SettingsError(Exception):
    """The settings could not be loaded."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.message = message
        self.key = key
        super().__init__(f"{key}: {message}" if key else message)

    def __rich_repr__(self) -> rich.repr.Result:
        yield self.message
        yield "key", self.key, None


class Schema:
    def __init__(self, schema: list[SchemaDict]) -> None:
        self.schema = schema
        self._fields: dict[str, SchemaDict] = {}

        def collect(prefix: str, fields: list[SchemaDict]) -> None:
            for field in fields:
                key = f"{prefix}{field['key']}"
                if field["type"] == "object":
                    collect(f"{key}.", field.get("fields", []))
                else:
                    self._fields[key] = field

        collect("", schema)

    @property
    def keys(self) -> list[str]:
        """Dotted keys of every setting."""
        return list(self._fields)

    @property
    def defaults(self) -> SettingsType:
        """Default settings, nested as they would be in the settings file."""

        def build(fields: list[SchemaDict]) -> SettingsType:
            defaults: SettingsType = {}
            for field in fields:
                if field["type"] == "object":
                    defaults[field["key"]] = build(field.get("fields", []))
                elif "default" in field:
                    defaults[field["key"]] = field["default"]
            return defaults

        return build(self.schema)

    def get_default(self, key: str) -> object:
        return self._fields[key].get("default")

    def validate(self, key: str, value: object) -> object:
        """Check a single value against the schema.

        Args:
            key: Dotted key.
            value: Value from the settings file.

        Raises:
            SettingsError: If the key is unknown, or the value is invalid.

        Returns:
            The value.
        """
        try:
            field = self._fields[key]
        except KeyError:
            raise SettingsError("unknown setting", key) from None
        expected_type = PYTHON_TYPES[field["type"]]
        try:
            # bool is a subclass of int, and never a valid number here
            if isinstance(value, bool) and field["type"] != "boolean":
                raise TypeCheckError("is a bool")
            check_type(value, expected_type)
        except TypeCheckError as error:
            raise SettingsError(
                f"expected {field['type']}, got {value!r} ({error})", key
            ) from None
        if (choices := field.get("choices")) is not None and value not in choices:
            raise SettingsError(
                f"{value!r} is not one of {', '.join(choices)}", key
            )
        return value


@rich.repr.auto
class Settings:
    """Settings values, with fallback to schema defaults."""

    def __init__(self, schema: Schema, settings: SettingsType | None = None) -> None:
        self._schema = schema
        self._values: dict[str, object] = {}
        if settings:
            self._load(settings)

    def __rich_repr__(self) -> rich.repr.Result:
        yield self._values

    def _load(self, settings: SettingsType, prefix: str = "") -> None:
        for name, value in settings.items():
            key = f"{prefix}{name}"
            if isinstance(value, dict):
                self._load(value, f"{key}.")
            else:
                self._values[key] = self._schema.validate(key, value)

    @classmethod
    def read(cls, schema: Schema, path: Path) -> Settings:
        """Read settings from a JSON file.

        A missing file gives the default settings.

        Args:
            schema: Schema to validate against.
            path: Path to settings file.

        Raises:
            SettingsError: If the file can't be read or is invalid.

        Returns:
            Settings instance.
        """
        if not path.exists():
            log.info("no settings at %s, using defaults", path)
            return cls(schema)
        try:
            settings = json.loads(path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError) as error:
            raise SettingsError(f"unable to read {str(path)!r}; {error}") from None
        except json.JSONDecodeError as error:
            raise SettingsError(f"invalid JSON in {str(path)!r}; {error}") from None
        if not isinstance(settings, dict):
            raise SettingsError(f"expected an object in {str(path)!r}")
        log.info("loaded settings from %s", path)
        return cls(schema, settings)

    def get(self, key: str) -> object:
        """Get a setting.

        Args:
            key: Dotted key, e.g. "ui.theme".

        Returns:
            The value from the settings file, or the default.
        """
        if key in self._values:
            return self._values[key]
        return self._schema.get_default(key)

    def get_str(self, key: str) -> str:
        """Get a setting which the schema declares as a string or choice."""
        value = self.get(key)
        if not isinstance(value, str):
            raise SettingsError(f"expected a string, got {value!r}", key)
        return value
