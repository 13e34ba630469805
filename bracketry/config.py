"""Service configuration read from a JSON file."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bracketry.errors import InvalidFormatError


def _field(data: Any, key: str, kind: type, what: str) -> Any:
    if not isinstance(data, Mapping):
        raise InvalidFormatError(f"{what} must be a JSON object")
    if key not in data:
        raise InvalidFormatError(f"{what}: missing required field '{key}'")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise InvalidFormatError(f"{what}: field '{key}' has the wrong type")
    return value


@dataclass(frozen=True)
class DatabaseConfiguration:
    """Database connection settings."""

    connection_string: str
    pool_size: int = 1

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DatabaseConfiguration:
        connection_string = _field(data, "connectionString", str, "databaseConfig")
        pool_size = 1
        if "poolSize" in data:
            pool_size = _field(data, "poolSize", int, "databaseConfig")
        return cls(connection_string=connection_string, pool_size=pool_size)


@dataclass(frozen=True)
class RunConfiguration:
    """HTTP server settings."""

    port: int
    concurrency: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunConfiguration:
        return cls(
            port=_field(data, "port", int, "runConfig"),
            concurrency=_field(data, "concurrency", int, "runConfig"),
        )


def load_configuration(path: str | Path = "configuration.json") -> dict[str, Any]:
    """Read the JSON configuration file and return its top-level object."""
    try:
        with open(path, encoding="utf-8") as handle:
            document = json.load(handle)
    except json.JSONDecodeError as exc:
        raise InvalidFormatError(f"{path}: invalid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise InvalidFormatError(f"{path}: configuration must be a JSON object")
    return document