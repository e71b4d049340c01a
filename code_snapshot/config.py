"""User configuration for snapshot output."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from jsonschema import Draft202012Validator

from code_snapshot.constants import (
    CONFIG_DIRNAME,
    CONFIG_FILENAME,
    DEFAULT_FENCE,
    RULES_FILENAME,
)
from code_snapshot.errors import InvalidConfigSchemaError, InvalidYamlFormatError
from code_snapshot.utils import format_schema_error


CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "fence": {"type": "string", "minLength": 1, "pattern": "^[^\\r\\n]+$"},
        "rules_file": {"type": "string", "minLength": 1, "pattern": "^[^/\\\\]+$"},
        "summary": {"type": "boolean"},
    },
}


@dataclass(frozen=True)
class SnapshotConfig:
    fence: str = DEFAULT_FENCE
    rules_file: str = RULES_FILENAME
    summary: bool = False


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / CONFIG_DIRNAME / CONFIG_FILENAME


class ConfigRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or default_config_path()
        self._validator = Draft202012Validator(CONFIG_SCHEMA)

    @property
    def config_path(self) -> Path:
        return self._path

    def load(self) -> SnapshotConfig:
        payload = self._read_payload()
        if payload is None:
            return SnapshotConfig()
        self.validate(payload)
        defaults = SnapshotConfig()
        return SnapshotConfig(
            fence=payload.get("fence", defaults.fence),
            rules_file=payload.get("rules_file", defaults.rules_file),
            summary=payload.get("summary", defaults.summary),
        )

    def validate(self, payload: Any) -> None:
        error = next(iter(self._validator.iter_errors(payload)), None)
        if error is not None:
            raise InvalidConfigSchemaError(self._path, format_schema_error(error))

    def _read_payload(self) -> Any:
        if not self._path.exists() or self._path.stat().st_size == 0:
            return None
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                return yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise InvalidYamlFormatError(self._path, str(exc).splitlines()[0])
