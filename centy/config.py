"""Project configuration stored in .centy/config.json."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CENTY_VERSION = "0.1.3"
CENTY_FOLDER = ".centy"
CONFIG_FILE = "config.json"

_U32_MAX = 0xFFFFFFFF


class ConfigError(Exception):
    """Raised when the configuration file cannot be read, decoded or written."""


def _str(data: dict[str, Any], key: str, default: Any = ...) -> Any:
    if key not in data:
        if default is ...:
            raise ConfigError(f"JSON error: missing field `{key}`")
        return default
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"JSON error: field `{key}` must be a string")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"JSON error: field `{key}` must be a string or null")
    return value


def _bool(data: dict[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"JSON error: field `{key}` must be a boolean")
    return value


def _u32(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise ConfigError(f"JSON error: field `{key}` must be an unsigned 32-bit integer")
    return value


def _str_list(data: dict[str, Any], key: str, default: list[str]) -> list[str]:
    value = data.get(key, default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"JSON error: field `{key}` must be a list of strings")
    return list(value)


def _str_map(data: dict[str, Any], key: str) -> dict[str, str]:
    value = data.get(key, {})
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        raise ConfigError(f"JSON error: field `{key}` must be an object of strings")
    return dict(value)


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigError(f"JSON error: {what} must be a JSON object")
    return data


@dataclass
class CustomFieldDefinition:
    """Definition of a project-specific issue field."""

    name: str
    field_type: str
    required: bool = False
    default_value: str | None = None
    enum_values: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> CustomFieldDefinition:
        """Decode from the camelCase mapping."""
        data = _object(data, "custom field definition")
        return cls(
            name=_str(data, "name"),
            field_type=_str(data, "type"),
            required=_bool(data, "required"),
            default_value=_optional_str(data, "defaultValue"),
            enum_values=_str_list(data, "enumValues", []),
        )

    def to_dict(self) -> dict[str, Any]:
        """Encode as the camelCase mapping, omitting unset optional parts."""
        result: dict[str, Any] = {
            "name": self.name,
            "type": self.field_type,
            "required": self.required,
        }
        if self.default_value is not None:
            result["defaultValue"] = self.default_value
        if self.enum_values:
            result["enumValues"] = list(self.enum_values)
        return result


@dataclass
class LlmConfig:
    """Switches for automated issue management by an LLM."""

    auto_close_on_complete: bool = False
    update_status_on_start: bool = False
    allow_direct_edits: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> LlmConfig:
        """Decode from the camelCase mapping; missing switches are off."""
        data = _object(data, "llm configuration")
        return cls(
            auto_close_on_complete=_bool(data, "autoCloseOnComplete"),
            update_status_on_start=_bool(data, "updateStatusOnStart"),
            allow_direct_edits=_bool(data, "allowDirectEdits"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Encode as the camelCase mapping."""
        return {
            "autoCloseOnComplete": self.auto_close_on_complete,
            "updateStatusOnStart": self.update_status_on_start,
            "allowDirectEdits": self.allow_direct_edits,
        }


def _default_allowed_states() -> list[str]:
    return ["open", "in-progress", "closed"]


@dataclass
class CentyConfig:
    """Per-project configuration."""

    version: str | None = None
    priority_levels: int = 3
    custom_fields: list[CustomFieldDefinition] = field(default_factory=list)
    defaults: dict[str, str] = field(default_factory=dict)
    allowed_states: list[str] = field(default_factory=_default_allowed_states)
    default_state: str = "open"
    state_colors: dict[str, str] = field(default_factory=dict)
    priority_colors: dict[str, str] = field(default_factory=dict)
    llm: LlmConfig = field(default_factory=LlmConfig)

    @classmethod
    def from_dict(cls, data: Any) -> CentyConfig:
        """Decode from the camelCase mapping, filling in defaults."""
        data = _object(data, "config")
        custom_fields = data.get("customFields", [])
        if not isinstance(custom_fields, list):
            raise ConfigError("JSON error: field `customFields` must be a list")
        return cls(
            version=_optional_str(data, "version"),
            priority_levels=_u32(data, "priorityLevels", 3),
            custom_fields=[CustomFieldDefinition.from_dict(f) for f in custom_fields],
            defaults=_str_map(data, "defaults"),
            allowed_states=_str_list(data, "allowedStates", _default_allowed_states()),
            default_state=_str(data, "defaultState", "open"),
            state_colors=_str_map(data, "stateColors"),
            priority_colors=_str_map(data, "priorityColors"),
            llm=LlmConfig.from_dict(data.get("llm", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Encode as the camelCase mapping; an unset version is omitted."""
        result: dict[str, Any] = {}
        if self.version is not None:
            result["version"] = self.version
        result.update(
            {
                "priorityLevels": self.priority_levels,
                "customFields": [f.to_dict() for f in self.custom_fields],
                "defaults": dict(self.defaults),
                "allowedStates": list(self.allowed_states),
                "defaultState": self.default_state,
                "stateColors": dict(self.state_colors),
                "priorityColors": dict(self.priority_colors),
                "llm": self.llm.to_dict(),
            }
        )
        return result

    def effective_version(self) -> str:
        """The configured version, or the daemon's own version if unset."""
        return self.version if self.version is not None else CENTY_VERSION


def get_centy_path(project_path: str | os.PathLike[str]) -> Path:
    """The .centy directory of a project."""
    return Path(project_path) / CENTY_FOLDER


def read_config(project_path: str | os.PathLike[str]) -> CentyConfig | None:
    """Read the project's configuration, or None if there is no config file."""
    config_path = get_centy_path(project_path) / CONFIG_FILE
    if not config_path.exists():
        return None
    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"IO error: {exc}") from exc
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"JSON error: {exc}") from exc
    return CentyConfig.from_dict(data)


def write_config(project_path: str | os.PathLike[str], config: CentyConfig) -> None:
    """Write the project's configuration as pretty-printed JSON."""
    config_path = get_centy_path(project_path) / CONFIG_FILE
    content = json.dumps(config.to_dict(), indent=2, ensure_ascii=False)
    try:
        config_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"IO error: {exc}") from exc