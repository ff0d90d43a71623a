"""Issue metadata as stored in metadata.json."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .priority import migrate_string_priority

DEFAULT_PRIORITY_LEVELS = 3
_U32_MAX = 0xFFFFFFFF


class MetadataError(ValueError):
    """Raised when issue metadata cannot be decoded."""


def now_iso() -> str:
    """Current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_priority(value: Any) -> int:
    if isinstance(value, str):
        return migrate_string_priority(value, DEFAULT_PRIORITY_LEVELS)
    if _is_int(value):
        if value < 0:
            raise MetadataError("priority cannot be negative")
        if value > 0xFFFFFFFFFFFFFFFF:
            raise MetadataError(f"priority out of range: {value}")
        return value & _U32_MAX
    raise MetadataError(f"invalid priority {value!r}: expected a priority number or string")


def _require_str(data: dict[str, Any], key: str) -> str:
    if key not in data:
        raise MetadataError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise MetadataError(f"field `{key}` must be a string")
    return value


@dataclass
class IssueMetadata:
    """Metadata of one issue: numbering, state, priority, timestamps and custom fields."""

    status: str
    priority: int
    created_at: str
    updated_at: str
    display_number: int = 0
    custom_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        display_number: int,
        status: str,
        priority: int,
        custom_fields: dict[str, Any] | None = None,
    ) -> IssueMetadata:
        """New metadata with both timestamps set to now."""
        now = now_iso()
        return cls(
            status=status,
            priority=priority,
            created_at=now,
            updated_at=now,
            display_number=display_number,
            custom_fields=dict(custom_fields or {}),
        )

    @classmethod
    def from_dict(cls, data: Any) -> IssueMetadata:
        """Decode the camelCase mapping; legacy string priorities become numbers."""
        if not isinstance(data, dict):
            raise MetadataError("metadata must be a JSON object")
        display_number = data.get("displayNumber", 0)
        if not _is_int(display_number) or not 0 <= display_number <= _U32_MAX:
            raise MetadataError(f"invalid displayNumber: {display_number!r}")
        status = _require_str(data, "status")
        if "priority" not in data:
            raise MetadataError("missing field `priority`")
        priority = _parse_priority(data["priority"])
        created_at = _require_str(data, "createdAt")
        updated_at = _require_str(data, "updatedAt")
        custom_fields = data.get("customFields", {})
        if not isinstance(custom_fields, dict):
            raise MetadataError("field `customFields` must be an object")
        return cls(
            status=status,
            priority=priority,
            created_at=created_at,
            updated_at=updated_at,
            display_number=display_number,
            custom_fields=dict(custom_fields),
        )

    def to_dict(self) -> dict[str, Any]:
        """Encode as the camelCase mapping; empty custom fields are omitted."""
        result: dict[str, Any] = {
            "displayNumber": self.display_number,
            "status": self.status,
            "priority": self.priority,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.custom_fields:
            result["customFields"] = dict(self.custom_fields)
        return result

    @classmethod
    def from_json(cls, text: str) -> IssueMetadata:
        """Decode metadata from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MetadataError(f"invalid JSON: {exc}") from exc
        return cls.from_dict(data)

    def to_json(self) -> str:
        """Encode as pretty-printed JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)