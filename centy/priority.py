"""Numeric issue priorities and their human-readable labels."""

from __future__ import annotations

import re

_U32_MAX = 0xFFFFFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


class PriorityError(ValueError):
    """Raised when a priority lies outside the configured range."""

    def __init__(self, priority: int, max_levels: int) -> None:
        self.priority = priority
        self.max_levels = max_levels
        super().__init__(
            f"Priority {priority} is out of range. Valid values: 1 to {max_levels}"
        )


def validate_priority(priority: int, max_levels: int) -> None:
    """Raise PriorityError unless 1 <= priority <= max_levels."""
    if priority < 1 or priority > max_levels:
        raise PriorityError(priority, max_levels)


def default_priority(priority_levels: int) -> int:
    """Middle priority (lower-middle for even counts); 1 when there are no levels."""
    if priority_levels == 0:
        return 1
    return (priority_levels + 1) // 2


def priority_label(priority: int, max_levels: int) -> str:
    """Human-readable label for a priority under the given number of levels."""
    if max_levels <= 1:
        return "normal"
    if max_levels == 2:
        return "high" if priority == 1 else "low"
    if max_levels == 3:
        return {1: "high", 2: "medium"}.get(priority, "low")
    if max_levels == 4:
        return {1: "critical", 2: "high", 3: "medium"}.get(priority, "low")
    return f"P{priority}"


def _parse_unsigned(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def label_to_priority(label: str, max_levels: int) -> int | None:
    """Convert a label such as "high", "P2" or "3" to a number, or None."""
    lowered = label.lower()
    if lowered in ("critical", "urgent"):
        return 1
    if lowered == "high":
        return 2 if max_levels >= 4 else 1
    if lowered in ("medium", "normal"):
        return default_priority(max_levels)
    if lowered == "low":
        return max_levels
    if label[:1] in ("P", "p"):
        return _parse_unsigned(label[1:])
    return _parse_unsigned(label)


def migrate_string_priority(priority_str: str, max_levels: int) -> int:
    """Map a legacy string priority to a number, falling back to the default."""
    value = label_to_priority(priority_str, max_levels)
    return default_priority(max_levels) if value is None else value