"""Issues stored as folders holding issue.md and metadata.json."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .metadata import IssueMetadata

ISSUE_FILE = "issue.md"
METADATA_FILE = "metadata.json"

_U32_MAX = 0xFFFFFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


class IssueFormatError(ValueError):
    """Raised when an issue folder lacks the files an issue needs."""


@dataclass
class IssueMetadataFlat:
    """Issue metadata with every custom field value rendered as a string."""

    display_number: int
    status: str
    priority: int
    created_at: str
    updated_at: str
    custom_fields: dict[str, str] = field(default_factory=dict)


@dataclass
class Issue:
    """A full issue: its folder ID, title, description and metadata."""

    id: str
    title: str
    description: str
    metadata: IssueMetadataFlat

    @property
    def issue_number(self) -> str:
        """Legacy name for the issue ID."""
        return self.id


def _split_lines(content: str) -> list[str]:
    """Split on newlines, dropping a CR before each newline and a final empty line."""
    if not content:
        return []
    parts = content.split("\n")
    ends_with_newline = content.endswith("\n")
    if ends_with_newline:
        parts.pop()
    last = len(parts) - 1
    return [
        part[:-1] if part.endswith("\r") and (i < last or ends_with_newline) else part
        for i, part in enumerate(parts)
    ]


def parse_issue_md(content: str) -> tuple[str, str]:
    """Extract (title, description) from the text of an issue.md file."""
    lines = _split_lines(content)
    if not lines:
        return "", ""

    first = lines[0]
    title = first[1:].strip() if first.startswith("#") else first

    rest = lines[1:]
    start = next((i for i, line in enumerate(rest) if line), len(rest))
    description = "\n".join(rest[start:]).rstrip()
    return title, description


def generate_issue_md(title: str, description: str) -> str:
    """Render the issue.md text for a title and description."""
    if not description:
        return f"# {title}\n"
    return f"# {title}\n\n{description}\n"


def _field_to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def read_issue(issue_path: str | os.PathLike[str], issue_id: str) -> Issue:
    """Read the issue stored in the folder issue_path under the given ID."""
    folder = Path(issue_path)
    issue_md_path = folder / ISSUE_FILE
    metadata_path = folder / METADATA_FILE

    if not issue_md_path.exists() or not metadata_path.exists():
        raise IssueFormatError(f"Issue {issue_id} is missing required files")

    title, description = parse_issue_md(issue_md_path.read_text(encoding="utf-8"))
    metadata = IssueMetadata.from_json(metadata_path.read_text(encoding="utf-8"))

    return Issue(
        id=issue_id,
        title=title,
        description=description,
        metadata=IssueMetadataFlat(
            display_number=metadata.display_number,
            status=metadata.status,
            priority=metadata.priority,
            created_at=metadata.created_at,
            updated_at=metadata.updated_at,
            custom_fields={
                key: _field_to_string(value)
                for key, value in metadata.custom_fields.items()
            },
        ),
    )


def _parse_unsigned(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def get_next_issue_number(issues_path: str | os.PathLike[str]) -> str:
    """Next legacy issue number, zero-padded to four digits."""
    issues_path = Path(issues_path)
    if not issues_path.exists():
        return "0001"

    numbers = (
        _parse_unsigned(entry.name)
        for entry in issues_path.iterdir()
        if entry.is_dir()
    )
    max_number = max((n for n in numbers if n is not None), default=0)
    return f"{max_number + 1:04d}"