"""Resolve display-number conflicts between issue folders.

When issues are created offline on several machines, two of them may get the
same display number. The oldest issue (by creation time) keeps its number and
the others move to fresh numbers above the current maximum.
"""

from __future__ import annotations

import os
from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .issue_id import is_valid_issue_folder
from .metadata import IssueMetadata, MetadataError, now_iso

_METADATA_FILE = "metadata.json"


@dataclass(frozen=True)
class _IssueInfo:
    folder_name: str
    display_number: int
    created_at: str


def _issue_metadata_paths(issues_path: Path) -> Iterator[tuple[str, Path]]:
    """Yield (folder name, metadata path) for every issue folder with metadata."""
    for entry in sorted(issues_path.iterdir(), key=lambda p: p.name):
        if not entry.is_dir() or not is_valid_issue_folder(entry.name):
            continue
        metadata_path = entry / _METADATA_FILE
        if metadata_path.exists():
            yield entry.name, metadata_path


def reconcile_display_numbers(issues_path: str | os.PathLike[str]) -> int:
    """Give every issue a unique display number; return how many were reassigned."""
    issues_path = Path(issues_path)
    if not issues_path.exists():
        return 0

    issues: list[_IssueInfo] = []
    for folder_name, metadata_path in _issue_metadata_paths(issues_path):
        content = metadata_path.read_text(encoding="utf-8")
        try:
            metadata = IssueMetadata.from_json(content)
        except MetadataError:
            continue
        issues.append(_IssueInfo(folder_name, metadata.display_number, metadata.created_at))

    by_display_number: dict[int, list[_IssueInfo]] = defaultdict(list)
    for issue in issues:
        by_display_number[issue.display_number].append(issue)

    next_available = max((i.display_number for i in issues), default=0) + 1
    reassignments: list[tuple[str, int]] = []

    for display_number in sorted(by_display_number):
        group = by_display_number[display_number]
        if len(group) <= 1:
            continue
        if display_number == 0:
            # Legacy issues without a display number each get a fresh one.
            to_reassign = group
        else:
            to_reassign = sorted(group, key=lambda i: i.created_at)[1:]
        for issue in to_reassign:
            reassignments.append((issue.folder_name, next_available))
            next_available += 1

    for folder_name, new_number in reassignments:
        metadata_path = issues_path / folder_name / _METADATA_FILE
        metadata = IssueMetadata.from_json(metadata_path.read_text(encoding="utf-8"))
        metadata.display_number = new_number
        metadata.updated_at = now_iso()
        metadata_path.write_text(metadata.to_json(), encoding="utf-8")

    return len(reassignments)


def get_next_display_number(issues_path: str | os.PathLike[str]) -> int:
    """One more than the highest display number in use (1 when there are none)."""
    issues_path = Path(issues_path)
    if not issues_path.exists():
        return 1

    max_number = 0
    for _, metadata_path in _issue_metadata_paths(issues_path):
        try:
            metadata = IssueMetadata.from_json(metadata_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, MetadataError):
            continue
        max_number = max(max_number, metadata.display_number)
    return max_number + 1