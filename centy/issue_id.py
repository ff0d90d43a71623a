"""Issue identifiers: UUID folder names and legacy four-digit numbers."""

from __future__ import annotations

import re
import uuid

_HEX = "[0-9a-fA-F]"
_HYPHENATED = f"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
_UUID_FORMS = re.compile(
    rf"{_HYPHENATED}|{_HEX}{{32}}|\{{{_HYPHENATED}\}}|urn:uuid:{_HYPHENATED}"
)


def is_uuid(s: str) -> bool:
    """Whether s is a UUID in simple, hyphenated, braced or URN form."""
    return _UUID_FORMS.fullmatch(s) is not None


def is_legacy_number(s: str) -> bool:
    """Whether s is a legacy four-digit issue number such as "0001"."""
    return len(s) == 4 and s.isascii() and s.isdigit()


def is_valid_issue_folder(name: str) -> bool:
    """Whether a folder name is a UUID or a legacy issue number."""
    return is_uuid(name) or is_legacy_number(name)


def generate_issue_id() -> str:
    """A fresh random UUID for a new issue folder."""
    return str(uuid.uuid4())


def short_id(id: str) -> str:
    """The first eight characters of an issue ID, for display."""
    return id[:8]