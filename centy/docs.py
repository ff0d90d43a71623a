"""Documentation pages stored as Markdown files with YAML frontmatter."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .metadata import now_iso


class DocError(Exception):
    """Raised when a doc cannot be read or its input is invalid."""


class InvalidSlugError(DocError):
    """Raised when a slug does not meet the slug rules."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid slug: {reason}")


@dataclass
class DocMetadata:
    """Creation and update timestamps of a doc."""

    created_at: str
    updated_at: str

    @classmethod
    def now(cls) -> DocMetadata:
        """Metadata with both timestamps set to the current time."""
        stamp = now_iso()
        return cls(created_at=stamp, updated_at=stamp)


@dataclass
class Doc:
    """A doc: its slug, title, body and metadata."""

    slug: str
    title: str
    content: str
    metadata: DocMetadata = field(default_factory=DocMetadata.now)


def slugify(s: str) -> str:
    """Turn a string into a lower-case, hyphen-separated, URL-friendly slug."""
    kept = []
    for char in s.lower():
        if char.isascii() and char.isalnum():
            kept.append(char)
        elif char in " _-":
            kept.append("-")
    return "-".join(part for part in "".join(kept).split("-") if part)


def validate_slug(slug: str) -> None:
    """Raise InvalidSlugError unless slug is non-empty, alphanumeric with inner hyphens."""
    if not slug:
        raise InvalidSlugError("Slug cannot be empty")
    if not all((c.isascii() and c.isalnum()) or c == "-" for c in slug):
        raise InvalidSlugError(
            "Slug can only contain alphanumeric characters and hyphens"
        )
    if slug.startswith("-") or slug.endswith("-"):
        raise InvalidSlugError("Slug cannot start or end with a hyphen")


def escape_yaml_string(s: str) -> str:
    """Escape backslashes and double quotes for a double-quoted YAML string."""
    return s.replace("\\", "\\\\").replace('"', '\\"')


def generate_doc_content(title: str, content: str, metadata: DocMetadata) -> str:
    """Render a doc as frontmatter, a title heading and the body."""
    return (
        "---\n"
        f'title: "{escape_yaml_string(title)}"\n'
        f'createdAt: "{metadata.created_at}"\n'
        f'updatedAt: "{metadata.updated_at}"\n'
        "---\n\n"
        f"# {title}\n\n"
        f"{content}"
    )


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


def _drop_leading_empty(lines: list[str]) -> list[str]:
    for index, line in enumerate(lines):
        if line:
            return lines[index:]
    return []


def _frontmatter_value(raw: str) -> str:
    return raw.strip().strip('"')


def parse_doc_content(content: str) -> tuple[str, str, DocMetadata]:
    """Extract (title, body, metadata) from a doc file's text."""
    lines = _split_lines(content)

    if lines and lines[0] == "---" and "---" in lines[1:]:
        closing = lines.index("---", 1)
        fields = {"title": "", "createdAt": "", "updatedAt": ""}
        for line in lines[1:closing]:
            for key in fields:
                prefix = f"{key}:"
                if line.startswith(prefix):
                    fields[key] = _frontmatter_value(line[len(prefix):])
                    break

        body_lines = _drop_leading_empty(lines[closing + 1:])
        if body_lines and body_lines[0].startswith("# "):
            body_lines = _drop_leading_empty(body_lines[1:])
        body = "\n".join(body_lines).rstrip()

        metadata = DocMetadata(
            created_at=fields["createdAt"] or now_iso(),
            updated_at=fields["updatedAt"] or now_iso(),
        )
        return fields["title"], body, metadata

    title = ""
    body_start = 0
    for index, line in enumerate(lines):
        if line.startswith("# "):
            title = line[2:]
            body_start = index + 1
            break

    body = "\n".join(_drop_leading_empty(lines[body_start:])).rstrip()
    return title, body, DocMetadata.now()


def read_doc(doc_path: str | os.PathLike[str], slug: str) -> Doc:
    """Read and parse the doc file at doc_path under the given slug."""
    try:
        text = Path(doc_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocError(f"IO error: {exc}") from exc
    title, body, metadata = parse_doc_content(text)
    return Doc(slug=slug, title=title, content=body, metadata=metadata)