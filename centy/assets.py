"""Images and videos attached to issues, either per issue or shared."""

from __future__ import annotations

import enum
import hashlib
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from .metadata import now_iso

MAX_FILENAME_BYTES = 255
FALLBACK_MIME_TYPE = "application/octet-stream"

IMAGE_MIME_TYPES: dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "ico": "image/x-icon",
    "bmp": "image/bmp",
}

VIDEO_MIME_TYPES: dict[str, str] = {
    "mp4": "video/mp4",
    "webm": "video/webm",
    "mov": "video/quicktime",
    "avi": "video/x-msvideo",
    "mkv": "video/x-matroska",
}


class AssetScope(enum.Enum):
    """Where an asset is stored: inside one issue's folder or shared by all."""

    ISSUE_SPECIFIC = "issue-specific"
    SHARED = "shared"


class AssetError(Exception):
    """Raised when an asset operation fails or its input is invalid."""


@dataclass
class AssetInfo:
    """Description of a stored asset."""

    filename: str
    hash: str
    size: int
    mime_type: str
    is_shared: bool
    created_at: str


def compute_binary_hash(data: bytes) -> str:
    """Hex-encoded SHA-256 digest of data."""
    return hashlib.sha256(data).hexdigest()


def get_mime_type(filename: str) -> str | None:
    """MIME type for a supported image or video extension, or None."""
    extension = filename.rsplit(".", 1)[-1].lower()
    return IMAGE_MIME_TYPES.get(extension) or VIDEO_MIME_TYPES.get(extension)


def sanitize_filename(filename: str) -> str:
    """Return filename unchanged if it is a safe plain name; raise AssetError otherwise."""
    if not filename:
        raise AssetError("Invalid filename: Filename cannot be empty")
    if ".." in filename or "/" in filename or "\\" in filename:
        raise AssetError(
            "Invalid filename: Filename cannot contain path separators or '..'"
        )
    if filename.startswith("."):
        raise AssetError("Invalid filename: Filename cannot start with '.'")
    if len(filename.encode("utf-8")) > MAX_FILENAME_BYTES:
        raise AssetError(
            f"Invalid filename: Filename too long (max {MAX_FILENAME_BYTES} characters)"
        )
    return filename


def _creation_time(stat: os.stat_result) -> str:
    birth = getattr(stat, "st_birthtime", None)
    if birth is None:
        return now_iso()
    stamp = datetime.fromtimestamp(birth, tz=timezone.utc)
    return stamp.strftime("%Y-%m-%dT%H:%M:%S.%f+00:00")


def describe_asset(path: str | os.PathLike[str], is_shared: bool) -> AssetInfo:
    """Read the asset file at path and describe it."""
    asset_path = Path(path)
    try:
        data = asset_path.read_bytes()
        stat = asset_path.stat()
    except OSError as exc:
        raise AssetError(f"IO error: {exc}") from exc
    return AssetInfo(
        filename=asset_path.name,
        hash=compute_binary_hash(data),
        size=len(data),
        mime_type=get_mime_type(asset_path.name) or FALLBACK_MIME_TYPE,
        is_shared=is_shared,
        created_at=_creation_time(stat),
    )


def scan_assets(directory: str | os.PathLike[str], is_shared: bool) -> list[AssetInfo]:
    """Describe every regular file in directory, by name; none if it is missing."""
    directory = Path(directory)
    if not directory.exists():
        return []
    try:
        with os.scandir(directory) as entries:
            files = sorted(
                (entry.path for entry in entries if entry.is_file(follow_symlinks=False)),
                key=lambda p: os.path.basename(p),
            )
    except OSError as exc:
        raise AssetError(f"IO error: {exc}") from exc
    return [describe_asset(file_path, is_shared) for file_path in files]