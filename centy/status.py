"""Lenient validation of issue status values."""

from __future__ import annotations

import logging
from collections.abc import Sequence

_log = logging.getLogger(__name__)


def validate_status(status: str, allowed_states: Sequence[str]) -> bool:
    """Return whether status is allowed; unknown states only produce a warning."""
    is_valid = status in allowed_states
    if not is_valid:
        _log.warning(
            "Status '%s' is not in the allowed states list %s. Accepting anyway.",
            status,
            list(allowed_states),
        )
    return is_valid