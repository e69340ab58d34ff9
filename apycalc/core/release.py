"""Deployment metadata used by clients to detect new releases."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple

from apycalc.schemas.version import VersionInfo


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def current_version(app_version: str) -> VersionInfo:
    return VersionInfo(version=app_version)


def parse_version(value: str) -> Optional[Tuple[int, ...]]:
    """'1.10.2' -> (1, 10, 2); None when any part is not a plain integer."""
    parts = value.strip().lstrip("v").split(".")
    if not all(part.isdigit() for part in parts):
        return None
    return tuple(int(part) for part in parts)


def is_update_available(current: str, latest: str) -> bool:
    """True when ``latest`` is strictly newer than ``current``.

    Missing trailing parts count as zero, so '1.2' and '1.2.0' are equal.
    A version that cannot be parsed never triggers an update.
    """
    current_parts = parse_version(current)
    latest_parts = parse_version(latest)
    if current_parts is None or latest_parts is None:
        return False

    for ours, theirs in zip_longest(current_parts, latest_parts, fillvalue=0):
        if theirs != ours:
            return theirs > ours
    return False
