"""Expiry timestamp parsing and formatting.

Timestamps are ISO-8601. A trailing ``Z`` is accepted as UTC, and values
without an offset are taken to be UTC. Formatting always converts to UTC
and uses the ``Z`` suffix, e.g. ``2099-01-01T00:00:00Z``.
"""
from __future__ import annotations

import datetime

from gglas_linker.errors import InvalidExpiryFormatError


def ensure_utc(value: datetime.datetime) -> datetime.datetime:
    """Return *value* as an aware UTC datetime (naive values are taken as UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def parse_expiry(text: str) -> datetime.datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Raises
    ------
    InvalidExpiryFormatError
        When *text* is empty or not a recognisable ISO-8601 date/time.
    """
    candidate = text.strip()
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"
    try:
        parsed = datetime.datetime.fromisoformat(candidate)
    except ValueError as exc:
        raise InvalidExpiryFormatError(text) from exc
    return ensure_utc(parsed)


def format_expiry(value: datetime.datetime) -> str:
    """Render *value* as a UTC ISO-8601 string with a ``Z`` suffix."""
    utc = ensure_utc(value)
    timespec = "microseconds" if utc.microsecond else "seconds"
    return utc.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"
