"""Timestamp parsing and calendar labels.

Timestamps arrive as ISO-8601 strings from the court backend. Anything that does not
parse is treated as absent and never raised.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_iso_ms(value: str | None) -> int | None:
    """Return epoch milliseconds for an ISO-8601 string, or None when absent or malformed.

    A trailing ``Z`` is accepted and naive values are read as UTC.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Ignoring unparseable timestamp %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (parsed - _EPOCH) // _ONE_MS


def resolve_zone(name: str) -> timezone | ZoneInfo:
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.debug("Unknown display timezone %r, using UTC", name)
        return timezone.utc


def format_dashboard_date_label(epoch_ms: int, tz_name: str = "UTC") -> str | None:
    """Render e.g. ``March 4, 3:07 pm`` in the given zone, or None when the instant is out of range."""
    try:
        moment = (_EPOCH + timedelta(milliseconds=epoch_ms)).astimezone(resolve_zone(tz_name))
    except (OverflowError, ValueError):
        logger.debug("Timestamp %d ms is outside the displayable range", epoch_ms)
        return None
    month = MONTH_NAMES[moment.month - 1]
    period = "pm" if moment.hour >= 12 else "am"
    hour12 = 12 if moment.hour % 12 == 0 else moment.hour % 12
    return f"{month} {moment.day}, {hour12}:{moment.minute:02d} {period}"
