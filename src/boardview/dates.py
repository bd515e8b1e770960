"""ISO date parsing shared by filtering, sorting, timeline and CSV."""

import re
from datetime import datetime, timedelta, timezone

_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_iso(value: str | None) -> datetime | None:
    """Parse an ISO 8601 string into an aware datetime, or None.

    Naive values are taken as UTC. A trailing "Z" is accepted.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_epoch_ms(value: str | None) -> int | None:
    """Epoch milliseconds for an ISO string, or None if absent/unparseable."""
    parsed = parse_iso(value)
    if parsed is None:
        return None
    return (parsed - _EPOCH) // timedelta(milliseconds=1)


def format_date_value(raw: str) -> str:
    """Render a stored date as YYYY-MM-DD.

    Values already starting with a date are truncated. Other parseable
    values are converted to UTC. Anything else is returned as-is.
    """
    if _DATE_PREFIX.match(raw):
        return raw[:10]
    parsed = parse_iso(raw)
    if parsed is None:
        return raw
    return parsed.astimezone(timezone.utc).strftime("%Y-%m-%d")
