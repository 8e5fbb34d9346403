"""Datetime parsing: lax input -> timezone-aware datetimes and display strings."""

from __future__ import annotations

from datetime import datetime, timezone

import pendulum

DISPLAY_FORMAT = "DD MMMM, YYYY"


def parse_datetime(value: str | datetime, default_tz: str = "UTC") -> datetime:
    """Parse a lax datetime string into a timezone-aware datetime.

    Accepts various formats:
    - 2026-02-02 22:21:29.975359+00
    - 2026-02-02 22:21
    - 2026-02-02
    - ISO 8601 variants with T separator

    Missing timezone defaults to default_tz.
    Missing time components default to zeros.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            tz = pendulum.timezone(default_tz)
            value = value.replace(tzinfo=tz)  # type: ignore[arg-type]
        return value

    parsed = pendulum.parse(value.strip(), tz=default_tz, strict=False)
    if not isinstance(parsed, pendulum.DateTime):
        # pendulum.parse returns Date for date-only strings
        parsed = pendulum.datetime(
            parsed.year, parsed.month, parsed.day, tz=default_tz  # type: ignore[union-attr]
        )
    return parsed  # type: ignore[return-value]


def format_display_date(dt: datetime, tz: str = "UTC") -> str:
    """Format a datetime for readers, e.g. ``05 March, 2026``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return pendulum.instance(dt).in_timezone(tz).format(DISPLAY_FORMAT)


def format_iso(dt: datetime) -> str:
    """Format a datetime as ISO 8601, assuming UTC for naive values."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()
