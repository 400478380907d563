"""Time formatting helpers for release listings.

`HumanTimeFormatter` is the default implementation of the `TimeFormatter`
capability. The plain functions are also registered as template filters by
the HTML adapter.
"""

from __future__ import annotations

from datetime import datetime, timezone

ABSOLUTE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
DATE_FORMAT = "%b %d, %Y"

_DURATION_UNITS = ("seconds", "minutes", "hours")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_absolute(value: datetime) -> str:
    """Render `value` in UTC as `YYYY-MM-DDTHH:MM:SSZ`."""

    return value.astimezone(timezone.utc).strftime(ABSOLUTE_FORMAT)


def duration_to_str(value: datetime, now: datetime | None = None) -> str:
    """Human relative rendering of `value` as seen from `now`.

    Anything older than five days falls back to a calendar date. Units are
    whole and truncated, so 47 hours is still "one day ago".
    """

    now = now or utc_now()
    seconds = int((now - value).total_seconds())
    if seconds <= 0:
        return "just now"

    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 5:
        return value.astimezone(timezone.utc).strftime(DATE_FORMAT)
    if days > 1:
        return f"{days} days ago"
    if days == 1:
        return "one day ago"
    if hours > 1:
        return f"{hours} hours ago"
    if hours == 1:
        return "an hour ago"
    if minutes > 1:
        return f"{minutes} minutes ago"
    if minutes == 1:
        return "one minute ago"
    return f"{seconds} seconds ago"


def format_duration(seconds: float) -> str:
    """Scale a number of seconds to the largest unit up to hours.

    One decimal is kept and a trailing `.0` is dropped: 90 -> "1.5 minutes".
    """

    value = float(seconds)
    unit = _DURATION_UNITS[0]
    for candidate in _DURATION_UNITS[1:]:
        if value / 60.0 >= 1.0:
            unit = candidate
            value /= 60.0
        else:
            break

    text = f"{value:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} {unit}"


def dedent(text: str) -> str:
    """Remove all leading whitespace from every line."""

    return "\n".join(line.lstrip() for line in text.splitlines())


class HumanTimeFormatter:
    """Default `TimeFormatter`: relative English phrases + UTC timestamps."""

    def relative(self, value: datetime, now: datetime) -> str:
        return duration_to_str(value, now)

    def absolute(self, value: datetime) -> str:
        return format_absolute(value)
