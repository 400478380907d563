from datetime import timedelta

import pytest

from core.services.timeformat import dedent, duration_to_str, format_absolute, format_duration


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(days=10), "May 31, 2024"),
        (timedelta(days=6), "Jun 04, 2024"),
        (timedelta(days=5), "5 days ago"),
        (timedelta(days=2), "2 days ago"),
        (timedelta(hours=47), "one day ago"),
        (timedelta(days=1), "one day ago"),
        (timedelta(hours=5), "5 hours ago"),
        (timedelta(hours=1, minutes=30), "an hour ago"),
        (timedelta(minutes=10), "10 minutes ago"),
        (timedelta(seconds=90), "one minute ago"),
        (timedelta(seconds=30), "30 seconds ago"),
        (timedelta(0), "just now"),
        (timedelta(minutes=-5), "just now"),
    ],
)
def test_duration_to_str(now, delta, expected):
    assert duration_to_str(now - delta, now) == expected


def test_format_absolute(now):
    assert format_absolute(now - timedelta(seconds=1)) == "2024-06-10T11:59:59Z"


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (30, "30 seconds"),
        (90, "1.5 minutes"),
        (600, "10 minutes"),
        (7200, "2 hours"),
        (259200, "72 hours"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_dedent_strips_leading_whitespace():
    assert dedent("  first\n\t  second\nthird  ") == "first\nsecond\nthird  "
