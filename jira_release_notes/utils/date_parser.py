"""Timestamp parsing for Jira and dev-status payloads."""

import math
from datetime import datetime, timezone

# Jira REST and dev-status timestamp formats
TIMESTAMP_FORMATS = [
    "%Y-%m-%dT%H:%M:%S.%f%z",  # 2021-11-04T06:09:09.106-0700
    "%Y-%m-%dT%H:%M:%S%z",  # 2021-11-04T06:09:09-0700, 2021-11-04T06:09:09Z
    "%Y-%m-%dT%H:%M:%S.%f",  # 2021-11-04T06:09:09.106
    "%Y-%m-%dT%H:%M:%S",  # 2021-11-04T06:09:09
    "%Y-%m-%d",  # 2021-11-04
]

EPOCH_MILLIS_MIN = 0


def parse_timestamp(value: str) -> datetime:
    """Parse a Jira timestamp string into a timezone-aware datetime.

    Naive values are assumed to be UTC.

    Args:
        value: Timestamp string as returned by the Jira API

    Returns:
        Parsed datetime object

    Raises:
        ValueError: If the format is not recognized
    """
    text = value.strip()
    for fmt in TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    raise ValueError(
        f"Unable to parse timestamp '{value}'. "
        f"Supported formats include: YYYY-MM-DDTHH:MM:SS.sss+HHMM, YYYY-MM-DD"
    )


def to_epoch_millis(value: str | int | float) -> int:
    """Convert a timestamp (epoch milliseconds or ISO string) to epoch milliseconds.

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"Not a finite timestamp: {value!r}")
        return int(value)

    text = value.strip()
    if text.lstrip("-").isdigit():
        return int(text)

    return round(parse_timestamp(text).timestamp() * 1000)


def parse_timestamp_or_default(
    value: str | int | float | None, default: int = EPOCH_MILLIS_MIN
) -> int:
    """Parse a timestamp to epoch milliseconds.

    Returns ``default`` when the value is missing or malformed.
    """
    if value is None:
        return default
    try:
        return to_epoch_millis(value)
    except ValueError:
        return default
