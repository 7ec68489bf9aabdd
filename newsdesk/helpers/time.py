from datetime import datetime
from typing import Optional, Union


def parse_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp as sent by the backend, or None if it can't be parsed"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        # fromisoformat only accepts a trailing "Z" from 3.11 on
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(value: Union[str, datetime, None]) -> str:
    """
    Format a timestamp for display in local time, e.g. "Mar 5, 2024, 02:30 PM".

    Timestamps with an offset are converted to the local zone; naive ones are
    taken to be local already.

    Returns an empty string for empty input and the original value unchanged
    when it is not a valid timestamp.
    """
    if not value:
        return ""

    parsed = parse_datetime(value)
    if parsed is None:
        return str(value)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return f"{parsed:%b} {parsed.day}, {parsed:%Y, %I:%M %p}"
