"""Helper utilities for time handling.

Functions:
    utc_now() -> datetime
        Default clock: the current instant as a timezone-aware UTC datetime
    timestamp_millis(moment: datetime) -> int
        Milliseconds elapsed since the Unix epoch for a given instant
    format_timestamp(moment: datetime) -> str
        ISO-8601 representation with millisecond precision and a 'Z' suffix
    parse_timestamp(text: str) -> datetime
        Inverse of format_timestamp(); naive values are interpreted as UTC
    normalize_timestamp(moment: datetime) -> datetime
        Aware UTC instant truncated to the millisecond, as stored in the registry

Example:
    >>> from datetime import datetime, UTC
    >>> moment = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
    >>> timestamp_millis(moment)
    1760529600000
    >>> format_timestamp(moment)
    '2025-10-15T12:00:00.000Z'
    >>> parse_timestamp('2025-10-15T12:00:00.000Z') == moment
    True
"""

from datetime import datetime, UTC


def utc_now() -> datetime:
    """Return the current instant in UTC"""
    return datetime.now(UTC)


def timestamp_millis(moment: datetime) -> int:
    """Return milliseconds since the Unix epoch

    Naive datetimes are interpreted as UTC.

    Args:
        moment (datetime): instant to convert

    Returns:
        int: integer milliseconds since 1970-01-01T00:00:00Z

    Example:
        >>> timestamp_millis(datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC))
        1000
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    # Integer arithmetic on the timedelta avoids float rounding of .timestamp()
    delta = moment - datetime(1970, 1, 1, tzinfo=UTC)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def format_timestamp(moment: datetime) -> str:
    """Format an instant as ISO-8601 UTC with millisecond precision

    Example:
        >>> format_timestamp(datetime(2025, 12, 26, 12, 0, 0, tzinfo=UTC))
        '2025-12-26T12:00:00.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    # fmt: off
    return moment.astimezone(UTC) \
                 .isoformat(timespec='milliseconds') \
                 .replace('+00:00', 'Z')
    # fmt: on


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime

    Raises:
        ValueError: if the text is not a valid ISO-8601 timestamp.
    """
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def normalize_timestamp(moment: datetime) -> datetime:
    """Return the instant as an aware UTC datetime truncated to milliseconds

    Naive datetimes are interpreted as UTC. The result equals what
    parse_timestamp(format_timestamp(moment)) yields.

    Example:
        >>> normalize_timestamp(datetime(2025, 10, 15, 12, 0, 0, 123456))
        datetime.datetime(2025, 10, 15, 12, 0, 0, 123000, tzinfo=datetime.timezone.utc)
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.replace(microsecond=moment.microsecond // 1000 * 1000)
