"""Short name generation utility

This module derives short, file-system-safe redirect names from an instant
in time. The instant is turned into integer milliseconds since the Unix epoch
and encoded in base62 (0-9, a-z, A-Z), which keeps names compact: any moment
between late 1971 and 2081 encodes to 7 characters.

Functions:
    base62_encode(number: int) -> str
        Encode a non-negative integer in base62.
    base62_decode(text: str) -> int
        Decode a base62 string back into an integer.
    generate_short_name(now: datetime, existing: Collection[str]) -> str
        Generate a short name for `now` that doesn't collide with `existing`.

Example:
    >>> from datetime import datetime, UTC
    >>> from linkbridge.utils import generate_short_name
    >>> now = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
    >>> generate_short_name(now, existing=set())
    'uZHcMJG'
    >>> generate_short_name(now, existing={'uZHcMJG'})
    'uZHcMJG1'
"""

import itertools
from datetime import datetime
from collections.abc import Collection

from linkbridge.utils.constants import BASE62_ALPHABET
from linkbridge.utils.helpers import timestamp_millis


BASE = len(BASE62_ALPHABET)  # 10 digits + 26 lowercase + 26 uppercase
_DIGIT_VALUES = {character: value for value, character in enumerate(BASE62_ALPHABET)}


def base62_encode(number: int) -> str:
    """Encode a non-negative integer in base62

    The most significant digit comes first; zero encodes as '0'.

    Args:
        number (int): value to encode

    Returns:
        str: base62 representation of `number`

    Raises:
        TypeError: if `number` is not an integer.
        ValueError: if `number` is negative.

    Example:
        >>> base62_encode(61)
        'Z'
        >>> base62_encode(62)
        '10'
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f'Number must be of type integer (given type: {type(number)}).')
    if number < 0:
        raise ValueError(f'Number must be a non-negative integer (given value: {number}).')

    if number == 0:
        return BASE62_ALPHABET[0]

    digits = []
    while number:
        number, remainder = divmod(number, BASE)
        digits.append(BASE62_ALPHABET[remainder])
    return ''.join(reversed(digits))


def base62_decode(text: str) -> int:
    """Decode a base62 string produced by base62_encode()

    Raises:
        ValueError: if `text` is empty or holds a non-base62 character.

    Example:
        >>> base62_decode('10')
        62
    """
    if not text:
        raise ValueError('Cannot decode an empty string.')

    number = 0
    for character in text:
        try:
            number = number * BASE + _DIGIT_VALUES[character]
        except KeyError:
            raise ValueError(f'Character {character!r} is not part of the base62 alphabet.') from None
    return number


def generate_short_name(now: datetime, existing: Collection[str]) -> str:
    """Generate a short name for an instant, avoiding names already taken

    The base name is the base62 encoding of `now` in milliseconds since the
    Unix epoch. When it is already taken (e.g. two redirects written within
    the same millisecond), a base62 counter suffix is appended: the base name
    followed by '1', '2', ..., 'Z', '10', ... until a free name is found.

    The function is pure: the caller reads the clock and collects the taken
    names. At most len(existing) + 1 candidates are tried, so the loop always
    terminates.

    Args:
        now (datetime):
            Instant the redirect is created. Naive values are treated as UTC.
        existing (Collection[str]):
            Short names already in use.

    Returns:
        str: a base62 short name not present in `existing`.

    Raises:
        ValueError: if `now` is before the Unix epoch.

    Example:
        >>> now = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
        >>> generate_short_name(now, existing={'uZHcMJG', 'uZHcMJG1'})
        'uZHcMJG2'
    """
    base_name = base62_encode(timestamp_millis(now))
    if base_name not in existing:
        return base_name

    for counter in itertools.count(1):
        candidate = f'{base_name}{base62_encode(counter)}'
        if candidate not in existing:
            return candidate
