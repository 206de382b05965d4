"""Unit tests for the short name helpers in shortener.py.

Test coverage includes:

1. base62_encode() / base62_decode()
   - Known values, alphabet order and round trips.
   - Invalid input raises TypeError / ValueError.

2. generate_short_name() basic behavior
   - The name is the base62 encoding of the instant in milliseconds.
   - Output contains only base62 characters.

3. Collision handling
   - A taken name gets a base62 counter suffix.
   - Repeated calls within the same millisecond produce unique names.

4. Edge cases
   - Naive datetimes are treated as UTC.
   - Instants before the Unix epoch are rejected.

5. Regression testing
   - Known instants produce stable names.
"""

import string
from datetime import datetime, timedelta, timezone, UTC

import pytest
from freezegun import freeze_time

from linkbridge.utils import base62_encode, base62_decode, generate_short_name, timestamp_millis, utc_now
from linkbridge.utils.constants import BASE62_ALPHABET


# -------------------------------
# 1. base62 encoding
# -------------------------------


@pytest.mark.parametrize(
    'number, expected',
    [
        (0, '0'),
        (9, '9'),
        (10, 'a'),
        (35, 'z'),
        (36, 'A'),
        (61, 'Z'),
        (62, '10'),
        (3843, 'ZZ'),
        (3844, '100'),
    ],
)
def test_base62_encode_known_values(number, expected):
    """Digits come first, then lowercase, then uppercase letters."""
    assert base62_encode(number) == expected


@pytest.mark.parametrize('number', [0, 1, 61, 62, 12345, 2**63 - 1, 10**30])
def test_base62_decode_inverts_encode(number):
    assert base62_decode(base62_encode(number)) == number


@pytest.mark.parametrize('number', [None, '12', 12.5, True])
def test_base62_encode_invalid_type_raises_error(number):
    with pytest.raises(TypeError):
        base62_encode(number)


def test_base62_encode_negative_raises_error():
    with pytest.raises(ValueError):
        base62_encode(-1)


@pytest.mark.parametrize('text', ['', 'abc-', 'a b', 'é'])
def test_base62_decode_invalid_text_raises_error(text):
    with pytest.raises(ValueError):
        base62_decode(text)


def test_alphabet_is_base62():
    assert BASE62_ALPHABET == string.digits + string.ascii_lowercase + string.ascii_uppercase
    assert len(set(BASE62_ALPHABET)) == 62


# -------------------------------
# 2. Basic generation
# -------------------------------


def test_short_name_encodes_milliseconds(fixed_now):
    """The base name decodes back to the instant in milliseconds."""
    name = generate_short_name(fixed_now, existing=set())
    assert base62_decode(name) == timestamp_millis(fixed_now)


def test_short_name_is_base62_safe(fixed_now):
    alphabet = set(BASE62_ALPHABET)
    name = generate_short_name(fixed_now, existing=set())
    assert name
    assert all(character in alphabet for character in name)


def test_short_name_is_pure(fixed_now):
    """Same instant and same taken names give the same result."""
    existing = {'abc'}
    assert generate_short_name(fixed_now, existing) == generate_short_name(fixed_now, existing)
    assert existing == {'abc'}


def test_later_instants_give_different_names(fixed_now):
    first = generate_short_name(fixed_now, existing=set())
    second = generate_short_name(fixed_now + timedelta(milliseconds=1), existing=set())
    assert first != second


@freeze_time('2025-10-15 12:00:00')
def test_short_name_from_default_clock():
    """utc_now() feeds generate_short_name() with the current instant."""
    assert generate_short_name(utc_now(), existing=()) == 'uZHcMJG'


# -------------------------------
# 3. Collision handling
# -------------------------------


def test_collision_appends_counter_suffix(fixed_now):
    base_name = generate_short_name(fixed_now, existing=set())
    assert generate_short_name(fixed_now, existing={base_name}) == f'{base_name}1'
    assert generate_short_name(fixed_now, existing={base_name, f'{base_name}1'}) == f'{base_name}2'


def test_collision_suffix_skips_taken_counters(fixed_now):
    base_name = generate_short_name(fixed_now, existing=set())
    existing = {base_name} | {f'{base_name}{base62_encode(i)}' for i in range(1, 62)}
    assert generate_short_name(fixed_now, existing) == f'{base_name}10'


def test_same_millisecond_names_are_unique(fixed_now):
    """Rapid calls within one millisecond never reuse a name."""
    existing = set()
    for _ in range(500):
        name = generate_short_name(fixed_now, existing)
        assert name not in existing
        existing.add(name)
    assert len(existing) == 500


def test_accepts_any_collection(fixed_now):
    base_name = generate_short_name(fixed_now, existing=[])
    assert generate_short_name(fixed_now, existing=[base_name]) == f'{base_name}1'
    assert generate_short_name(fixed_now, existing=frozenset({base_name})) == f'{base_name}1'


# -------------------------------
# 4. Edge cases
# -------------------------------


def test_naive_datetime_is_treated_as_utc(fixed_now):
    naive = fixed_now.replace(tzinfo=None)
    assert generate_short_name(naive, existing=set()) == generate_short_name(fixed_now, existing=set())


def test_other_timezones_are_converted(fixed_now):
    shifted = fixed_now.astimezone(timezone(timedelta(hours=2)))
    assert generate_short_name(shifted, existing=set()) == generate_short_name(fixed_now, existing=set())


def test_epoch_encodes_to_zero():
    assert generate_short_name(datetime(1970, 1, 1, tzinfo=UTC), existing=set()) == '0'


def test_pre_epoch_instant_raises_error():
    with pytest.raises(ValueError):
        generate_short_name(datetime(1969, 12, 31, 23, 59, 59, tzinfo=UTC), existing=set())


# -------------------------------
# 5. Regression test
# -------------------------------


def test_known_output_regression(fixed_now):
    """Ensure stable output for known inputs (detect logic drift)."""
    assert timestamp_millis(fixed_now) == 1_760_529_600_000
    assert generate_short_name(fixed_now, existing=set()) == 'uZHcMJG'
