"""Unit tests for the model dataclasses in linkbridge.models.

Test coverage includes:

1. Model creation
   - RedirectEntryModel and UrlPath hold their values.
   - created_at is normalized to aware UTC with millisecond precision.

2. Serialization
   - to_dict() produces the registry record format.
   - from_dict() parses records and rejects malformed ones.

3. Immutability
   - Fields can't be reassigned after creation.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone, UTC

import pytest

from linkbridge.models import RedirectEntryModel, UrlPath


@pytest.fixture
def entry():
    return RedirectEntryModel(
        short_name='uZHcMJG',
        target='api/v1/users',
        created_at=datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC),
    )


# -------------------------------------------------
# 1. Model creation
# -------------------------------------------------


def test_entry_creation(entry):
    assert entry.short_name == 'uZHcMJG'
    assert entry.target == 'api/v1/users'
    assert entry.created_at == datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
    assert entry.file_name == 'uZHcMJG.html'


@pytest.mark.parametrize(
    'created_at',
    [
        datetime(2025, 10, 15, 12, 0, 0, 123456, tzinfo=UTC),
        datetime(2025, 10, 15, 12, 0, 0, 123999),
        datetime(2025, 10, 15, 14, 0, 0, 123000, tzinfo=timezone(timedelta(hours=2))),
    ],
)
def test_entry_normalizes_created_at(created_at):
    entry = RedirectEntryModel(short_name='uZHcMJG', target='api', created_at=created_at)

    assert entry.created_at == datetime(2025, 10, 15, 12, 0, 0, 123000, tzinfo=UTC)
    assert entry.created_at.utcoffset() == timedelta(0)
    assert RedirectEntryModel.from_dict(entry.to_dict()) == entry


def test_url_path_str():
    path = UrlPath('/docs/')
    assert str(path) == '/docs/'
    assert path == UrlPath('/docs/')


# -------------------------------------------------
# 2. Serialization
# -------------------------------------------------


def test_to_dict(entry):
    assert entry.to_dict() == {
        'short_name': 'uZHcMJG',
        'target': 'api/v1/users',
        'created_at': '2025-10-15T12:00:00.000Z',
    }


def test_from_dict_inverts_to_dict(entry):
    assert RedirectEntryModel.from_dict(entry.to_dict()) == entry


def test_from_dict_ignores_unknown_fields(entry):
    record = entry.to_dict() | {'note': 'ignored'}
    assert RedirectEntryModel.from_dict(record) == entry


@pytest.mark.parametrize('missing', ['short_name', 'target', 'created_at'])
def test_from_dict_missing_field_raises_error(entry, missing):
    record = entry.to_dict()
    del record[missing]
    with pytest.raises(KeyError):
        RedirectEntryModel.from_dict(record)


@pytest.mark.parametrize('field', ['short_name', 'target', 'created_at'])
def test_from_dict_non_string_field_raises_error(entry, field):
    record = entry.to_dict() | {field: 123}
    with pytest.raises(TypeError):
        RedirectEntryModel.from_dict(record)


@pytest.mark.parametrize('record', [None, [], 'uZHcMJG'])
def test_from_dict_non_mapping_raises_error(record):
    with pytest.raises(TypeError):
        RedirectEntryModel.from_dict(record)


def test_from_dict_bad_timestamp_raises_error(entry):
    with pytest.raises(ValueError):
        RedirectEntryModel.from_dict(entry.to_dict() | {'created_at': 'not a timestamp'})


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------


@pytest.mark.parametrize('field', ['short_name', 'target', 'created_at'])
def test_entry_is_frozen(entry, field):
    with pytest.raises(FrozenInstanceError):
        setattr(entry, field, None)


def test_url_path_is_frozen():
    with pytest.raises(FrozenInstanceError):
        UrlPath('api').value = 'other'
