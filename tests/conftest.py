from datetime import datetime, timedelta, UTC

import pytest
from pytest import MonkeyPatch

from linkbridge.utils.constants import CONFIG_FILE_ENV, OUTPUT_DIR_ENV, REGISTRY_FILE_ENV, LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: MonkeyPatch) -> None:
    """Keep the developer's linkbridge environment out of the tests."""
    for name in (CONFIG_FILE_ENV, OUTPUT_DIR_ENV, REGISTRY_FILE_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def ticking_clock(fixed_now):
    """Clock advancing by one millisecond on every call."""
    calls = {'count': 0}

    def clock() -> datetime:
        moment = fixed_now + timedelta(milliseconds=calls['count'])
        calls['count'] += 1
        return moment

    return clock
