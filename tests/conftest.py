from datetime import datetime, timedelta

import pytest

from contactbook.domain import record as record_module


class FakeClock:
    """Controllable replacement for the record module's wall clock."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock(datetime(2024, 5, 1, 10, 15, 42, 123456))
    monkeypatch.setattr(record_module, "_now", fake)
    return fake
