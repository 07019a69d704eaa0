"""Fake Time implementation for testing."""

from datetime import date

from sprout.core.time.abc import Time


class FakeTime(Time):
    """Clock frozen at a fixed date."""

    def __init__(self, today: date = date(2024, 1, 15)) -> None:
        self._today = today

    def today(self) -> date:
        return self._today
