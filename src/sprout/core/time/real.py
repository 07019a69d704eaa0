"""Real clock implementation."""

from datetime import date

from sprout.core.time.abc import Time


class RealTime(Time):
    """Production implementation reading the system clock."""

    def today(self) -> date:
        return date.today()
