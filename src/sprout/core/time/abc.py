"""Clock abstraction for testing.

Scaffolded text embeds the current date; injecting the clock keeps that
date stable in tests.
"""

from abc import ABC, abstractmethod
from datetime import date


class Time(ABC):
    """Abstract clock operations for dependency injection."""

    @abstractmethod
    def today(self) -> date:
        """Return the current local date."""
        ...
