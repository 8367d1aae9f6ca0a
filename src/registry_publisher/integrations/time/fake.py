"""Fake Time implementation for testing.

FakeTime tracks sleep() calls without actually sleeping, and advances its
clock by the slept amount so elapsed time can be simulated.
"""

from datetime import UTC, datetime, timedelta

from registry_publisher.integrations.time.abc import Time


class FakeTime(Time):
    """In-memory fake implementation that tracks calls without sleeping.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, now: datetime | None = None) -> None:
        """Create FakeTime starting at ``now`` (defaults to a fixed instant)."""
        self._now = now if now is not None else datetime(2024, 1, 1, tzinfo=UTC)
        self._sleep_calls: list[float] = []

    @property
    def sleep_calls(self) -> list[float]:
        """Get the list of sleep() calls that were made.

        This property is for test assertions only.
        """
        return self._sleep_calls

    def sleep(self, seconds: float) -> None:
        self._sleep_calls.append(seconds)
        self._now = self._now + timedelta(seconds=seconds)

    def now(self) -> datetime:
        return self._now
