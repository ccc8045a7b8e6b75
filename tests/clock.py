"""Deterministic clock for repository tests."""

from datetime import datetime, timedelta


class SteppingClock:
    """Clock that advances by a fixed step on every call.

    Gives repositories strictly increasing timestamps so ordering by time is
    deterministic.
    """

    def __init__(
        self,
        start: datetime = datetime(2024, 1, 1, 12, 0, 0),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self._next = start
        self._step = step

    def __call__(self) -> datetime:
        now = self._next
        self._next += self._step
        return now
