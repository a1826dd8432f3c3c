"""
Identifier and timestamp providers consumed by the entity services.
"""
import itertools
import time
import uuid
from typing import Protocol


class IdProvider(Protocol):
    """Issues identifiers that are never reissued."""

    def new_id(self) -> str:
        ...


class Clock(Protocol):
    """Reports the current time as an integer timestamp."""

    def now(self) -> int:
        ...


class UuidProvider:
    """Random UUID4 identifiers."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SystemClock:
    """Wall-clock time in nanoseconds since the Unix epoch."""

    def now(self) -> int:
        return time.time_ns()


class SequentialIds:
    """
    Deterministic identifiers: ``<prefix>-1``, ``<prefix>-2``, ...
    
    Useful for tests and fixtures where stable ids make assertions readable.
    """

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self._counter = itertools.count(1)

    def new_id(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


class FixedClock:
    """A clock that only moves when told to."""

    def __init__(self, start: int = 1_000, step: int = 0):
        self.current = start
        self.step = step

    def now(self) -> int:
        value = self.current
        self.current += self.step
        return value

    def advance(self, amount: int) -> None:
        self.current += amount
