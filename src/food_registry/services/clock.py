"""Clock and id generator collaborators."""

import time
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4


class Clock(Protocol):
    """Source of monotonically non-decreasing timestamps."""

    def now(self) -> int:
        """Return the current timestamp in nanoseconds."""


class IdGenerator(Protocol):
    """Source of unique item identifiers."""

    def new_id(self) -> str:
        """Return a fresh identifier."""


@dataclass
class SystemClock(Clock):
    """Wall clock that never returns the same or an earlier value twice."""

    _last: int = 0

    def now(self) -> int:
        """Return nanoseconds since the epoch, strictly increasing per instance."""
        current = max(time.time_ns(), self._last + 1)
        self._last = current
        return current


class Uuid4IdGenerator(IdGenerator):
    """Random uuid4 identifiers."""

    def new_id(self) -> str:
        return str(uuid4())
