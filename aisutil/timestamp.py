"""A point in time with nanosecond resolution."""

import time
from dataclasses import dataclass

NANOSECONDS_PER_SECOND = 1_000_000_000


@dataclass(order=True)
class Time:
    """Seconds and nanoseconds, as kept by the system clock."""

    seconds: int = 0
    nanoseconds: int = 0

    def __add__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        seconds = self.seconds + other.seconds
        nanoseconds = self.nanoseconds + other.nanoseconds
        if nanoseconds >= NANOSECONDS_PER_SECOND:
            carry, nanoseconds = divmod(nanoseconds, NANOSECONDS_PER_SECOND)
            seconds += carry
        return Time(seconds, nanoseconds)

    def __sub__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        seconds = self.seconds - other.seconds
        nanoseconds = self.nanoseconds - other.nanoseconds
        if nanoseconds < 0:
            borrow, nanoseconds = divmod(nanoseconds, NANOSECONDS_PER_SECOND)
            seconds += borrow
        return Time(seconds, nanoseconds)

    def __truediv__(self, other):
        """Return how many whole times *other* fits into this time."""
        if not isinstance(other, Time):
            return NotImplemented
        numerator = self.seconds * NANOSECONDS_PER_SECOND + self.nanoseconds
        denominator = other.seconds * NANOSECONDS_PER_SECOND + other.nanoseconds
        return float(numerator // denominator)

    def total_nanoseconds(self):
        """Return the whole time expressed in nanoseconds."""
        return self.seconds * NANOSECONDS_PER_SECOND + self.nanoseconds

    def set_time(self):
        """Set this time to the current time of the system clock."""
        self.seconds, self.nanoseconds = divmod(time.time_ns(), NANOSECONDS_PER_SECOND)
        return self

    @classmethod
    def now(cls):
        """Return a new Time holding the current time."""
        return cls().set_time()