"""A counter that remembers the highest value it has held."""


class PeakCount:
    """A rising and falling count together with its peak.

    The peak follows the value upward when a plain number is added; adding
    or subtracting another counter combines both values and both peaks.
    """

    __slots__ = ("_value", "_peak")

    def __init__(self, value=0, peak=0):
        self._value = value
        self._peak = max(value, peak)

    @property
    def value(self):
        """The current value."""
        return self._value

    @property
    def peak(self):
        """The highest value known."""
        return self._peak

    def __repr__(self):
        return f"PeakCount(value={self._value!r}, peak={self._peak!r})"

    def __int__(self):
        return int(self._value)

    def __float__(self):
        return float(self._value)

    def _copy(self):
        clone = PeakCount.__new__(PeakCount)
        clone._value = self._value
        clone._peak = self._peak
        return clone

    def __add__(self, other):
        if isinstance(other, PeakCount):
            return PeakCount(self._value + other._value, self._peak + other._peak)
        result = self._copy()
        result += other
        return result

    def __iadd__(self, other):
        if isinstance(other, PeakCount):
            self._value += other._value
            self._peak += other._peak
        else:
            self._value += other
            if self._value > self._peak:
                self._peak = self._value
        return self

    def __sub__(self, other):
        if isinstance(other, PeakCount):
            return PeakCount(self._value - other._value, self._peak - other._peak)
        result = self._copy()
        result._value -= other
        return result

    def __isub__(self, other):
        if isinstance(other, PeakCount):
            self._value -= other._value
            self._peak -= other._peak
        else:
            self._value -= other
        return self

    def increment(self):
        """Add one to the value, raising the peak if needed; return self."""
        self += 1
        return self

    def decrement(self):
        """Subtract one from the value; return self."""
        self._value -= 1
        return self

    def assign(self, other):
        """Take the value of *other*, leaving the peak untouched; return self."""
        self._value = other.value if isinstance(other, PeakCount) else other
        return self