"""Data models for date and time computations."""
from dataclasses import dataclass
from datetime import timedelta

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE


@dataclass(frozen=True)
class TimeSpan:
    """Represents the non-negative interval between two instants.

    The interval is stored as whole milliseconds; anything finer is dropped.
    Hours are not wrapped into days, so long spans keep growing the hours
    component.
    """
    milliseconds: int

    def __post_init__(self) -> None:
        if self.milliseconds < 0:
            raise ValueError("TimeSpan milliseconds must be non-negative")

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> 'TimeSpan':
        """Create a span from the magnitude of a timedelta."""
        return cls(abs(delta) // timedelta(milliseconds=1))

    @property
    def hours(self) -> int:
        return self.milliseconds // MILLIS_PER_HOUR

    @property
    def minutes(self) -> int:
        return (self.milliseconds % MILLIS_PER_HOUR) // MILLIS_PER_MINUTE

    @property
    def seconds(self) -> int:
        return (self.milliseconds % MILLIS_PER_MINUTE) // MILLIS_PER_SECOND

    @property
    def millis(self) -> int:
        return self.milliseconds % MILLIS_PER_SECOND

    def to_string(self) -> str:
        """Format as "HH:mm:ss.sss"."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}.{self.millis:03d}"

    def __str__(self) -> str:
        return self.to_string()
