"""Calendar and clock computations on instants."""
import math

from models import TimeSpan
from utils.date_parser import Instant, to_utc

DEGREES_PER_HOUR = 30.0
HOUR_HAND_DEGREES_PER_MINUTE = 0.5
MINUTE_HAND_DEGREES_PER_MINUTE = 6.0


def is_leap(year: int) -> bool:
    """Return True if the Gregorian calendar year has 366 days."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_leap_year(instant: Instant) -> bool:
    """
    Check whether the calendar year of an instant is a leap year.

    The year is taken from the UTC decomposition of the instant.

    Args:
        instant: Datetime, date, or epoch milliseconds

    Returns:
        True for leap years, False otherwise
    """
    return is_leap(to_utc(instant).year)


def format_time_span(start: Instant, end: Instant) -> str:
    """
    Format the span between two instants as "HH:mm:ss.sss".

    The sign of the span is discarded, so the arguments may come in either
    order. Hours are padded to two digits but never capped.

    Args:
        start: Start of the span
        end: End of the span

    Returns:
        Formatted span string, e.g. "05:20:10.453"
    """
    return TimeSpan.from_timedelta(to_utc(end) - to_utc(start)).to_string()


def clock_hands_angle(instant: Instant) -> float:
    """
    Return the smaller angle between the hands of an analog clock, in radians.

    The clock shows the UTC hour and minute of the instant. All arithmetic is
    done in degrees and converted to radians only at the end.

    Args:
        instant: Datetime, date, or epoch milliseconds

    Returns:
        Angle in the range [0, pi]
    """
    moment = to_utc(instant)
    hour_hand = (moment.hour % 12) * DEGREES_PER_HOUR + moment.minute * HOUR_HAND_DEGREES_PER_MINUTE
    minute_hand = moment.minute * MINUTE_HAND_DEGREES_PER_MINUTE

    angle = abs(hour_hand - minute_hand)
    if angle > 180:
        angle = 360 - angle
    if angle == 180:
        return math.pi

    return angle * math.pi / 180
