"""Utility modules for datetasks.

This package provides date parsing and calendar/clock computations.

Modules:
    date_parser: RFC 2822 and ISO 8601 parsing, instant coercion
    time_utils: Leap years, time-span formatting, clock-hands angle
"""
from utils.date_parser import (
    from_epoch_millis,
    parse_from_iso8601,
    parse_from_rfc2822,
    to_epoch_millis,
    to_utc,
)
from utils.time_utils import clock_hands_angle, format_time_span, is_leap, is_leap_year

__all__ = [
    "parse_from_rfc2822",
    "parse_from_iso8601",
    "is_leap",
    "is_leap_year",
    "format_time_span",
    "clock_hands_angle",
    "to_utc",
    "from_epoch_millis",
    "to_epoch_millis",
]
