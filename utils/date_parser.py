"""Date string parsing and instant coercion utilities.

Instants are timezone-aware ``datetime`` objects in UTC. Parsers return
``None`` for text they cannot read instead of raising.
"""
import logging
import re
from datetime import date, datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Optional, Union

from dateutil import parser as date_parser

from config import config

logger = logging.getLogger(__name__)

Instant = Union[datetime, date, int, float]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# "GMT+01", "UTC-0530", "GMT +1:30" at the end of the string
_GMT_OFFSET_PATTERN = re.compile(
    r'\s*\b(?:GMT|UTC|UT)\s*([+-])(\d{1,2})(?::?(\d{2}))?\s*$', re.IGNORECASE
)

# RFC 2822 "-0000": UTC with no information about the local zone
_UNKNOWN_ZONE_PATTERN = re.compile(r'\s-0000$')


def from_epoch_millis(millis: Union[int, float]) -> datetime:
    """Build a UTC instant from milliseconds since the Unix epoch."""
    return EPOCH + timedelta(milliseconds=millis)


def to_epoch_millis(value: Instant) -> int:
    """Return the whole milliseconds between the Unix epoch and ``value``."""
    return (to_utc(value) - EPOCH) // timedelta(milliseconds=1)


def to_utc(value: Instant) -> datetime:
    """
    Coerce a supported instant representation to an aware UTC datetime.

    Accepts:
    - Aware datetime: converted to UTC
    - Naive datetime: interpreted in config.default_timezone
    - Date: midnight in config.default_timezone
    - Int or float: milliseconds since the Unix epoch

    Args:
        value: Instant to coerce

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        TypeError: If value is not one of the supported types
    """
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.replace(tzinfo=config.default_timezone)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        midnight = datetime(value.year, value.month, value.day, tzinfo=config.default_timezone)
        return midnight.astimezone(timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return from_epoch_millis(value)
    raise TypeError(f"Unsupported instant type: {type(value).__name__}")


def _normalize_gmt_offset(text: str) -> str:
    """Rewrite a trailing "GMT+hh[mm]" zone as a numeric "+hhmm" offset."""
    match = _GMT_OFFSET_PATTERN.search(text)
    if not match:
        return text
    sign, hours, minutes = match.groups()
    return f"{text[:match.start()]} {sign}{int(hours):02d}{minutes or '00'}"


def _attach_unknown_utc_zone(parsed: datetime, text: str) -> datetime:
    """Mark a "-0000" zone as UTC; email.utils leaves such results naive."""
    if parsed.tzinfo is None and _UNKNOWN_ZONE_PATTERN.search(text):
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_from_rfc2822(text: str) -> Optional[datetime]:
    """
    Parse an RFC 2822 date-time string into a UTC instant.

    Supports:
    - RFC 2822 section 3.3 form: "Tue, 26 Jan 2016 13:48:02 GMT"
    - GMT offset suffix: "Sun, 17 May 1998 03:00:00 GMT+01"
    - Natural-language form: "December 17, 1995 03:24:00"
      (when config.allow_natural_language is set)

    Strings without a zone are interpreted in config.default_timezone.
    A "-0000" zone is UTC.

    Args:
        text: Date string to parse

    Returns:
        Aware UTC datetime, or None if parse fails
    """
    if not isinstance(text, str) or not text.strip():
        return None

    normalized = _normalize_gmt_offset(text.strip())

    try:
        parsed = parsedate_to_datetime(normalized)
        return to_utc(_attach_unknown_utc_zone(parsed, normalized))
    except (TypeError, ValueError, IndexError, OverflowError):
        pass

    if not config.allow_natural_language:
        logger.debug("Could not parse RFC 2822 date %r", text)
        return None

    try:
        parsed = date_parser.parse(normalized, default=config.natural_language_default)
        return to_utc(parsed)
    except (ValueError, OverflowError) as exc:
        logger.debug("Could not parse RFC 2822 date %r: %s", text, exc)
        return None


def parse_from_iso8601(text: str) -> Optional[datetime]:
    """
    Parse an ISO 8601 date-time string into a UTC instant.

    Honors an explicit "+hh:mm" offset or the "Z" designator. Strings without
    an offset are interpreted in config.default_timezone.

    Args:
        text: Date string like "2016-01-19T16:07:37+00:00" or "2016-01-19T08:07:37Z"

    Returns:
        Aware UTC datetime, or None if parse fails
    """
    if not isinstance(text, str) or not text.strip():
        return None

    try:
        return to_utc(date_parser.isoparse(text.strip()))
    except (ValueError, OverflowError) as exc:
        logger.debug("Could not parse ISO 8601 date %r: %s", text, exc)
        return None
