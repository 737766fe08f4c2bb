"""Calendar helpers: timezone lookup and date normalization."""

import datetime
import logging
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzlocal import get_localzone

from moonphase.constants import DATE_FORMAT
from moonphase.errors import ConfigurationError, DateParseError

logger = logging.getLogger(__name__)


def get_timezone(name: Optional[str] = None) -> datetime.tzinfo:
    """Get the timezone used to place dates on the local calendar.

    Args:
        name: IANA timezone name, or None for the system's local timezone

    Returns:
        The timezone

    Raises:
        ConfigurationError: If the name is not a known timezone
    """
    if not name:
        try:
            tz = get_localzone()
        except (ZoneInfoNotFoundError, LookupError, ValueError) as e:
            raise ConfigurationError(f"Could not determine local timezone: {e}") from e
        logger.debug("Using system local timezone: %s", tz)
        return tz

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Unknown timezone '{name}'") from e


def local_midnight(day: datetime.date, tz: datetime.tzinfo) -> datetime.datetime:
    """Return the start of the given day in the given timezone."""
    return datetime.datetime(day.year, day.month, day.day, tzinfo=tz)


def today(tz: datetime.tzinfo) -> datetime.date:
    """Return the current calendar date in the given timezone."""
    return datetime.datetime.now(tz).date()


def parse_date(value: str) -> datetime.date:
    """Parse a YYYY-MM-DD date.

    Raises:
        DateParseError: If the value is not a valid date
    """
    try:
        return datetime.datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(value) from e


def format_date(day: datetime.date) -> str:
    return day.strftime(DATE_FORMAT)
