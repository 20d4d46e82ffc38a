import logging
from datetime import date, datetime, timedelta

from scythe.errors import DateParseError

logger = logging.getLogger(__name__)

MONDAY = 0
SUNDAY = 6
DATE_FORMAT = "%Y-%m-%d"


def find_start_date(d: date) -> date:
    """Return the Monday on or before the given date"""
    while d.weekday() != MONDAY:
        d -= timedelta(days=1)
    return d


def find_end_date(d: date) -> date:
    """Return the Sunday on or after the given date"""
    while d.weekday() != SUNDAY:
        d += timedelta(days=1)
    return d


def parse_date(raw: str, today: date) -> date:
    """Parse console input into a date.

    Input of one or two characters is a day of the month in today's year and
    month, anything longer must be a full YYYY-MM-DD date.

    Raises:
        DateParseError: if the input is not a valid date

    """
    if len(raw) <= 2:
        try:
            return today.replace(day=int(raw))
        except ValueError as e:
            raise DateParseError(f"Invalid day of month {raw!r}: {e}") from e

    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(f"Invalid date {raw!r}, expected YYYY-MM-DD") from e


def resolve_start(raw: str, today: date) -> date:
    """Resolve the start of the reporting period, defaulting to this week's Monday"""
    raw = raw.strip()
    if not raw:
        return find_start_date(today)
    start = find_start_date(parse_date(raw, today))
    logger.debug(f"Resolved start date {raw!r} to {start}")
    return start


def resolve_end(raw: str, today: date) -> date:
    """Resolve the end of the reporting period, defaulting to the coming Sunday"""
    raw = raw.strip()
    if not raw:
        return find_end_date(today)
    end = find_end_date(parse_date(raw, today))
    logger.debug(f"Resolved end date {raw!r} to {end}")
    return end


def week_label(d: date) -> str:
    """Ledger label for a week, e.g. 3/4/2024"""
    return f"{d.month}/{d.day}/{d.year}"


def display_date(d: date) -> str:
    """Human readable date with a space padded day, e.g. Mar  4 2024"""
    return f"{d:%b} {d.day:>2} {d.year}"
