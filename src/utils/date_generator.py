"""
Date Generator
===============
Produces calendar dates as strings, either today's date or a random date laid
out according to a token-based format string.

Supported tokens (matched longest-first in a single pass):
  - YYYY → four-digit year, drawn from 1900-1999
  - YY   → last two digits of that year (only after a YYYY draw)
  - MMM  → three-letter month abbreviation (Jan … Dec)
  - MM   → two-digit month
  - DD   → two-digit day, never past the end of the month

Only formats listed in `SUPPORTED_DATE_FORMATS` are accepted.
"""

import random
import re
from datetime import date
from typing import Optional

from core.constants import DEFAULT_BOUND_YEAR, MONTH_ABBREVIATIONS, SUPPORTED_DATE_FORMATS
from core.errors import InvalidDateFormatError

_TOKEN_RE = re.compile(r"YYYY|YY|MMM|MM|DD")


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def today_iso(today: Optional[date] = None) -> str:
    """Today's date as YYYY-MM-DD."""
    today = today or date.today()
    return f"{today.year:04d}-{today.month:02d}-{today.day:02d}"


def _numeric_month(month: Optional[str]) -> int:
    # An abbreviation (or nothing at all) bounds days as January
    if month is not None and month.isdigit():
        return int(month)
    return 1


def generate_date(fmt: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    """
    Returns today's date when `fmt` is empty, otherwise a random date in `fmt`.

    Each token is resolved on its own. When a format carries `MMM`, the
    numeric month drawn for `MM` is replaced by an abbreviation, and the day
    is then bounded as if the month were January.
    """
    if not fmt:
        return today_iso()

    if fmt not in SUPPORTED_DATE_FORMATS:
        raise InvalidDateFormatError(fmt)

    rng = rng or random

    year: Optional[int] = None
    month: Optional[str] = None
    day: Optional[str] = None

    if "YYYY" in fmt:
        year = 1900 + rng.randint(0, 99)
    if "MM" in fmt:
        month = f"{rng.randint(1, 12):02d}"
    if "MMM" in fmt:
        month = rng.choice(MONTH_ABBREVIATIONS)
    if "DD" in fmt:
        max_days = days_in_month(_numeric_month(month), year or DEFAULT_BOUND_YEAR)
        day = f"{rng.randint(1, max_days):02d}"

    def _substitute(match: re.Match) -> str:
        token = match.group(0)
        if token == "YYYY":
            return str(year)
        if token == "YY":
            return str(year)[-2:]
        if token in ("MMM", "MM"):
            return month
        return day

    return _TOKEN_RE.sub(_substitute, fmt)
