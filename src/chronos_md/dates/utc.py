"""UTC canonicalization utilities.

Partial-ISO strings (``2020``, ``2020-05``, ``-450-03-01T12``) are padded to
fixed widths, validated against the proleptic Gregorian calendar, and turned
into integer milliseconds since the Unix epoch.

`datetime` cannot represent years before 1, so the day arithmetic uses the
civil-from-days / days-from-civil algorithms, which hold for any integer year
under astronomical numbering (year 0 is 1 BCE).

Missing components are filled according to a *bias*:

- ``start`` fills with minimums (month 01, day 01, 00:00:00.000)
- ``end`` fills with maximums (month 12, last day of month, 23:59:59.000)
"""

from __future__ import annotations

import re
from typing import Literal

Bias = Literal["start", "end"]
Precision = Literal["year", "month", "day", "time"]

MS_PER_SECOND = 1000
MS_PER_DAY = 86_400 * MS_PER_SECOND

_LOOSE_RE = re.compile(
    r"^(?P<year>-?\d{1,4})"
    r"(?:-(?P<month>\d{1,2})"
    r"(?:-(?P<day>\d{1,2})"
    r"(?:T(?P<hour>\d{1,2})"
    r"(?::(?P<minute>\d{1,2})"
    r"(?::(?P<second>\d{1,2}))?)?)?)?)?$"
)

_FIELDS = ("year", "month", "day", "hour", "minute", "second")

Components = tuple[int, int | None, int | None, int | None, int | None, int | None]


class InvalidDateError(ValueError):
    """Raised when a partial-ISO string names an impossible calendar value."""


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date."""
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146_097 + doe - 719_468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`."""
    z = days + 719_468
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def split_components(text: str) -> Components:
    """Split a (padded or unpadded) partial-ISO string into integer parts.

    Raises
    ------
    InvalidDateError
        If `text` is not partial-ISO shaped.
    """
    m = _LOOSE_RE.match(text.strip())
    if not m:
        raise InvalidDateError(f"not a partial ISO date: {text!r}")
    values = [None if m.group(f) is None else int(m.group(f)) for f in _FIELDS]
    year = values[0]
    assert year is not None
    return (year, values[1], values[2], values[3], values[4], values[5])


def pad(text: str) -> str:
    """Zero-pad every component to fixed width without changing precision.

    >>> pad("450")
    '0450'
    >>> pad("-450-3-1T9")
    '-0450-03-01T09'
    """
    year, month, day, hour, minute, second = split_components(text)
    out = f"-{abs(year):04d}" if year < 0 else f"{year:04d}"
    for sep, part in (("-", month), ("-", day), ("T", hour), (":", minute), (":", second)):
        if part is None:
            break
        out += f"{sep}{part:02d}"
    return out


def precision_of(text: str) -> Precision:
    """Deepest component present: year < month < day < time."""
    _, month, day, hour, _, _ = split_components(text)
    if hour is not None:
        return "time"
    if day is not None:
        return "day"
    if month is not None:
        return "month"
    return "year"


def validate(
    year: int,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    minute: int | None = None,
    second: int | None = None,
) -> None:
    """Reject calendar-impossible values.

    Raises
    ------
    InvalidDateError
        For month outside 1..12, a day past the month's length (leap years
        included), hour outside 0..23, or minute/second outside 0..59.
    """
    if month is not None and not 1 <= month <= 12:
        raise InvalidDateError(f"month {month} is out of range 1..12")
    if day is not None:
        assert month is not None
        last = days_in_month(year, month)
        if not 1 <= day <= last:
            raise InvalidDateError(f"day {day} is out of range 1..{last} for {pad(f'{year}-{month}')}")
    if hour is not None and not 0 <= hour <= 23:
        raise InvalidDateError(f"hour {hour} is out of range 0..23")
    if minute is not None and not 0 <= minute <= 59:
        raise InvalidDateError(f"minute {minute} is out of range 0..59")
    if second is not None and not 0 <= second <= 59:
        raise InvalidDateError(f"second {second} is out of range 0..59")


def to_instant(text: str, bias: Bias = "start") -> int:
    """Resolve a partial-ISO string to UTC epoch milliseconds.

    Parameters
    ----------
    text:
        Partial-ISO date, padded or not.
    bias:
        ``"start"`` fills missing components with minimums, ``"end"`` with
        maximums (the last day of the resolved month, 23:59:59).

    Raises
    ------
    InvalidDateError
        If the string is malformed or names an impossible date.
    """
    year, month, day, hour, minute, second = split_components(text)
    validate(year, month, day, hour, minute, second)

    at_end = bias == "end"
    month = month if month is not None else (12 if at_end else 1)
    day = day if day is not None else (days_in_month(year, month) if at_end else 1)
    hour = hour if hour is not None else (23 if at_end else 0)
    minute = minute if minute is not None else (59 if at_end else 0)
    second = second if second is not None else (59 if at_end else 0)

    days = days_from_civil(year, month, day)
    return days * MS_PER_DAY + ((hour * 60 + minute) * 60 + second) * MS_PER_SECOND


def format_instant(instant: int, precision: Precision = "time") -> str:
    """Render epoch milliseconds as padded partial ISO at `precision`."""
    days, ms = divmod(instant, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    seconds = ms // MS_PER_SECOND
    hour, rem = divmod(seconds, 3600)
    minute, second = divmod(rem, 60)

    text = f"-{abs(year):04d}" if year < 0 else f"{year:04d}"
    if precision == "year":
        return text
    text += f"-{month:02d}"
    if precision == "month":
        return text
    text += f"-{day:02d}"
    if precision == "day":
        return text
    return f"{text}T{hour:02d}:{minute:02d}:{second:02d}"


__all__ = [
    "Bias",
    "InvalidDateError",
    "Precision",
    "civil_from_days",
    "days_from_civil",
    "days_in_month",
    "format_instant",
    "is_leap_year",
    "pad",
    "precision_of",
    "split_components",
    "to_instant",
    "validate",
]
