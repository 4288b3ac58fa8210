"""Human-readable labels for resolved dates and ranges.

Labels honour the precision the author wrote: ``[2020]`` reads "2020" even
though its instant is 2020-01-01T00:00:00Z, and the end of ``[2020~2021]``
reads "2021" although it resolves to the last second of that year.

Years before 1 are shown historically (astronomical year 0 is 1 BCE).
"""

from __future__ import annotations

from chronos_md.core.contracts.dates import DateRange, DateValue

from .locales import DEFAULT_LOCALE, get_locale
from .utc import MS_PER_DAY, MS_PER_SECOND, civil_from_days

OPEN_END = "…"
RANGE_JOINER = " – "


def _year_label(year: int, era_suffix: str) -> str:
    if year <= 0:
        return f"{1 - year} {era_suffix}"
    return str(year)


def format_date_label(value: DateValue, locale: str = DEFAULT_LOCALE) -> str:
    """Render `value` at its precision using the locale's display formats."""
    table = get_locale(locale)
    days, ms = divmod(value.instant, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    year_s = _year_label(year, table.era_suffix)

    if value.precision == "year":
        return year_s
    if value.precision == "month":
        return table.month_format.format(month=table.month_name(month), year=year_s)

    label = table.day_format.format(day=day, month=table.month_name(month), year=year_s)
    if value.precision == "day":
        return label

    hour, rem = divmod(ms // MS_PER_SECOND, 3600)
    minute, second = divmod(rem, 60)
    clock = f"{hour:02d}:{minute:02d}" + (f":{second:02d}" if second else "")
    return f"{label} {clock}"


def smart_date_range(when: DateRange | DateValue, locale: str = DEFAULT_LOCALE) -> str:
    """Render a date or range compactly.

    - a single value renders as its label
    - a range whose ends share a label (``[2020]``) renders once
    - an open range renders as ``"<start> – …"``
    """
    if isinstance(when, DateValue):
        return format_date_label(when, locale)
    start = format_date_label(when.start, locale)
    if when.end is None:
        return f"{start}{RANGE_JOINER}{OPEN_END}"
    end = format_date_label(when.end, locale)
    if end == start:
        return start
    return f"{start}{RANGE_JOINER}{end}"


__all__ = ["format_date_label", "smart_date_range"]
