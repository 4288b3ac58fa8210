"""Natural-language date normalizer.

Turns locale-formatted human dates into the partial-ISO text the resolver
understands::

    normalize("January 3rd, 2020")              -> "2020-01-03"
    normalize("3rd January 2020", "en-GB")      -> "2020-01-03"
    normalize("3. Januar 2020 14:30", "de")     -> "2020-01-03T14:30"
    normalize("March 2020")                     -> "2020-03"
    normalize("1/3/2020")                       -> "2020-01-03"   (en: month first)
    normalize("1/3/2020", "fr")                 -> "2020-03-01"   (fr: day first)

Reading is delegated to one ``dateparser.DateDataParser`` per registered
locale, built at import and never reconfigured afterwards. The parser's
``period`` gives the precision the author wrote.

The normalizer fails closed: anything dateparser does not read as an absolute
date with an explicit month and four-digit year returns ``None``. Two-digit
years (``1/3/20``) are never expanded. Year-only and negative-year tokens are
the ISO grammar's job and never reach this module.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from dateparser.date import DateDataParser  # type: ignore[import-untyped]

from .locales import DEFAULT_LOCALE, LOCALES, LocaleTable, get_locale

_FULL_YEAR_RE = re.compile(r"(?<!\d)\d{4}(?!\d)")
_SECONDS_RE = re.compile(r"\d:\d{2}:\d{2}")


def _settings(table: LocaleTable) -> dict[str, Any]:
    return {
        "PARSERS": ["absolute-time"],
        "REQUIRE_PARTS": ["month", "year"],
        "DATE_ORDER": table.order,
        "PREFER_LOCALE_DATE_ORDER": False,
        "PREFER_DAY_OF_MONTH": "first",
        "RETURN_TIME_AS_PERIOD": True,
        "TIMEZONE": "UTC",
        "RETURN_AS_TIMEZONE_AWARE": False,
    }


PARSERS: Mapping[str, DateDataParser] = MappingProxyType(
    {
        code: DateDataParser(languages=[table.language], settings=_settings(table))
        for code, table in LOCALES.items()
    }
)


def normalize(text: str, locale: str = DEFAULT_LOCALE) -> str | None:
    """Convert a human date to padded partial ISO, or return ``None``.

    Parameters
    ----------
    text:
        The date text, e.g. the inside of a ``[...]`` token.
    locale:
        Identifier of a registered locale table.

    Raises
    ------
    KeyError
        If `locale` is not registered.
    """
    get_locale(locale)
    stripped = text.strip()
    if not stripped:
        return None

    data = PARSERS[locale].get_date_data(stripped)
    parsed = data.date_obj
    if parsed is None:
        return None
    if str(parsed.year) not in _FULL_YEAR_RE.findall(stripped):
        return None

    if data.period == "month":
        return f"{parsed.year:04d}-{parsed.month:02d}"
    date = f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"
    if data.period != "time":
        return date
    clock = f"{parsed.hour:02d}:{parsed.minute:02d}"
    if _SECONDS_RE.search(stripped):
        clock += f":{parsed.second:02d}"
    return f"{date}T{clock}"


__all__ = ["PARSERS", "normalize"]
