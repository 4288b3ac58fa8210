# -----------------------------------------------------------------------------
# This module defines the registry of natural-language date locales.
#
# Each locale table names the dateparser language that reads human dates such
# as "January 3rd, 2020" or "3. Januar 2020", and the token order used for
# ambiguous numeric dates ("1/3/2020"). The same tables carry the month names
# and display formats used by the label renderer.
#
# The registry is built once at import time and exposed through a read-only
# mapping, so concurrent parses can share it safely.
# -----------------------------------------------------------------------------
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

TokenOrder = Literal["MDY", "DMY"]


@dataclass(frozen=True, slots=True)
class LocaleTable:
    """Natural-language date conventions for one locale.

    Parameters
    ----------
    code:
        Locale identifier, e.g. ``"en"`` or ``"en-GB"``.
    language:
        dateparser language code used to read dates in this locale.
    order:
        Day/month order for numeric dates, passed as dateparser's
        ``DATE_ORDER``.
    months:
        The twelve month names in display form, January first.
    day_format / month_format:
        ``str.format`` templates for labels with ``day``, ``month`` and
        ``year`` fields.
    era_suffix:
        Suffix appended to historical years before year 1.
    """

    code: str
    language: str
    order: TokenOrder
    months: tuple[str, ...]
    day_format: str
    month_format: str
    era_suffix: str

    def month_name(self, month: int) -> str:
        return self.months[month - 1]


_EN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip
_DE_MONTHS = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)  # fmt: skip
_FR_MONTHS = (
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
)  # fmt: skip
_ES_MONTHS = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)  # fmt: skip

LOCALES: Mapping[str, LocaleTable] = MappingProxyType(
    {
        "en": LocaleTable(
            code="en",
            language="en",
            order="MDY",
            months=_EN_MONTHS,
            day_format="{month} {day}, {year}",
            month_format="{month} {year}",
            era_suffix="BCE",
        ),
        "en-GB": LocaleTable(
            code="en-GB",
            language="en",
            order="DMY",
            months=_EN_MONTHS,
            day_format="{day} {month} {year}",
            month_format="{month} {year}",
            era_suffix="BCE",
        ),
        "de": LocaleTable(
            code="de",
            language="de",
            order="DMY",
            months=_DE_MONTHS,
            day_format="{day}. {month} {year}",
            month_format="{month} {year}",
            era_suffix="v. Chr.",
        ),
        "fr": LocaleTable(
            code="fr",
            language="fr",
            order="DMY",
            months=_FR_MONTHS,
            day_format="{day} {month} {year}",
            month_format="{month} {year}",
            era_suffix="av. J.-C.",
        ),
        "es": LocaleTable(
            code="es",
            language="es",
            order="DMY",
            months=_ES_MONTHS,
            day_format="{day} de {month} de {year}",
            month_format="{month} de {year}",
            era_suffix="a. C.",
        ),
    }
)

#: Identifiers accepted by ``ParseOptions.locale`` and ``--locale``.
KNOWN_LOCALES: frozenset[str] = frozenset(LOCALES)

DEFAULT_LOCALE = "en"


def get_locale(code: str) -> LocaleTable:
    """Return the table registered under `code`.

    Raises
    ------
    KeyError
        If no table is registered for `code`.
    """
    try:
        return LOCALES[code]
    except KeyError:
        raise KeyError(f"unknown locale {code!r}; expected one of {sorted(KNOWN_LOCALES)}") from None


__all__ = ["DEFAULT_LOCALE", "KNOWN_LOCALES", "LOCALES", "LocaleTable", "get_locale"]
