"""Tests for the natural-language date normalizer and its locale tables."""

from __future__ import annotations

import pytest

from chronos_md.dates.locales import KNOWN_LOCALES, LOCALES, get_locale
from chronos_md.dates.normalizer import PARSERS, normalize


@pytest.mark.parametrize(
    ("text", "locale", "expected"),
    [
        ("January 3rd, 2020", "en", "2020-01-03"),
        ("Jan 3, 2020", "en", "2020-01-03"),
        ("March 2020", "en", "2020-03"),
        ("3rd January 2020", "en-GB", "2020-01-03"),
        ("3. Januar 2020", "de", "2020-01-03"),
        ("12. März 1848", "de", "1848-03-12"),
        ("1er janvier 2020", "fr", "2020-01-01"),
        ("14 juillet 1789", "fr", "1789-07-14"),
        ("3 de enero de 2020", "es", "2020-01-03"),
        ("agosto de 1991", "es", "1991-08"),
    ],
)
def test_worded_dates(text: str, locale: str, expected: str) -> None:
    assert normalize(text, locale) == expected


@pytest.mark.parametrize(
    ("text", "locale", "expected"),
    [
        ("1/3/2020", "en", "2020-01-03"),
        ("1/3/2020", "en-GB", "2020-03-01"),
        ("1/3/2020", "fr", "2020-03-01"),
        ("03.01.2020", "de", "2020-01-03"),
    ],
)
def test_numeric_dates_follow_locale_order(text: str, locale: str, expected: str) -> None:
    """The same digits mean different dates depending on locale token order."""
    assert normalize(text, locale) == expected


def test_trailing_time_is_kept() -> None:
    assert normalize("January 3rd, 2020 14:30", "en") == "2020-01-03T14:30"
    assert normalize("3. Januar 2020 9:05:07", "de") == "2020-01-03T09:05:07"


@pytest.mark.parametrize(
    ("text", "locale"),
    [
        ("", "en"),
        ("   ", "en"),
        ("someday", "en"),
        ("1/3/20", "en"),
        ("3/1/20", "en-GB"),
        ("January 3, 20", "en"),
        ("March 20", "en"),
        ("January 2020", "fr"),
    ],
)
def test_unrecognized_input_fails_closed(text: str, locale: str) -> None:
    """No guessing: short years and foreign month names yield no match."""
    assert normalize(text, locale) is None


def test_impossible_dates_do_not_normalize() -> None:
    assert normalize("February 30th, 2021", "en") is None


def test_unknown_locale_raises_key_error() -> None:
    with pytest.raises(KeyError):
        normalize("January 3rd, 2020", "xx")


def test_registry_is_read_only() -> None:
    """Locale tables and readers are shared between parses and must not be mutable."""
    assert {"en", "en-GB", "de", "fr", "es"} <= KNOWN_LOCALES
    assert set(PARSERS) == set(LOCALES)
    with pytest.raises(TypeError):
        PARSERS["xx"] = PARSERS["en"]  # type: ignore[index]
    table = get_locale("en-GB")
    assert table.language == "en" and table.order == "DMY"
    assert table.month_name(5) == "May"
