"""Tests for human-readable date and range labels."""

from __future__ import annotations

import pytest

from chronos_md.dates.labels import format_date_label, smart_date_range
from chronos_md.dates.resolver import resolve_date, resolve_range


@pytest.mark.parametrize(
    ("token", "locale", "label"),
    [
        ("2020", "en", "2020"),
        ("2020-05", "en", "May 2020"),
        ("2020-05-03", "en", "May 3, 2020"),
        ("2020-05-03", "en-GB", "3 May 2020"),
        ("2020-05-03", "de", "3. Mai 2020"),
        ("2020-05-03", "es", "3 de mayo de 2020"),
        ("2020-05", "es", "mayo de 2020"),
        ("2020-05-03T14:30", "en", "May 3, 2020 14:30"),
        ("2020-05-03T14:30:15", "en", "May 3, 2020 14:30:15"),
        ("-449", "en", "450 BCE"),
        ("0", "en", "1 BCE"),
        ("-449", "fr", "450 av. J.-C."),
    ],
)
def test_labels_follow_precision_and_locale(token: str, locale: str, label: str) -> None:
    assert format_date_label(resolve_date(token).unwrap(), locale) == label


def test_range_labels() -> None:
    assert smart_date_range(resolve_range("2020~2021").unwrap()) == "2020 – 2021"
    assert smart_date_range(resolve_range("2020").unwrap()) == "2020"
    assert smart_date_range(resolve_range("2020-03~").unwrap()) == "March 2020 – …"


def test_end_bias_does_not_leak_into_label() -> None:
    """The end of [2020~2020-02] is Feb 29 23:59:59 but reads 'February 2020'."""
    when = resolve_range("2020~2020-02").unwrap()
    assert smart_date_range(when) == "2020 – February 2020"


def test_single_value_label() -> None:
    assert smart_date_range(resolve_date("1999-12").unwrap()) == "December 1999"
