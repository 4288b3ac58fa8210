# tests/test_contracts.py
"""Contract tests: immutability, the tagged item union and JSON round trips."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from chronos_md import parse
from chronos_md.core.contracts import (
    DateValue,
    FlagSet,
    ParseError,
    ParseResult,
    TimelineItem,
)


def test_contracts_are_frozen() -> None:
    value = DateValue(instant=0, precision="year", raw="1970")
    with pytest.raises(ValidationError):
        value.instant = 1  # type: ignore[misc]

    result = parse("- [2020] A")
    with pytest.raises(ValidationError):
        result.items = ()  # type: ignore[misc]


def test_result_envelope_defaults() -> None:
    result = ParseResult()
    assert result.kind == "chronos_parse.v1"
    assert result.version == "1.0.0"
    assert result.flags == FlagSet()
    assert result.ok


def test_kind_requires_dotted_suffix() -> None:
    with pytest.raises(ValidationError):
        ParseResult(kind="chronos_parse")


def test_height_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        FlagSet(height=0)


def test_item_union_discriminates_on_kind() -> None:
    adapter: TypeAdapter[TimelineItem] = TypeAdapter(TimelineItem)
    payload = {
        "kind": "marker",
        "line": 3,
        "when": {"instant": 0, "precision": "year", "raw": "1970"},
        "label": "Epoch",
    }
    marker = adapter.validate_python(payload)
    assert marker.kind == "marker"
    assert marker.label == "Epoch"

    with pytest.raises(ValidationError):
        adapter.validate_python({**payload, "kind": "comet"})


def test_json_round_trip_is_lossless() -> None:
    original = parse(
        "> DEFAULTVIEW [2019~2021]\n"
        "- [2020-02-29] Leap {G} #red | d\n"
        "@ [-450~-400] Classical {H}\n"
        "= [2021-06] Mid"
    )
    restored = ParseResult.model_validate_json(original.to_json())
    assert restored == original


def test_parse_error_str() -> None:
    e = ParseError(line=4, message="malformed date 'x'")
    assert str(e) == "line 4: error: malformed date 'x'"
    assert e.recoverable is True
