"""Unit tests for the lightweight Result utilities."""

from __future__ import annotations

import pytest

from chronos_md.core.result import Err, Ok, Result, err, ok


def test_ok_map_and_flat_map() -> None:
    """`Ok` should map/flat_map and keep values typed."""
    r: Result[int, str] = ok(10)
    r2 = r.map(lambda x: x + 5).flat_map(lambda x: ok(x * 2))
    assert r2.is_ok() and r2.unwrap() == 30


def test_err_short_circuits() -> None:
    """`Err` should propagate through map/flat_map untouched."""
    r: Result[int, str] = err("boom")
    assert r.is_err()
    out = r.map(lambda x: x + 1).flat_map(lambda x: ok(x * 2))
    assert isinstance(out, Err) and out.unwrap_err() == "boom"


def test_unwrap_raises_on_the_wrong_variant() -> None:
    with pytest.raises(RuntimeError):
        err("e").unwrap()
    with pytest.raises(RuntimeError):
        ok(1).unwrap_err()


def test_get_or_falls_back_only_on_err() -> None:
    assert ok(3).get_or(0) == 3
    assert err("nope").get_or(0) == 0


def test_variants_compare_by_value() -> None:
    assert ok(1) == Ok(1)
    assert err("x") == Err("x")
    assert ok(1) != err(1)
