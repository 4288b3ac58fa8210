"""Date grammar and resolver for bracketed date tokens.

A token is the text inside ``[...]`` on an item or ``DEFAULTVIEW`` line. It is
either a single date or two dates joined by the first unescaped ``~``::

    [2020]                 single date, year precision
    [2020-05-03T14:30]     single date, time precision
    [-450]                 astronomical year -450
    [2020~2021]            range, inclusive reading of both years
    [2020-03~]             open-ended range
    [January 3rd, 2020]    natural-language date (see normalizer)

Resolution bias
---------------
Missing components of a *start* date default to their minimum and those of an
*end* date to their maximum, so ``[2020~2021]`` spans
2020-01-01T00:00:00Z .. 2021-12-31T23:59:59Z. A single date uses the start
bias for both ends.

Every function returns a :class:`~chronos_md.core.result.Result`; the ``Err``
payload is the diagnostic message recorded by the assembler. Nothing here
raises for bad user input.
"""

from __future__ import annotations

from chronos_md.core.contracts.dates import DateRange, DateValue
from chronos_md.core.grammar import DATE_TOKEN_RE, ISO_LIKE_RE, RANGE_SEPARATOR_RE
from chronos_md.core.result import Result, err, ok

from .locales import DEFAULT_LOCALE
from .normalizer import normalize
from .utc import Bias, InvalidDateError, precision_of, to_instant


def split_range(token: str) -> tuple[str, str] | None:
    """Split `token` on its first unescaped ``~``.

    Returns ``None`` when there is no separator, otherwise the stripped
    ``(left, right)`` pair; ``right == ""`` marks an open-ended range.
    """
    m = RANGE_SEPARATOR_RE.search(token)
    if not m:
        return None
    left = token[: m.start()].replace("\\~", "~").strip()
    right = token[m.end() :].replace("\\~", "~").strip()
    return left, right


def resolve_date(
    token: str, bias: Bias = "start", *, locale: str = DEFAULT_LOCALE
) -> Result[DateValue, str]:
    """Resolve one date (no ``~``) to a :class:`DateValue`.

    Text made only of digits and ISO punctuation is held to the ISO grammar;
    anything else is handed to the locale normalizer.
    """
    text = token.strip()
    if not text:
        return err("empty date")

    candidate: str | None = None
    if DATE_TOKEN_RE.match(text):
        candidate = text
    elif not ISO_LIKE_RE.match(text):
        candidate = normalize(text, locale)
    if candidate is None:
        return err(f"malformed date {text!r}")
    try:
        instant = to_instant(candidate, bias)
    except InvalidDateError as exc:
        return err(f"invalid date {text!r}: {exc}")
    return ok(DateValue(instant=instant, precision=precision_of(candidate), raw=text))


def resolve_range(token: str, *, locale: str = DEFAULT_LOCALE) -> Result[DateRange, str]:
    """Resolve a date or ``start~end`` token to a :class:`DateRange`.

    A single date collapses to ``start == end``. A reversed range is returned
    as written; flagging it is left to the caller.
    """
    parts = split_range(token)
    if parts is None:
        return resolve_date(token, "start", locale=locale).map(
            lambda value: DateRange(start=value, end=value)
        )

    left, right = parts
    if not left:
        return err(f"range {token.strip()!r} has no start date")
    start = resolve_date(left, "start", locale=locale)
    if not right:
        return start.map(lambda value: DateRange(start=value, end=None))
    return start.flat_map(
        lambda s: resolve_date(right, "end", locale=locale).map(
            lambda e: DateRange(start=s, end=e)
        )
    )


def resolve_single(token: str, *, locale: str = DEFAULT_LOCALE) -> Result[DateValue, str]:
    """Resolve a token that must name exactly one date (points and markers)."""
    if split_range(token) is not None:
        return err(f"expected a single date, got range {token.strip()!r}")
    return resolve_date(token, "start", locale=locale)


__all__ = ["resolve_date", "resolve_range", "resolve_single", "split_range"]
