"""Document assembler: the ``parse()`` entry point.

Walks the classified lines in order and folds them into one immutable
:class:`ParseResult`:

- items, in source order
- groups, in first-seen order
- the final flag values (last valid occurrence wins)
- every diagnostic, in the order it was found

Recoverable problems never raise. A malformed date drops its item, a malformed
flag leaves its field untouched, and both are recorded as errors. Reversed
ranges and overridden flags are kept and recorded as warnings. An unexpected
exception while handling a line is logged and recorded as a single
non-recoverable error for that line; the rest of the document is still parsed.

The function holds no state between calls, so it is safe to call repeatedly
and from several threads on independent documents.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from chronos_md.core.contracts.dates import DateRange
from chronos_md.core.contracts.document import FlagSet, ParseError, ParseOptions, ParseResult
from chronos_md.core.contracts.items import Event, Group, Marker, Period, Point
from chronos_md.core.grammar import ITEM_RE, LineKind
from chronos_md.core.settings import get_logger
from chronos_md.dates.resolver import resolve_range, resolve_single

from .classifier import ClassifiedLine, classify_document
from .extractor import extract_attributes
from .flags import parse_flag

logger = get_logger("chronos_md.parser")


class _DocumentBuilder:
    """Accumulates per-line results; the sole writer of one parse."""

    def __init__(self, locale: str) -> None:
        self._locale = locale
        self._items: list[Any] = []
        self._groups: dict[str, Group] = {}
        self._flags: dict[str, Any] = {}
        self._flag_lines: dict[str, int] = {}
        self.errors: list[ParseError] = []
        self._handlers: dict[LineKind, Callable[[ClassifiedLine], None]] = {
            LineKind.BLANK: self._skip,
            LineKind.COMMENT: self._skip,
            LineKind.FLAG: self._flag,
            LineKind.EVENT: self._event,
            LineKind.PERIOD: self._period,
            LineKind.POINT: self._point,
            LineKind.MARKER: self._marker,
            LineKind.MALFORMED: self._malformed,
        }

    # ----- Diagnostics -------------------------------------------------------
    def error(self, line: int, message: str, *, recoverable: bool = True) -> None:
        self.errors.append(ParseError(line=line, message=message, recoverable=recoverable))

    def warn(self, line: int, message: str) -> None:
        self.errors.append(ParseError(line=line, message=message, severity="warning"))

    # ----- Dispatch ----------------------------------------------------------
    def feed(self, line: ClassifiedLine) -> None:
        self._handlers[line.kind](line)

    def _skip(self, line: ClassifiedLine) -> None:
        return None

    def _malformed(self, line: ClassifiedLine) -> None:
        text = line.text.strip()
        if text.startswith(">"):
            self.error(line.number, f"unknown flag line {text!r}")
        else:
            self.error(line.number, f"unrecognized line {text!r}")

    def _flag(self, line: ClassifiedLine) -> None:
        assert line.keyword is not None
        outcome = parse_flag(line.keyword, line.args, locale=self._locale)
        if outcome.is_err():
            self.error(line.number, outcome.unwrap_err())
            return

        field, value = outcome.unwrap()
        previous = self._flag_lines.get(line.keyword)
        if previous is not None:
            self.warn(previous, f"{line.keyword} is overridden by line {line.number}")
        self._flag_lines[line.keyword] = line.number
        self._flags[field] = value
        if isinstance(value, DateRange) and value.is_reversed:
            self.warn(line.number, "DEFAULTVIEW range ends before it starts")

    # ----- Items -------------------------------------------------------------
    def _split_item(self, line: ClassifiedLine) -> tuple[str, str] | None:
        m = ITEM_RE.match(line.text)
        if not m:
            self.error(line.number, f"{line.kind.value} line is missing a [date] field")
            return None
        return m.group("token"), m.group("rest")

    def _range_item(self, line: ClassifiedLine, model: type[Event] | type[Period]) -> None:
        parts = self._split_item(line)
        if parts is None:
            return
        token, rest = parts
        resolved = resolve_range(token, locale=self._locale)
        if resolved.is_err():
            self.error(line.number, resolved.unwrap_err())
            return
        when = resolved.unwrap()
        if when.is_reversed:
            self.warn(line.number, f"range [{token.strip()}] ends before it starts")
        self._lane_item(line, model, when, rest)

    def _lane_item(
        self,
        line: ClassifiedLine,
        model: type[Event] | type[Period] | type[Point],
        when: Any,
        rest: str,
    ) -> None:
        attrs = extract_attributes(rest)
        self._register_group(attrs.group)
        self._items.append(
            model(
                line=line.number,
                when=when,
                title=attrs.title,
                group=attrs.group,
                color=attrs.color,
                description=attrs.description,
                links=attrs.links,
            )
        )

    def _event(self, line: ClassifiedLine) -> None:
        body = line.text.lstrip()[1:]
        opening = body.lstrip()
        if not opening:
            self.error(line.number, "event line has no date and no title")
            return
        if opening.startswith("[") and not opening.startswith("[["):
            self._range_item(line, Event)
            return
        # undated event: "- title"
        self._lane_item(line, Event, None, body)

    def _period(self, line: ClassifiedLine) -> None:
        self._range_item(line, Period)

    def _point(self, line: ClassifiedLine) -> None:
        parts = self._split_item(line)
        if parts is None:
            return
        token, rest = parts
        resolved = resolve_single(token, locale=self._locale)
        if resolved.is_err():
            self.error(line.number, resolved.unwrap_err())
            return
        self._lane_item(line, Point, resolved.unwrap(), rest)

    def _marker(self, line: ClassifiedLine) -> None:
        parts = self._split_item(line)
        if parts is None:
            return
        token, rest = parts
        resolved = resolve_single(token, locale=self._locale)
        if resolved.is_err():
            self.error(line.number, resolved.unwrap_err())
            return
        attrs = extract_attributes(rest, with_group=False)
        self._items.append(
            Marker(
                line=line.number,
                when=resolved.unwrap(),
                label=attrs.title or None,
                color=attrs.color,
                description=attrs.description,
                links=attrs.links,
            )
        )

    def _register_group(self, name: str | None) -> None:
        if name is not None and name not in self._groups:
            self._groups[name] = Group(name=name, order=len(self._groups))

    # ----- Output ------------------------------------------------------------
    def build(self) -> ParseResult:
        return ParseResult(
            items=tuple(self._items),
            groups=tuple(self._groups.values()),
            flags=FlagSet(**self._flags),
            errors=tuple(self.errors),
        )


def parse(text: str, options: ParseOptions | None = None) -> ParseResult:
    """Parse a Chronos markdown document.

    Parameters
    ----------
    text:
        Full document content, newline-delimited.
    options:
        Locale selection; defaults to ``ParseOptions()`` (English).

    Returns
    -------
    ParseResult
        Items, groups, flags and diagnostics. Never raises for document
        content.
    """
    opts = options or ParseOptions()
    builder = _DocumentBuilder(opts.locale)

    for line in classify_document(text):
        try:
            builder.feed(line)
        except Exception as exc:
            logger.exception("Internal error while parsing line %d", line.number)
            builder.error(line.number, f"internal error: {exc}", recoverable=False)

    try:
        result = builder.build()
    except ValidationError as exc:
        logger.exception("Parse result failed validation")
        result = ParseResult(
            errors=(
                *builder.errors,
                ParseError(line=0, message=f"internal error: {exc}", recoverable=False),
            )
        )

    logger.debug(
        "Parsed %d items, %d groups, %d diagnostics",
        len(result.items),
        len(result.groups),
        len(result.errors),
    )
    return result


__all__ = ["parse"]
