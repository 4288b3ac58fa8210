"""Document-level contracts: flags, diagnostics, options and the parse result.

`ParseResult` is the single object handed to renderers. It is produced only by
the assembler and is immutable afterwards; re-parsing the same text yields an
equal result.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from chronos_md.dates.locales import KNOWN_LOCALES

from .artifact import Artifact, Frozen
from .dates import DateRange
from .items import Group, TimelineItem

OrderBy = Literal["start", "end", "color"]
Severity = Literal["error", "warning"]


class FlagSet(Frozen):
    """Document configuration collected from ``> FLAG`` lines."""

    order_by: OrderBy | None = None
    default_view: DateRange | None = None
    no_today: bool = False
    height: int | None = Field(default=None, gt=0, description="Explicit height in pixels")


class ParseError(Frozen):
    """A diagnostic tied to a source line (``line == 0`` for document-level)."""

    line: int = Field(ge=0)
    message: str
    recoverable: bool = True
    severity: Severity = "error"

    def __str__(self) -> str:
        return f"line {self.line}: {self.severity}: {self.message}"


class ParseOptions(Frozen):
    """Caller options for :func:`chronos_md.parse`.

    Parameters
    ----------
    locale:
        Identifier of the natural-language date table used for tokens such as
        ``January 3rd, 2020``.
    default_timezone_is_utc:
        Always ``True``; all dates are interpreted as UTC.
    """

    locale: str = "en"
    default_timezone_is_utc: Literal[True] = True

    @field_validator("locale")
    @classmethod
    def _known_locale(cls, v: str) -> str:
        if v not in KNOWN_LOCALES:
            raise ValueError(f"unknown locale {v!r}; expected one of {sorted(KNOWN_LOCALES)}")
        return v


class ParseResult(Artifact):
    """Structured, renderer-agnostic view of one document."""

    kind: str = Field(default="chronos_parse.v1")
    version: str = Field(default="1.0.0")

    items: tuple[TimelineItem, ...] = ()
    groups: tuple[Group, ...] = ()
    flags: FlagSet = Field(default_factory=FlagSet)
    errors: tuple[ParseError, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no error-severity diagnostics were collected."""
        return not self.failures

    @property
    def failures(self) -> tuple[ParseError, ...]:
        return tuple(e for e in self.errors if e.severity == "error")

    @property
    def warnings(self) -> tuple[ParseError, ...]:
        return tuple(e for e in self.errors if e.severity == "warning")

    def to_json(self, *, indent: int | None = 2) -> str:
        """Serialize for external renderers."""
        return self.model_dump_json(indent=indent)


__all__ = ["FlagSet", "OrderBy", "ParseError", "ParseOptions", "ParseResult", "Severity"]
