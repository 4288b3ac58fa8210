"""Date contracts: resolved date values and ranges.

A `DateValue` always holds a fully resolved instant, even when the source text
only named a year. The `precision` records how much the author actually wrote,
so renderers can label ``[2020]`` as "2020" rather than "Jan 1, 2020 00:00".

Instants are integer milliseconds since 1970-01-01T00:00:00Z on the proleptic
Gregorian calendar with astronomical year numbering (year 0 exists), which
lets the model hold years -9999..9999.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from pydantic import Field

from chronos_md.dates.utc import Bias, Precision, format_instant

from .artifact import Frozen

#: Ordering of precisions from coarsest to finest.
PRECISION_ORDER: tuple[Precision, ...] = ("year", "month", "day", "time")

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class DateValue(Frozen):
    """A single resolved date."""

    instant: int = Field(description="UTC milliseconds since the Unix epoch")
    precision: Precision = Field(description="Deepest component present in the source")
    raw: str = Field(description="Original token text, untrimmed of inner spaces")

    @property
    def iso(self) -> str:
        """Canonical partial-ISO text at this value's precision."""
        return format_instant(self.instant, self.precision)

    def to_datetime(self) -> datetime:
        """Return an aware UTC `datetime`.

        Raises
        ------
        ValueError
            If the instant falls outside `datetime`'s year range (1..9999).
        """
        try:
            out = _EPOCH + timedelta(milliseconds=self.instant)
        except OverflowError as exc:
            raise ValueError(f"{self.iso} is outside the datetime range") from exc
        return out


class DateRange(Frozen):
    """A start date and an optional end; ``end is None`` means open-ended."""

    start: DateValue
    end: DateValue | None = None

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def is_reversed(self) -> bool:
        """True when the end resolves strictly before the start."""
        return self.end is not None and self.end.instant < self.start.instant


__all__ = ["Bias", "DateRange", "DateValue", "PRECISION_ORDER", "Precision"]
