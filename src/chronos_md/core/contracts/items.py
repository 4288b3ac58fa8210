"""Timeline item contracts.

Items form a closed tagged union on ``kind``:

- ``event``  : ``- [date or range] title``, an entry on a group lane; the date
  may be omitted (``- title``)
- ``period`` : ``@ [range] title``, a background span on a group lane
- ``point``  : ``* [date] title``, an instantaneous entry on a group lane
- ``marker`` : ``= [date] label``, a document-wide vertical reference line

Every item keeps the 1-based source line it came from so renderers and editors
can point diagnostics back at the document.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from .artifact import Frozen
from .dates import DateRange, DateValue


class _SourceItem(Frozen):
    line: int = Field(ge=1, description="1-based source line number")
    color: str | None = Field(default=None, description="Color tag without the '#'")
    description: str | None = Field(default=None, description="Text after the first '|'")
    links: tuple[str, ...] = Field(default=(), description="Targets of [[wiki links]]")


class _LaneItem(_SourceItem):
    title: str = ""
    group: str | None = Field(default=None, description="Name from the {group} tag")


class Event(_LaneItem):
    """An entry; a single date collapses to ``start == end``, no date is ``None``."""

    kind: Literal["event"] = "event"
    when: DateRange | None = None


class Period(_LaneItem):
    """A spanning interval drawn behind the lane's events."""

    kind: Literal["period"] = "period"
    when: DateRange


class Point(_LaneItem):
    """An instantaneous entry tied to a lane."""

    kind: Literal["point"] = "point"
    when: DateValue


class Marker(_SourceItem):
    """A document-wide reference line with an optional label."""

    kind: Literal["marker"] = "marker"
    when: DateValue
    label: str | None = None


TimelineItem = Annotated[Event | Period | Point | Marker, Field(discriminator="kind")]


class Group(Frozen):
    """A lane name, ordered by first appearance in the document."""

    name: str
    order: int = Field(ge=0)


__all__ = ["Event", "Group", "Marker", "Period", "Point", "TimelineItem"]
