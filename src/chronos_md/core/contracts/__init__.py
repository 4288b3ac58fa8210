from __future__ import annotations

from .artifact import Artifact, Frozen, Semver
from .dates import PRECISION_ORDER, Bias, DateRange, DateValue, Precision
from .document import FlagSet, OrderBy, ParseError, ParseOptions, ParseResult, Severity
from .items import Event, Group, Marker, Period, Point, TimelineItem

__all__ = [
    "Artifact",
    "Bias",
    "DateRange",
    "DateValue",
    "Event",
    "FlagSet",
    "Frozen",
    "Group",
    "Marker",
    "OrderBy",
    "ParseError",
    "ParseOptions",
    "ParseResult",
    "Period",
    "Point",
    "PRECISION_ORDER",
    "Precision",
    "Semver",
    "Severity",
    "TimelineItem",
]
