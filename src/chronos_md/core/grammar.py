"""The Chronos markdown grammar, defined once as data.

Every consumer that needs to recognise the dialect (the line classifier, the
rest-of-line extractor, the flag parser and the CLI's highlight view) reads the
patterns from this module instead of re-encoding them.

Line shapes
-----------
::

    # comment
    > ORDERBY start | > DEFAULTVIEW [2020~2024] | > NOTODAY | > HEIGHT 300
    - [date or range] title {group} #color [[link]] | description
    @ [range] title {group} #color | description
    * [date] title {group} #color | description
    = [date] label #color | description

Date token
----------
``-?YYYY(-MM(-DD(THH(:MM(:SS)?)?)?)?)?`` where the year has 1..4 digits and a
leading ``-`` denotes a negative (astronomical) year. Two tokens joined by
``~`` form a range; an empty right-hand side leaves the range open.
"""

from __future__ import annotations

import re
from enum import Enum


class LineKind(str, Enum):
    """Closed set of line kinds the classifier can produce."""

    BLANK = "blank"
    COMMENT = "comment"
    FLAG = "flag"
    EVENT = "event"
    PERIOD = "period"
    POINT = "point"
    MARKER = "marker"
    MALFORMED = "malformed"


#: Flag keywords accepted after ``>``.
FLAG_KEYWORDS: tuple[str, ...] = ("ORDERBY", "DEFAULTVIEW", "NOTODAY", "HEIGHT")

#: Leading sigil for each item kind.
ITEM_SIGILS: dict[LineKind, str] = {
    LineKind.EVENT: "-",
    LineKind.PERIOD: "@",
    LineKind.POINT: "*",
    LineKind.MARKER: "=",
}

COMMENT_RE = re.compile(r"^\s*#+")
FLAG_RE = re.compile(r"^\s*>\s*(?P<keyword>" + "|".join(FLAG_KEYWORDS) + r")\b(?P<args>.*)$")

#: Ordered (kind, pattern) table; the first match wins. Comments are checked
#: before items so that ``#`` never starts an item line.
LINE_PATTERNS: tuple[tuple[LineKind, re.Pattern[str]], ...] = (
    (LineKind.COMMENT, COMMENT_RE),
    (LineKind.FLAG, FLAG_RE),
    *((kind, re.compile(r"^\s*" + re.escape(sigil))) for kind, sigil in ITEM_SIGILS.items()),
)

#: ``<sigil> [token] rest``; the token is everything up to the first ``]``.
ITEM_RE = re.compile(r"^\s*(?P<sigil>[-@*=])\s*\[(?P<token>[^\]]*)\](?P<rest>.*)$")

DATE_TOKEN_RE = re.compile(
    r"^(?P<year>-?\d{1,4})"
    r"(?:-(?P<month>\d{2})"
    r"(?:-(?P<day>\d{2})"
    r"(?:T(?P<hour>\d{2})"
    r"(?::(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2}))?)?)?)?)?$"
)

#: Digits with ISO punctuation only. Such tokens never go to the locale reader.
ISO_LIKE_RE = re.compile(r"^-?\d[\d\-T:]*$")

#: First ``~`` not preceded by a backslash.
RANGE_SEPARATOR_RE = re.compile(r"(?<!\\)~")
#: First ``|`` not preceded by a backslash.
DESCRIPTION_SEPARATOR_RE = re.compile(r"(?<!\\)\|")

LINK_RE = re.compile(r"\[\[([^\]]+)\]\]")
GROUP_RE = re.compile(r"\{([^{}]+)\}")
COLOR_RE = re.compile(r"(?<![\w#])#(\w[\w-]*)")

ORDER_BY_VALUES: tuple[str, ...] = ("start", "end", "color")


__all__ = [
    "COLOR_RE",
    "COMMENT_RE",
    "DATE_TOKEN_RE",
    "DESCRIPTION_SEPARATOR_RE",
    "FLAG_KEYWORDS",
    "FLAG_RE",
    "GROUP_RE",
    "ISO_LIKE_RE",
    "ITEM_RE",
    "ITEM_SIGILS",
    "LINE_PATTERNS",
    "LINK_RE",
    "LineKind",
    "ORDER_BY_VALUES",
    "RANGE_SEPARATOR_RE",
]
