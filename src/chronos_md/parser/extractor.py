"""Rest-of-line semantic extractor.

Given the text that follows an item's ``[date]`` field, pull out the semantic
attributes in a fixed order, each step working on what the previous one left:

1. description: everything after the first unescaped ``|``
2. wiki links: ``[[target]]`` spans; the target text stays in the title
3. group: the first ``{name}``; a second one stays literal
4. color: the first ``#word``; a second one stays literal
5. title: whatever remains, whitespace collapsed

Peeling the description first means ``{``, ``#`` and ``[[`` inside it are
never read as structure.

Example
-------
>>> attrs = extract_attributes(" Met [[Ada]] {People} #red | at the {lab}")
>>> attrs.title, attrs.group, attrs.color, attrs.links, attrs.description
('Met Ada', 'People', 'red', ('Ada',), 'at the {lab}')
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chronos_md.core.grammar import COLOR_RE, DESCRIPTION_SEPARATOR_RE, GROUP_RE, LINK_RE

_WS = re.compile(r"\s+")
_PLACEHOLDER = "\x00{}\x00"
_PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")


@dataclass(frozen=True, slots=True)
class Attributes:
    """Semantic attributes of one item line."""

    title: str
    group: str | None = None
    color: str | None = None
    description: str | None = None
    links: tuple[str, ...] = ()


def _unescape(text: str) -> str:
    return text.replace("\\|", "|")


def _take_first(pattern: re.Pattern[str], text: str) -> tuple[str | None, str]:
    # blank tags such as "{ }" stay literal and do not hide a later tag
    for m in pattern.finditer(text):
        if m.group(1).strip():
            return m.group(1).strip(), f"{text[: m.start()]} {text[m.end() :]}"
    return None, text


def extract_attributes(rest: str, *, with_group: bool = True) -> Attributes:
    """Split `rest` into title, group, color, description and links.

    Parameters
    ----------
    rest:
        Text after the closing ``]`` of the date field.
    with_group:
        When False (markers), ``{...}`` is left in the title untouched.
    """
    head, description = rest, None
    m = DESCRIPTION_SEPARATOR_RE.search(rest)
    if m:
        head = rest[: m.start()]
        description = _unescape(rest[m.end() :]).strip() or None

    # Links are swapped for placeholders so group/color never match inside them.
    links: list[str] = []

    def _stash(match: re.Match[str]) -> str:
        links.append(match.group(1).strip())
        return _PLACEHOLDER.format(len(links) - 1)

    head = LINK_RE.sub(_stash, head)

    group = None
    if with_group:
        group, head = _take_first(GROUP_RE, head)
    color, head = _take_first(COLOR_RE, head)

    head = _PLACEHOLDER_RE.sub(lambda p: links[int(p.group(1))], head)
    title = _WS.sub(" ", _unescape(head)).strip()
    return Attributes(
        title=title,
        group=group,
        color=color,
        description=description,
        links=tuple(links),
    )


__all__ = ["Attributes", "extract_attributes"]
