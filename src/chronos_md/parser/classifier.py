"""Line classifier: assign each source line a :class:`LineKind`.

Classification is purely lexical and state-free. A line is looked at on its
own, using the ordered pattern table from :mod:`chronos_md.core.grammar`:

| Leading pattern                                   | Kind      |
|---------------------------------------------------|-----------|
| blank / whitespace only                           | blank     |
| ``#``+                                            | comment   |
| ``>`` ORDERBY / DEFAULTVIEW / NOTODAY / HEIGHT    | flag      |
| ``-`` / ``@`` / ``*`` / ``=``                     | item kind |
| anything else                                     | malformed |
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chronos_md.core.grammar import FLAG_RE, LINE_PATTERNS, LineKind


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """One source line with its kind.

    Attributes
    ----------
    number : int
        1-based line number in the document.
    kind : LineKind
        Result of classification.
    text : str
        The line without its newline.
    keyword : str | None
        Flag keyword for ``FLAG`` lines, else ``None``.
    args : str
        Text after the flag keyword (``FLAG`` lines only).
    """

    number: int
    kind: LineKind
    text: str
    keyword: str | None = None
    args: str = ""


def classify_line(text: str, number: int = 1) -> ClassifiedLine:
    """Classify a single line."""
    if not text.strip():
        return ClassifiedLine(number, LineKind.BLANK, text)

    for kind, pattern in LINE_PATTERNS:
        if not pattern.match(text):
            continue
        if kind is LineKind.FLAG:
            m = FLAG_RE.match(text)
            assert m is not None
            return ClassifiedLine(number, kind, text, m.group("keyword"), m.group("args"))
        return ClassifiedLine(number, kind, text)

    return ClassifiedLine(number, LineKind.MALFORMED, text)


def split_lines(text: str) -> list[str]:
    """Split a document on any newline convention."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def classify_document(text: str) -> Iterator[ClassifiedLine]:
    """Yield every line of `text` classified, in source order."""
    for number, line in enumerate(split_lines(text), start=1):
        yield classify_line(line, number)


__all__ = ["ClassifiedLine", "classify_document", "classify_line", "split_lines"]
