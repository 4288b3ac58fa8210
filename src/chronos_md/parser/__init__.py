"""Line-level parsing for the Chronos dialect.

Currently exposed:

- :func:`parse` : the document entry point, implemented in ``assembler.py``
- :func:`classify_line` / :func:`classify_document` : lexical line kinds
- :func:`extract_attributes` : title, group, color, links, description
- :func:`parse_flag` : ``> KEYWORD`` argument grammars
"""

from __future__ import annotations

from .assembler import parse
from .classifier import ClassifiedLine, classify_document, classify_line
from .extractor import Attributes, extract_attributes
from .flags import parse_flag

__all__ = [
    "Attributes",
    "ClassifiedLine",
    "classify_document",
    "classify_line",
    "extract_attributes",
    "parse",
    "parse_flag",
]
