"""chronos-md: parse the Chronos timeline markdown dialect into structured data.

The public entry point is :func:`parse`, which turns a document into an
immutable :class:`ParseResult` that renderers consume.
"""

from __future__ import annotations

from chronos_md.core.contracts.document import ParseError, ParseOptions, ParseResult
from chronos_md.parser.assembler import parse

__all__ = ["__version__", "parse", "ParseError", "ParseOptions", "ParseResult"]
__version__ = "0.3.0"
