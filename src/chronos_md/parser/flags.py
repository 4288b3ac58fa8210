"""Flag/option parser for ``> KEYWORD args`` lines.

Each keyword selects its own argument grammar:

- ``ORDERBY start|end|color`` : exactly one ordering key
- ``DEFAULTVIEW [range]``     : a date range (brackets optional), reusing the
  resolver's range grammar
- ``NOTODAY``                 : no arguments; trailing text is ignored
- ``HEIGHT <int>``            : a positive pixel height (``px`` suffix allowed)

:func:`parse_flag` returns ``Ok((field, value))`` naming the
:class:`~chronos_md.core.contracts.document.FlagSet` field to set, or ``Err``
with a diagnostic. Duplicate handling is the assembler's job.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from chronos_md.core.grammar import ORDER_BY_VALUES
from chronos_md.core.result import Result, err, ok
from chronos_md.dates.locales import DEFAULT_LOCALE
from chronos_md.dates.resolver import resolve_range

FlagValue = tuple[str, Any]

_HEIGHT_RE = re.compile(r"^(\d+)(?:px)?$", re.IGNORECASE)


def _order_by(args: str, locale: str) -> Result[FlagValue, str]:
    words = args.split()
    if len(words) != 1 or words[0].lower() not in ORDER_BY_VALUES:
        return err(f"ORDERBY expects one of {', '.join(ORDER_BY_VALUES)}; got {args.strip()!r}")
    return ok(("order_by", words[0].lower()))


def _default_view(args: str, locale: str) -> Result[FlagValue, str]:
    token = args.strip()
    if token.startswith("[") and token.endswith("]"):
        token = token[1:-1]
    if not token.strip():
        return err("DEFAULTVIEW requires a date range, e.g. [2020~2024]")
    return resolve_range(token, locale=locale).map(lambda r: ("default_view", r))


def _no_today(args: str, locale: str) -> Result[FlagValue, str]:
    return ok(("no_today", True))


def _height(args: str, locale: str) -> Result[FlagValue, str]:
    m = _HEIGHT_RE.match(args.strip())
    if not m or int(m.group(1)) <= 0:
        return err(f"HEIGHT expects a positive integer; got {args.strip()!r}")
    return ok(("height", int(m.group(1))))


_FLAG_PARSERS: dict[str, Callable[[str, str], Result[FlagValue, str]]] = {
    "ORDERBY": _order_by,
    "DEFAULTVIEW": _default_view,
    "NOTODAY": _no_today,
    "HEIGHT": _height,
}


def parse_flag(keyword: str, args: str, *, locale: str = DEFAULT_LOCALE) -> Result[FlagValue, str]:
    """Parse the arguments of one flag line.

    Parameters
    ----------
    keyword:
        One of ``ORDERBY``, ``DEFAULTVIEW``, ``NOTODAY``, ``HEIGHT``.
    args:
        Everything after the keyword.
    locale:
        Locale used for natural-language dates in ``DEFAULTVIEW``.
    """
    parser = _FLAG_PARSERS.get(keyword)
    if parser is None:
        return err(f"unknown flag {keyword!r}")
    return parser(args, locale)


__all__ = ["FlagValue", "parse_flag"]
