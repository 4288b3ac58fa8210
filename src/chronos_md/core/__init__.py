"""Core package initializer for chronos-md.

Holds the configuration layer, the result container, the grammar table and
the data contracts shared by the date engine and the line parser:
    from chronos_md.core.settings import settings, load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
