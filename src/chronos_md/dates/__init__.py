"""Date engine for the Chronos dialect.

- :mod:`.utc`        : padding, calendar validation and UTC instant arithmetic
- :mod:`.locales`    : registered natural-language locale tables
- :mod:`.normalizer` : locale strings (``January 3rd, 2020``) to partial ISO
- :mod:`.resolver`   : bracket tokens and ranges to resolved date values
- :mod:`.labels`     : human-readable labels for resolved dates and ranges

Import from the submodules directly; this package deliberately re-exports
nothing so the contracts can depend on :mod:`.utc` without import cycles.
"""
