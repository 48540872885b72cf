"""
Human-readable distance parsing.

`parse_distance("1km100m") == 1100`: the input is a run of `<digits><unit>` segments
with no separators, where the unit is `km` or `m` (case-insensitive). Segment values
are summed into whole meters.

Known quirk: a trailing digit run without a unit is dropped, so `"1km100"` parses as
1000 rather than failing. Existing callers rely on it.
"""

from __future__ import annotations

import logging

from officeparty.core.errors import InvalidDistance

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")

UNIT_MULTIPLIERS: dict[str, int] = {"km": 1000, "m": 1}


def parse_distance(text: str) -> int:
    """Convert a compound distance expression into meters.

    Raises `InvalidDistance` when the text is shorter than two characters, when a
    unit has no digits in front of it, or when it contains anything other than
    digits, `km` and `m`.
    """
    s = text.lower()
    if len(s) < 2:
        raise InvalidDistance(text, "distance too short")

    total = 0
    pending = ""
    i = 0
    while i < len(s):
        ch = s[i]
        if ch in _DIGITS:
            pending += ch
            i += 1
            continue

        if ch == "k":
            if s[i + 1 : i + 2] != "m":
                raise InvalidDistance(text, "expected 'm' after 'k'")
            unit = "km"
        elif ch == "m":
            unit = "m"
        else:
            raise InvalidDistance(text, f"unrecognized unit {ch!r}")

        if not pending:
            raise InvalidDistance(text, f"missing magnitude before {unit!r}")
        total += int(pending) * UNIT_MULTIPLIERS[unit]
        pending = ""
        i += len(unit)

    if pending:
        logger.debug("Ignoring trailing digits without a unit in %r", text)
    return total
