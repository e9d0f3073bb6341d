"""Catalog of the recognized time units and their aliases."""

import math
import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH,
    MS_PER_SECOND,
    MS_PER_WEEK,
    MS_PER_YEAR,
)


@dataclass(frozen=True)
class UnitDefinition:
    short: str
    long: str
    long_plural: str
    aliases: Tuple[str, ...]
    ms: float

    def label(self, count: float, long: bool) -> str:
        """Return the unit name to print after ``count``."""
        if not long:
            return self.short
        return self.long if abs(count) == 1 else self.long_plural


# Ordered largest first; the formatter walks this sequence greedily.
UNITS: Tuple[UnitDefinition, ...] = (
    UnitDefinition("y", "year", "years", ("years", "year", "yrs", "yr", "y"), MS_PER_YEAR),
    UnitDefinition("mo", "month", "months", ("months", "month", "mo"), MS_PER_MONTH),
    UnitDefinition("w", "week", "weeks", ("weeks", "week", "w"), MS_PER_WEEK),
    UnitDefinition("d", "day", "days", ("days", "day", "d"), MS_PER_DAY),
    UnitDefinition(
        "h", "hour", "hours", ("hours", "hour", "hrs", "hr", "h"), MS_PER_HOUR
    ),
    UnitDefinition(
        "m",
        "minute",
        "minutes",
        ("minutes", "minute", "mins", "min", "m"),
        MS_PER_MINUTE,
    ),
    UnitDefinition(
        "s",
        "second",
        "seconds",
        ("seconds", "second", "secs", "sec", "s"),
        MS_PER_SECOND,
    ),
    UnitDefinition(
        "ms",
        "millisecond",
        "milliseconds",
        ("milliseconds", "millisecond", "msecs", "msec", "ms"),
        1,
    ),
)

MILLISECOND_INDEX = len(UNITS) - 1

_UNIT_MS: Dict[str, float] = {
    alias: unit.ms for unit in UNITS for alias in unit.aliases
}


def _alias_vocabulary() -> List[str]:
    aliases: List[str] = []
    for unit in UNITS:
        for alias in unit.aliases:
            if alias not in aliases:
                aliases.append(alias)
    # "months" must be tried before "mo" and "minutes" before "m".
    return sorted(aliases, key=len, reverse=True)


UNIT_ALIAS_PATTERN = "|".join(re.escape(alias) for alias in _alias_vocabulary())


def lookup(alias: str) -> float:
    """Return milliseconds per unit for ``alias``, or ``nan`` if unknown."""
    return _UNIT_MS.get(alias.lower(), math.nan)


def ordered_units() -> Tuple[UnitDefinition, ...]:
    return UNITS
