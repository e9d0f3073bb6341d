"""Shortcuts returning the value of an expression in a given unit.

Each accessor propagates :class:`~timeexpr.errors.InputContractError` and
returns ``nan`` for unparseable text, exactly like
:func:`~timeexpr.parsers.parse`.
"""

from .constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH,
    MS_PER_SECOND,
    MS_PER_WEEK,
    MS_PER_YEAR,
)
from .parsers import parse


def ms(value: str) -> float:
    return parse(value)


def seconds(value: str) -> float:
    return parse(value) / MS_PER_SECOND


def minutes(value: str) -> float:
    return parse(value) / MS_PER_MINUTE


def hours(value: str) -> float:
    return parse(value) / MS_PER_HOUR


def days(value: str) -> float:
    return parse(value) / MS_PER_DAY


def weeks(value: str) -> float:
    return parse(value) / MS_PER_WEEK


def months(value: str) -> float:
    return parse(value) / MS_PER_MONTH


def years(value: str) -> float:
    return parse(value) / MS_PER_YEAR


CONVERTERS = {
    "ms": ms,
    "seconds": seconds,
    "minutes": minutes,
    "hours": hours,
    "days": days,
    "weeks": weeks,
    "months": months,
    "years": years,
}
