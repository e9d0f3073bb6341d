"""Utilities for converting time expressions to and from timedeltas."""

import math
from datetime import timedelta

from .errors import ContractError
from .formatting import format
from .parsers import parse


def parse_duration(expr: str) -> timedelta:
    """Convert a time expression into a :class:`~datetime.timedelta`.

    Any expression accepted by :func:`~timeexpr.parsers.parse` works,
    including compound ones such as ``"1h 30m"``. A bare number is read as
    milliseconds. Surrounding whitespace is ignored.

    Parameters
    ----------
    expr:
        Duration expression to parse.

    Returns
    -------
    datetime.timedelta
        A timedelta representing the supplied duration.

    Raises
    ------
    ValueError
        If the expression is empty, longer than 200 characters or is not a
        valid time expression.
    """

    expr = expr.strip()
    if not expr:
        raise ValueError("Duration expression cannot be empty")
    try:
        milliseconds = parse(expr)
    except ContractError as exc:
        raise ValueError(f"Invalid duration: {exc}") from exc
    if math.isnan(milliseconds):
        raise ValueError(f"Invalid duration: {expr}")
    try:
        return timedelta(milliseconds=milliseconds)
    except OverflowError as exc:
        raise ValueError(f"Duration out of range: {expr}") from exc


def format_timedelta(delta: timedelta, long: bool = False, precision: int = 1) -> str:
    """Format ``delta`` as a time expression, see :func:`~timeexpr.formatting.format`."""
    return format(delta.total_seconds() * 1000, long=long, precision=precision)
