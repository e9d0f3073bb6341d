"""Rendering of millisecond values as time expressions."""

import logging
import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import List

from .errors import RangeContractError, TypeContractError
from .units import MILLISECOND_INDEX, UNITS

logger = logging.getLogger(__name__)


@dataclass
class Segment:
    unit_index: int
    count: float


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, ties upward."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def _is_positive_integer(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, Integral):
        return value >= 1
    return math.isfinite(value) and value == int(value) and value >= 1


def _render_count(count: float) -> str:
    count = float(count)
    if count.is_integer() and abs(count) < 1e21:
        return str(int(count))
    return repr(count)


def _render_segment(segment: Segment, long: bool) -> str:
    unit = UNITS[segment.unit_index]
    label = unit.label(segment.count, long)
    separator = " " if long else ""
    return f"{_render_count(segment.count)}{separator}{label}"


def _zero(long: bool) -> str:
    return _render_segment(Segment(MILLISECOND_INDEX, 0), long)


def format(milliseconds: float, long: bool = False, precision: int = 1) -> str:
    """Format a millisecond value as a human-readable time expression.

    The output can be fed back into :func:`timeexpr.parsers.parse`.

    Parameters
    ----------
    milliseconds:
        Finite value to format.
    long:
        Use unit names (``"1 hour"``) instead of symbols (``"1h"``).
    precision:
        Maximum number of unit segments to emit. The last segment is rounded
        and any overflow is carried into larger units.

    Returns
    -------
    str
        The formatted expression, e.g. ``"1h 30m 32s"``.

    Raises
    ------
    TypeContractError
        If ``milliseconds`` is not a finite real number.
    RangeContractError
        If ``precision`` is not a finite positive integer.
    """

    if isinstance(milliseconds, bool) or not isinstance(milliseconds, Real):
        raise TypeContractError(
            "Value provided to format() must be a finite number. "
            f"Received: {milliseconds!r}"
        )
    try:
        value = float(milliseconds)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        raise TypeContractError(
            "Value provided to format() must be a finite number. "
            f"Received: {milliseconds!r}"
        )

    if not _is_positive_integer(precision):
        raise RangeContractError(
            'Option "precision" must be a finite positive integer. '
            f"Received: {precision!r}"
        )

    if value == 0:
        return _zero(long)

    magnitude = abs(value)
    if precision == 1:
        return _format_single(value, magnitude, long)
    return _format_segments(magnitude, value < 0, long, int(precision))


def _format_single(value: float, magnitude: float, long: bool) -> str:
    index = next(
        (i for i, unit in enumerate(UNITS) if magnitude >= unit.ms),
        MILLISECOND_INDEX,
    )
    count = round_half_up(magnitude / UNITS[index].ms)
    if count and value < 0:
        count = -count
    return _render_segment(Segment(index, count), long)


def _decompose(magnitude: float, precision: int) -> List[Segment]:
    remaining = magnitude
    segments: List[Segment] = []

    for index, unit in enumerate(UNITS):
        if len(segments) == precision - 1:
            # Candidate final segment: round instead of flooring.
            rounded = round_half_up(remaining / unit.ms)
            if rounded > 0:
                segments.append(Segment(index, rounded))
                break
            continue

        whole = math.floor(remaining / unit.ms)
        if whole > 0:
            segments.append(Segment(index, whole))
            remaining -= whole * unit.ms

    if not segments:
        segments.append(Segment(MILLISECOND_INDEX, round_half_up(magnitude)))
    return segments


def _carry_over(segments: List[Segment]) -> None:
    i = len(segments) - 1
    while i >= 0:
        segment = segments[i]
        larger_index = segment.unit_index - 1
        if larger_index < 0:
            i -= 1
            continue

        ratio = UNITS[larger_index].ms / UNITS[segment.unit_index].ms
        if segment.count >= ratio:
            carry = math.floor(segment.count / ratio)
            segment.count -= carry * ratio
            if i > 0 and segments[i - 1].unit_index == larger_index:
                segments[i - 1].count += carry
            else:
                segments.insert(i, Segment(larger_index, carry))
                # Revisit the inserted segment, it may overflow as well.
                continue
        i -= 1


def _format_segments(
    magnitude: float, negative: bool, long: bool, precision: int
) -> str:
    segments = _decompose(magnitude, precision)
    _carry_over(segments)

    while len(segments) > 1 and segments[-1].count == 0:
        segments.pop()
    if all(segment.count == 0 for segment in segments):
        logger.debug("%r rounds to zero at precision %d", magnitude, precision)
        return _zero(long)

    result = " ".join(_render_segment(segment, long) for segment in segments)
    return f"-{result}" if negative else result
