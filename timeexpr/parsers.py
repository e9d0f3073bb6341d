"""Parsing of compound duration expressions into milliseconds."""

import logging
import math
import re

from .errors import InputContractError
from .units import UNIT_ALIAS_PATTERN, lookup

logger = logging.getLogger(__name__)

MAX_LENGTH = 200

NUMBER_PATTERN = r"[+-]?[0-9]*\.?[0-9]+(?:e[+-]?[0-9]+)?"

PART_RE = re.compile(
    rf"({NUMBER_PATTERN})\s*({UNIT_ALIAS_PATTERN})?", re.IGNORECASE
)
WHITESPACE_RE = re.compile(r"\s*")
COMMA_SEPARATOR_RE = re.compile(r"\s*,\s*")


def _is_valid_gap(gap: str, first_part: bool) -> bool:
    if WHITESPACE_RE.fullmatch(gap):
        return True
    if first_part:
        return False
    return COMMA_SEPARATOR_RE.fullmatch(gap) is not None


def parse(value: str) -> float:
    """Parse a time expression into milliseconds.

    Both simple (``"1h"``) and compound (``"1h 30m"``) expressions are
    accepted. Parts may be separated by whitespace, a single comma or nothing
    at all, and are summed; duplicate units are additive. Numbers may use
    exponent notation (``"1e3ms"``). A bare number is read as milliseconds,
    but only when it is the whole expression.

    A leading sign on a compound expression applies to every part unless a
    later part carries its own explicit sign: ``"-1h 30m"`` is minus ninety
    minutes while ``"-1h +30m"`` is minus thirty.

    Parameters
    ----------
    value:
        Expression to parse, at most 200 characters long.

    Returns
    -------
    float
        The total in milliseconds, or ``math.nan`` if the text is not a valid
        time expression.

    Raises
    ------
    InputContractError
        If ``value`` is not a string, is empty or exceeds 200 characters.
    """

    if not isinstance(value, str) or not 0 < len(value) <= MAX_LENGTH:
        raise InputContractError(
            "Value provided to parse() must be a string with length between 1 "
            f"and {MAX_LENGTH}. Received: {value!r}"
        )

    total = 0.0
    absolute_total = 0.0
    prev_end = 0
    match_count = 0
    has_bare_part = False
    first_part_signed = False
    later_part_signed = False

    for match in PART_RE.finditer(value):
        gap = value[prev_end : match.start()]
        if not _is_valid_gap(gap, match_count == 0):
            logger.debug("rejecting %r: invalid separator %r", value, gap)
            return math.nan

        number, unit = match.group(1), match.group(2)
        if not unit:
            has_bare_part = True

        signed = number[0] in "+-"
        if match_count == 0:
            first_part_signed = signed
        elif signed:
            later_part_signed = True

        amount = float(number)
        multiplier = lookup(unit) if unit else 1
        if not math.isfinite(amount) or math.isnan(multiplier):
            logger.debug("rejecting %r: bad segment %r", value, match.group(0))
            return math.nan

        part = amount * multiplier
        total += part
        absolute_total += abs(part)
        if not (
            math.isfinite(part)
            and math.isfinite(total)
            and math.isfinite(absolute_total)
        ):
            logger.debug("rejecting %r: value overflows", value)
            return math.nan

        prev_end = match.end()
        match_count += 1

    if match_count == 0:
        logger.debug("rejecting %r: no time segments", value)
        return math.nan

    # In a compound expression every part needs a unit.
    if match_count > 1 and has_bare_part:
        logger.debug("rejecting %r: bare number in compound expression", value)
        return math.nan

    if not WHITESPACE_RE.fullmatch(value[prev_end:]):
        logger.debug("rejecting %r: trailing text %r", value, value[prev_end:])
        return math.nan

    if match_count > 1 and first_part_signed and not later_part_signed:
        return -absolute_total if value.lstrip()[0] == "-" else absolute_total

    return total
