"""Non-throwing predicates for validating user supplied expressions."""

import math
import re

from .errors import ContractError
from .parsers import NUMBER_PATTERN, parse
from .units import UNIT_ALIAS_PATTERN

SIMPLE_RE = re.compile(
    rf"{NUMBER_PATTERN}(?: ?(?:{UNIT_ALIAS_PATTERN}))?", re.IGNORECASE
)


def is_time_expression(value) -> bool:
    """Return ``True`` if ``value`` is a single, parseable time expression.

    Compound expressions such as ``"1h 30m"`` and surrounding whitespace are
    rejected; use :func:`is_compound_time_expression` to accept them.
    """
    if not isinstance(value, str) or not SIMPLE_RE.fullmatch(value):
        return False
    return _parses(value)


def is_compound_time_expression(value) -> bool:
    """Return ``True`` if :func:`~timeexpr.parsers.parse` accepts ``value``."""
    return _parses(value)


def _parses(value) -> bool:
    try:
        return not math.isnan(parse(value))
    except ContractError:
        return False
