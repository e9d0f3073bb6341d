"""Exceptions raised when the codec is called with invalid arguments.

Unparseable expression text is not an error: :func:`timeexpr.parsers.parse`
returns ``math.nan`` for it. These exceptions are reserved for programmer
errors such as passing a non-string or an invalid precision.
"""


class ContractError(Exception):
    """Base class for argument contract violations."""


class InputContractError(ContractError, TypeError):
    """Raised by ``parse`` for non-string, empty or over-long input."""


class TypeContractError(ContractError, TypeError):
    """Raised by ``format`` when the value is not a finite real number."""


class RangeContractError(ContractError, ValueError):
    """Raised by ``format`` when ``precision`` is not a positive integer."""
