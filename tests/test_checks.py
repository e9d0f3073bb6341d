import pytest

from timeexpr.checks import is_compound_time_expression, is_time_expression

SIMPLE = ["1h", "500ms", "2.5d", "100", "1 second", ".5ms", "-3.5 HOURS", "1e3ms"]
COMPOUND = ["1h 30m", "1 day, 6 hours", "1h, 30m, 15s", "1h30m"]
INVALID = ["hello", "abc123", "☃", "ms", "foo", "", "a" * 201]
OVERFLOW = ["1e309ms", "-1e309ms", "1e309s", "1e400y", "1e308y"]
NON_STRINGS = [None, 123, [], {}, 1.5]


@pytest.mark.parametrize("expr", SIMPLE)
def test_simple_expressions_pass_both_predicates(expr):
    assert is_time_expression(expr)
    assert is_compound_time_expression(expr)


@pytest.mark.parametrize("expr", COMPOUND)
def test_compound_expressions_only_pass_compound_predicate(expr):
    assert not is_time_expression(expr)
    assert is_compound_time_expression(expr)


@pytest.mark.parametrize("expr", [" 1h", "1h ", "1  hour", "1\thour"])
def test_single_predicate_rejects_loose_whitespace(expr):
    assert not is_time_expression(expr)
    assert is_compound_time_expression(expr)


@pytest.mark.parametrize("expr", [",1h", "1h,", "1h,,30m", "1h, ,30m"])
def test_malformed_separators(expr):
    assert not is_compound_time_expression(expr)


@pytest.mark.parametrize("value", INVALID + OVERFLOW + NON_STRINGS)
def test_invalid_values_are_rejected_without_raising(value):
    assert not is_time_expression(value)
    assert not is_compound_time_expression(value)
