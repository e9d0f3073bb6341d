import math

import pytest

from timeexpr.errors import InputContractError
from timeexpr.parsers import parse


def test_bare_numbers_are_milliseconds():
    assert parse("100") == 100
    assert parse("0") == 0


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("100ms", 100),
        ("53 milliseconds", 53),
        ("17 msecs", 17),
        ("1 msec", 1),
        ("1s", 1000),
        ("1 secs", 1000),
        ("1 second", 1000),
        ("1m", 60_000),
        ("1 mins", 60_000),
        ("1 minute", 60_000),
        ("1h", 3_600_000),
        ("1 hrs", 3_600_000),
        ("1 hours", 3_600_000),
        ("2d", 172_800_000),
        ("1 day", 86_400_000),
        ("3w", 1_814_400_000),
        ("2 weeks", 1_209_600_000),
        ("1mo", 2_629_800_000),
        ("2 months", 5_259_600_000),
        ("1y", 31_557_600_000),
        ("1 yr", 31_557_600_000),
        ("1 years", 31_557_600_000),
    ],
)
def test_unit_aliases(expr, expected):
    assert parse(expr) == expected


def test_case_insensitive_units():
    assert parse("1H") == 3_600_000
    assert parse("1 Hour") == 3_600_000
    assert parse("53 YeArS") == 1_672_552_800_000
    assert parse("53 MiLliSeCondS") == 53
    for expr in ["1h 30m", "2 Days, 6 hours", "1e2M30s"]:
        assert parse(expr) == parse(expr.lower()) == parse(expr.upper())


def test_spacing_and_decimals():
    assert parse("1   h") == 3_600_000
    assert parse("1.5h") == 5_400_000
    assert parse("-10.5h") == -37_800_000
    assert parse(".5ms") == 0.5
    assert parse("-.5h") == -1_800_000
    assert parse("  2s  ") == 2000


def test_exponent_notation():
    assert parse("1e3ms") == 1000
    assert parse("-2.5e2s") == -250_000
    assert parse("+1E2m") == 6_000_000
    assert parse("1e2m30s") == 6_030_000


@pytest.mark.parametrize(
    "expr",
    ["1e309ms", "-1e309ms", "1e400y", "1e308y", "1e308ms 1e308ms"],
)
def test_overflow_returns_nan(expr):
    assert math.isnan(parse(expr))


def test_compound_expressions():
    assert parse("1h 30m") == 5_400_000
    assert parse("1h, 30m, 15s") == 5_415_000
    assert parse("1h30m") == 5_400_000
    assert parse("1 hour, 30m") == 5_400_000
    assert parse("1 day, 6 hours, 30 minutes") == 109_800_000
    assert parse("1 year 2 weeks 5 days") == (
        31_557_600_000 + 2 * 604_800_000 + 5 * 86_400_000
    )


def test_duplicates_add_and_order_does_not_matter():
    assert parse("1h 2h") == 10_800_000
    assert parse("30m 1h") == parse("1h 30m")


def test_leading_sign_distributes_over_compound_expression():
    assert parse("-1h 30m") == -5_400_000
    assert parse("-1h30m") == -5_400_000
    assert parse("-1 hour 30 minutes") == -5_400_000
    assert parse("  -1h 30m") == -5_400_000
    assert parse("+1h 30m") == 5_400_000


def test_explicit_later_signs_disable_distribution():
    assert parse("-1h -30m") == -5_400_000
    assert parse("-1h +30m") == -1_800_000
    assert parse("1h-30m") == 1_800_000
    assert parse("1h+30m") == 5_400_000
    assert parse("-1h 30m -10m") == -2_400_000
    assert parse("-1h 30m +10m") == -1_200_000
    assert parse("-1h,30m,+10m") == -1_200_000
    assert parse("-1h30m-10m") == -2_400_000


@pytest.mark.parametrize(
    "expr",
    [
        "foo",
        "ms",
        "☃",
        "10-.5",
        "1h foo 30m",
        "1h 30",
        "1hx",
        "1.",
        ",1h",
        "1h,",
        "1h,,30m",
        "1h, ,30m",
        "   ",
    ],
)
def test_unparseable_text_returns_nan(expr):
    assert math.isnan(parse(expr))


@pytest.mark.parametrize("value", ["", "a" * 201, None, 12, ["1h"], math.nan])
def test_invalid_input_raises(value):
    with pytest.raises(InputContractError):
        parse(value)


def test_contract_error_is_a_type_error_with_received_value():
    with pytest.raises(TypeError, match="Received: 12"):
        parse(12)


def test_two_hundred_characters_are_accepted():
    assert parse("1" + " " * 198 + "h") == 3_600_000
