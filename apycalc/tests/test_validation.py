from __future__ import annotations

import math

import pytest

from apycalc.core.validation import (
    InputValidationError,
    ValidationErrorKind,
    ValidationLimits,
    check_field,
    parse_number,
    validate_inputs,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1,000", 1000.0),
        ("  2,500.75 ", 2500.75),
        ("5", 5.0),
        (5, 5.0),
        (4.25, 4.25),
        ("1,000,000", 1_000_000.0),
    ],
)
def test_parse_number_accepts_separators(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "nan", "inf", "-inf", "1.2.3", "1_000", "1__0", True])
def test_parse_number_rejects_non_numbers(raw):
    with pytest.raises(ValueError):
        parse_number(raw)


def test_parse_number_rejects_float_nan():
    with pytest.raises(ValueError):
        parse_number(math.nan)


def test_valid_inputs_produce_calculation_input():
    calc_input = validate_inputs("5", "1,000")
    assert calc_input.apy == 5.0
    assert calc_input.principal == 1000.0


@pytest.mark.parametrize(
    "apy,amount,field,kind",
    [
        ("-1", "1000", "apy", ValidationErrorKind.BELOW_MINIMUM),
        ("abc", "1000", "apy", ValidationErrorKind.NOT_A_NUMBER),
        ("5", "0", "amount", ValidationErrorKind.BELOW_MINIMUM),
        ("5", "-5", "amount", ValidationErrorKind.BELOW_MINIMUM),
        ("", "1000", "apy", ValidationErrorKind.MISSING_VALUE),
        ("5", None, "amount", ValidationErrorKind.MISSING_VALUE),
        ("5", "   ", "amount", ValidationErrorKind.MISSING_VALUE),
        ("0", "1000", "apy", ValidationErrorKind.BELOW_MINIMUM),
        ("100.01", "1000", "apy", ValidationErrorKind.ABOVE_MAXIMUM),
        ("5", "10,000,001", "amount", ValidationErrorKind.ABOVE_MAXIMUM),
        ("nan", "1000", "apy", ValidationErrorKind.NOT_A_NUMBER),
        ("5", "Infinity", "amount", ValidationErrorKind.NOT_A_NUMBER),
        ("5", "1_000", "amount", ValidationErrorKind.NOT_A_NUMBER),
        ("5", 10**400, "amount", ValidationErrorKind.ABOVE_MAXIMUM),
        (-(10**400), "1000", "apy", ValidationErrorKind.BELOW_MINIMUM),
    ],
)
def test_invalid_inputs_are_rejected(apy, amount, field, kind):
    with pytest.raises(InputValidationError) as exc_info:
        validate_inputs(apy, amount)

    errors = exc_info.value.errors
    assert len(errors) == 1
    assert errors[0].field == field
    assert errors[0].kind == kind


def test_upper_bounds_are_inclusive():
    calc_input = validate_inputs("100", "10,000,000")
    assert calc_input.apy == 100.0
    assert calc_input.principal == 10_000_000.0


def test_all_failing_fields_are_reported():
    with pytest.raises(InputValidationError) as exc_info:
        validate_inputs("abc", "-5")

    assert exc_info.value.kinds == [
        ValidationErrorKind.NOT_A_NUMBER,
        ValidationErrorKind.BELOW_MINIMUM,
    ]
    assert "APY must be a valid number." in str(exc_info.value)


def test_looser_limits_accept_larger_values():
    limits = ValidationLimits(max_apy=1000.0, max_principal=1_000_000_000.0)
    calc_input = validate_inputs("750", "500,000,000", limits)
    assert calc_input.apy == 750.0

    with pytest.raises(InputValidationError) as exc_info:
        validate_inputs("1000.5", "1,000,000,001", limits)
    assert exc_info.value.kinds == [
        ValidationErrorKind.ABOVE_MAXIMUM,
        ValidationErrorKind.ABOVE_MAXIMUM,
    ]


def test_messages_name_the_limit():
    _, apy_error = check_field("101", "apy", 100.0)
    _, amount_error = check_field("20,000,000", "amount", 10_000_000.0)

    assert apy_error.message == "APY must be 100 or less."
    assert amount_error.message == "Amount must be $10,000,000 or less."


def test_check_field_returns_value_when_valid():
    value, error = check_field("1,234.5", "amount", 10_000_000.0)
    assert value == 1234.5
    assert error is None


def test_field_error_as_dict():
    _, error = check_field("", "apy", 100.0)
    assert error.as_dict() == {
        "field": "apy",
        "kind": "missing_value",
        "message": "APY is required.",
    }


def test_integers_beyond_float_range_are_above_maximum():
    value, error = check_field(10**400, "amount", 10_000_000.0)

    assert value is None
    assert error.kind == ValidationErrorKind.ABOVE_MAXIMUM
    assert error.message == "Amount must be $10,000,000 or less."


def test_parse_number_overflows_on_huge_integers():
    with pytest.raises(OverflowError):
        parse_number(10**400)
