"""Compounding-interest engine.

Pure arithmetic on 64-bit floats. Inputs are expected to be validated
already (see ``apycalc.core.validation``); nothing here rounds or rejects.
"""

from __future__ import annotations

from typing import Optional

from apycalc.core.validation import InputValidationError, ValidationLimits, validate_inputs
from apycalc.observability import log_calculation, log_rejected_input
from apycalc.schemas.calculation import (
    CalculationInput,
    CalculationResult,
    CompoundingMethod,
    RawNumber,
)

DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12
# month horizon used when re-compounding an APY-derived daily rate
DAYS_PER_MONTH = 30


def _nominal_daily(principal: float, rate: float) -> tuple[float, float, float]:
    periodic = 1 + rate / DAYS_PER_YEAR
    day_earn = principal * (periodic - 1)
    month_earn = principal * (periodic ** (DAYS_PER_YEAR / MONTHS_PER_YEAR) - 1)
    year_earn = principal * (periodic**DAYS_PER_YEAR - 1)
    return day_earn, month_earn, year_earn


def _apy_daily(principal: float, rate: float) -> tuple[float, float, float]:
    daily_rate = daily_rate_from_apy(rate)
    day_earn = principal * daily_rate
    month_earn = principal * ((1 + daily_rate) ** DAYS_PER_MONTH - 1)
    year_earn = principal * rate
    return day_earn, month_earn, year_earn


def daily_rate_from_apy(rate: float) -> float:
    """Daily rate that compounds to ``rate`` over a 365-day year."""
    return (1 + rate) ** (1 / DAYS_PER_YEAR) - 1


def calculate_earnings(
    principal: float,
    apy: float,
    method: CompoundingMethod = CompoundingMethod.NOMINAL_DAILY,
) -> CalculationResult:
    """Project daily, monthly and yearly earnings for ``principal`` at ``apy`` percent.

    NOMINAL_DAILY treats ``apy`` as a nominal annual rate compounded daily
    and derives all three horizons from ``rate / 365``. APY_DAILY converts the
    APY to an equivalent daily rate, re-compounds it over 1 and 30 days, and
    takes the yearly figure straight from the APY.
    """
    rate = apy / 100

    if method == CompoundingMethod.APY_DAILY:
        day_earn, month_earn, year_earn = _apy_daily(principal, rate)
    else:
        day_earn, month_earn, year_earn = _nominal_daily(principal, rate)

    return CalculationResult(
        principal=principal,
        apy=apy,
        method=method,
        dayEarn=day_earn,
        monthEarn=month_earn,
        yearEarn=year_earn,
        total=principal + year_earn,
    )


def calculate(
    calc_input: CalculationInput,
    method: CompoundingMethod = CompoundingMethod.NOMINAL_DAILY,
) -> CalculationResult:
    return calculate_earnings(calc_input.principal, calc_input.apy, method)


def calculate_from_raw(
    apy: RawNumber,
    amount: RawNumber,
    limits: Optional[ValidationLimits] = None,
    method: CompoundingMethod = CompoundingMethod.NOMINAL_DAILY,
) -> CalculationResult:
    """Validate raw form values and run the engine on them.

    Raises ``InputValidationError`` without computing anything when either
    value is rejected.
    """
    try:
        calc_input = validate_inputs(apy, amount, limits)
    except InputValidationError as exc:
        log_rejected_input(kind.value for kind in exc.kinds)
        raise

    result = calculate(calc_input, method)
    log_calculation(result.principal, result.apy, result.method.value, result.yearEarn)
    return result
