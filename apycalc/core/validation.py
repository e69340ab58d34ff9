"""Parsing and validation of raw calculator inputs.

Everything that can go wrong with user input is caught here, before the
interest engine runs. Failures are reported with a closed set of kinds so
callers can pick a message or status per kind.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from apycalc.schemas.calculation import CalculationInput, RawNumber


class ValidationErrorKind(str, Enum):
    MISSING_VALUE = "missing_value"
    NOT_A_NUMBER = "not_a_number"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


@dataclass(frozen=True)
class FieldError:
    field: str
    kind: ValidationErrorKind
    message: str

    def as_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "kind": self.kind.value, "message": self.message}


class InputValidationError(ValueError):
    def __init__(self, errors: List[FieldError]):
        super().__init__("; ".join(error.message for error in errors))
        self.errors = errors

    @property
    def kinds(self) -> List[ValidationErrorKind]:
        return [error.kind for error in self.errors]


@dataclass(frozen=True)
class ValidationLimits:
    """Inclusive upper bounds; the lower bound is always exclusive zero."""

    max_apy: float = 100.0
    max_principal: float = 10_000_000.0

    @classmethod
    def from_settings(cls, settings: Any) -> "ValidationLimits":
        return cls(max_apy=settings.max_apy, max_principal=settings.max_principal)


APY_FIELD = "apy"
AMOUNT_FIELD = "amount"


def parse_number(raw: RawNumber) -> float:
    """Convert a typed value to a finite float, ignoring ``,`` separators.

    Raises ``ValueError`` for anything that is not a finite number, and
    ``OverflowError`` for integers beyond float range.
    """
    if isinstance(raw, bool):
        raise ValueError("booleans are not numbers")
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).replace(",", "").strip()
        # float() also takes digit grouping with underscores, which the form never sends
        if "_" in text:
            raise ValueError(f"{raw!r} is not a plain decimal number")
        value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{raw!r} is not finite")
    return value


def _is_blank(raw: RawNumber) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.replace(",", "").strip())


def _format_limit(value: float) -> str:
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,}"


def _messages(field: str, limit: float) -> Dict[ValidationErrorKind, str]:
    if field == APY_FIELD:
        return {
            ValidationErrorKind.MISSING_VALUE: "APY is required.",
            ValidationErrorKind.NOT_A_NUMBER: "APY must be a valid number.",
            ValidationErrorKind.BELOW_MINIMUM: "APY must be greater than 0.",
            ValidationErrorKind.ABOVE_MAXIMUM: f"APY must be {_format_limit(limit)} or less.",
        }
    return {
        ValidationErrorKind.MISSING_VALUE: "Amount is required.",
        ValidationErrorKind.NOT_A_NUMBER: "Amount must be a valid number.",
        ValidationErrorKind.BELOW_MINIMUM: "Amount must be greater than $0.",
        ValidationErrorKind.ABOVE_MAXIMUM: f"Amount must be ${_format_limit(limit)} or less.",
    }


def check_field(raw: RawNumber, field: str, maximum: float) -> tuple[Optional[float], Optional[FieldError]]:
    """Validate one field, returning either its value or the first error."""
    messages = _messages(field, maximum)

    def fail(kind: ValidationErrorKind) -> tuple[None, FieldError]:
        return None, FieldError(field=field, kind=kind, message=messages[kind])

    if _is_blank(raw):
        return fail(ValidationErrorKind.MISSING_VALUE)
    try:
        value = parse_number(raw)
    except OverflowError:
        # integers too large for a float are out of range, not malformed
        if raw < 0:
            return fail(ValidationErrorKind.BELOW_MINIMUM)
        return fail(ValidationErrorKind.ABOVE_MAXIMUM)
    except ValueError:
        return fail(ValidationErrorKind.NOT_A_NUMBER)
    if value <= 0:
        return fail(ValidationErrorKind.BELOW_MINIMUM)
    if value > maximum:
        return fail(ValidationErrorKind.ABOVE_MAXIMUM)
    return value, None


def validate_inputs(
    apy: RawNumber,
    amount: RawNumber,
    limits: Optional[ValidationLimits] = None,
) -> CalculationInput:
    """Validate both form fields, reporting every failing field at once."""
    limits = limits or ValidationLimits()

    apy_value, apy_error = check_field(apy, APY_FIELD, limits.max_apy)
    amount_value, amount_error = check_field(amount, AMOUNT_FIELD, limits.max_principal)

    errors = [error for error in (apy_error, amount_error) if error is not None]
    if errors:
        raise InputValidationError(errors)

    return CalculationInput(principal=amount_value, apy=apy_value)
