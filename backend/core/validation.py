"""Validation of untrusted calculator input (query strings, JSON bodies, CLI args)."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from backend.core.investment import InvestmentParams, InvestmentWithId

logger = logging.getLogger(__name__)

INVALID_NUMBERS = "All parameters must be valid numbers"
MONTHS_NOT_POSITIVE = "Months must be greater than 0"
MONTHS_NOT_WHOLE = "Months must be a whole number"
NEGATIVE_INITIAL_AMOUNT = "Initial amount cannot be negative"
NEGATIVE_MONTHLY_CONTRIBUTION = "Monthly contribution cannot be negative"
NEGATIVE_INTEREST_RATE = "Annual interest rate cannot be negative"
INTEREST_RATE_TOO_HIGH = "Annual interest rate cannot exceed 100%"

MAX_ANNUAL_INTEREST_RATE = 100

# stands in for a key absent from a JSON object
MISSING = object()


class InvestmentValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass
class ValidationResult:
    params: Optional[InvestmentParams] = None
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None and self.params is not None


@dataclass
class BatchValidationResult:
    investments: List[InvestmentWithId] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def _to_number(value: Any) -> Optional[float]:
    """
    Coerce one raw field to a finite float, or None when it isn't a number.

    A null value (absent query parameter, JSON null) and a blank string
    count as 0. A key missing from a JSON object (MISSING) does not.
    """
    # bool is an int subclass; True/False are not amounts
    if value is MISSING or isinstance(value, bool):
        return None
    if value is None:
        return 0.0

    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip()) if value.strip() else 0.0
        else:
            return None
    except (ValueError, OverflowError):
        return None

    if not math.isfinite(number):
        return None
    return number


def _reject(error: str) -> ValidationResult:
    logger.debug("rejected investment params: %s", error)
    return ValidationResult(error=error)


def validate_and_parse_params(
    months: Any,
    initial_amount: Any,
    monthly_contribution: Any,
    annual_interest_rate: Any,
) -> ValidationResult:
    """
    Parse the four calculator fields into InvestmentParams.

    Checks run in a fixed order and stop at the first failure, so
    months=-1 with initial_amount=-1 reports the months error.
    """
    parsed = [
        _to_number(months),
        _to_number(initial_amount),
        _to_number(monthly_contribution),
        _to_number(annual_interest_rate),
    ]
    if any(value is None for value in parsed):
        return _reject(INVALID_NUMBERS)

    parsed_months, parsed_initial, parsed_contribution, parsed_rate = parsed

    if parsed_months <= 0:
        return _reject(MONTHS_NOT_POSITIVE)
    if not parsed_months.is_integer():
        return _reject(MONTHS_NOT_WHOLE)
    if parsed_initial < 0:
        return _reject(NEGATIVE_INITIAL_AMOUNT)
    if parsed_contribution < 0:
        return _reject(NEGATIVE_MONTHLY_CONTRIBUTION)
    if parsed_rate < 0:
        return _reject(NEGATIVE_INTEREST_RATE)
    if parsed_rate > MAX_ANNUAL_INTEREST_RATE:
        return _reject(INTEREST_RATE_TOO_HIGH)

    return ValidationResult(
        params=InvestmentParams(
            months=int(parsed_months),
            initialAmount=parsed_initial,
            monthlyContribution=parsed_contribution,
            annualInterestRate=parsed_rate,
        )
    )


def validate_investments(items: Iterable[Any]) -> BatchValidationResult:
    """Validate every scenario of a batch, collecting one error per bad scenario."""
    result = BatchValidationResult()

    for index, item in enumerate(items):
        investment_id = item.get("id") if isinstance(item, Mapping) else None
        if not isinstance(investment_id, str) or investment_id == "":
            result.errors.append(f"Investment at index {index} is missing an id")
            continue

        validation = validate_and_parse_params(
            item.get("months", MISSING),
            item.get("initialAmount", MISSING),
            item.get("monthlyContribution", MISSING),
            item.get("annualInterestRate", MISSING),
        )
        if not validation.is_valid:
            result.errors.append(f"Investment {investment_id}: {validation.error}")
            continue

        result.investments.append(
            InvestmentWithId(id=investment_id, **validation.params.model_dump())
        )

    return result


def require_valid_investments(items: Iterable[Any]) -> List[InvestmentWithId]:
    """All-or-nothing: return every scenario, or raise with all the errors."""
    result = validate_investments(items)
    if result.errors:
        raise InvestmentValidationError(result.errors)
    return result.investments
