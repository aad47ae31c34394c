"""HTTP routes for the Flask API."""

import logging
import math
from http import HTTPStatus
from typing import Any, Mapping

from flask import Blueprint, jsonify, request

from backend.core.investment import (
    InvestmentResult,
    calculate_investment,
    calculate_multiple_investments,
)
from backend.core.validation import (
    MISSING,
    InvestmentValidationError,
    require_valid_investments,
    validate_and_parse_params,
)
from backend.schemas.responses import BatchErrorResponse, ErrorResponse, PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

FAILED_TO_CALCULATE = "Failed to calculate investment"


class MalformedPayloadError(ValueError):
    """Request body parsed, but is neither a single investment nor a list of them."""


class ProjectionOverflowError(ArithmeticError):
    """Valid inputs whose projected balance overflows to inf (not JSON-encodable)."""


@api_bp.errorhandler(InvestmentValidationError)
def _handle_investment_errors(exc: InvestmentValidationError):
    """Reject the whole batch; no scenario is calculated."""
    logger.info("rejected batch with %d invalid investment(s)", len(exc.errors))
    body = BatchErrorResponse(errors=exc.errors)
    return jsonify(body.model_dump()), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(Exception)
def _handle_unexpected_error(exc: Exception):
    """Anything else (unparseable JSON included) becomes a generic 500."""
    logger.exception("investment calculation failed: %s", exc)
    body = ErrorResponse(error=FAILED_TO_CALCULATE)
    return jsonify(body.model_dump()), HTTPStatus.INTERNAL_SERVER_ERROR


def _ensure_finite(result: InvestmentResult) -> InvestmentResult:
    # balances only grow, so a finite total means every month is finite
    if not math.isfinite(result.totalValue):
        raise ProjectionOverflowError("projected balance exceeds the float range")
    return result


def _calculate_single(fields: Mapping[str, Any], missing: Any = MISSING) -> Any:
    validation = validate_and_parse_params(
        fields.get("months", missing),
        fields.get("initialAmount", missing),
        fields.get("monthlyContribution", missing),
        fields.get("annualInterestRate", missing),
    )
    if not validation.is_valid:
        body = ErrorResponse(error=validation.error)
        return jsonify(body.model_dump()), HTTPStatus.BAD_REQUEST

    result = _ensure_finite(calculate_investment(validation.params))
    return jsonify(result.model_dump()), HTTPStatus.OK


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong")
    return jsonify(response.model_dump())


@api_bp.get("/calculate")
def calculate_from_query() -> Any:
    """Single scenario from query-string parameters; absent ones count as 0."""
    return _calculate_single(request.args, missing=None)


@api_bp.post("/calculate")
def calculate() -> Any:
    """Single scenario for a JSON object, batch of scenarios for a JSON array."""
    payload = request.get_json(force=True, silent=False)

    if isinstance(payload, list):
        investments = require_valid_investments(payload)
        logger.info("calculating %d investment(s)", len(investments))
        result = calculate_multiple_investments(investments)
        for scenario in result.investments.values():
            _ensure_finite(scenario)
        return jsonify(result.model_dump()), HTTPStatus.OK

    if isinstance(payload, dict):
        return _calculate_single(payload)

    raise MalformedPayloadError(
        f"expected a JSON object or array, got {type(payload).__name__}"
    )
