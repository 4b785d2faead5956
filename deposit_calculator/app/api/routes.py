"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from deposit_calculator.core.deposit import (
    DepositCalculator,
    InvalidArgumentError,
    calculate_capitalization_schedule,
)
from deposit_calculator.core.health import get_health
from deposit_calculator.schemas.deposit import (
    CapitalizationResponse,
    DepositRequest,
    ProfitResponse,
    ScheduleRequest,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)
calculator = DepositCalculator()


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected malformed payload on %s: %d error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidArgumentError)
def _handle_invalid_argument(exc: InvalidArgumentError):
    logger.info("rejected deposit on %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


def _deposit_payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(get_health().model_dump())


@api_bp.post("/calc/profit")
def profit() -> Any:
    """Simple interest earned on a deposit.

    Overflow is reported as ``Infinity``, see ``capitalization``.
    """
    payload = DepositRequest.model_validate(_deposit_payload())
    result = calculator.calculate_profit(
        payload.deposit_amount, payload.interest_rate, payload.months
    )
    logger.debug("simple profit for %s: %s", payload, result)
    return jsonify(ProfitResponse(profit=result).model_dump())


@api_bp.post("/calc/capitalization")
def capitalization() -> Any:
    """Balance of a deposit compounded monthly.

    An overflowing balance is written as the bare token ``Infinity``, which
    Python's json accepts but strict parsers such as ``JSON.parse`` reject.
    """
    payload = DepositRequest.model_validate(_deposit_payload())
    total = calculator.calculate_profit_capitalization(
        payload.deposit_amount, payload.interest_rate, payload.months
    )
    logger.debug("capitalized total for %s: %s", payload, total)
    response = CapitalizationResponse(total=total, profit=total - payload.deposit_amount)
    return jsonify(response.model_dump())


@api_bp.post("/calc/capitalization/schedule")
def capitalization_schedule() -> Any:
    """Month-by-month balances of a compounding deposit."""
    payload = ScheduleRequest.model_validate(_deposit_payload())
    result = calculate_capitalization_schedule(payload)
    logger.debug("schedule final balance for %s: %s", payload, result.final_balance)
    return jsonify(result.model_dump())
