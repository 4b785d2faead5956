"""Deposit interest calculations.

Both accrual models share the same monthly rate convention: the annual
nominal rate is given in percent and converted with ``rate / 100 / 12``.
"""

from __future__ import annotations

import math
from typing import List

from deposit_calculator.schemas.deposit import (
    CapitalizationSchedule,
    DepositRequest,
    SchedulePoint,
)


class InvalidArgumentError(ValueError):
    """Raised when a deposit input violates a precondition."""


def monthly_rate(interest_rate: float) -> float:
    return interest_rate / 100 / 12


def validate_deposit(deposit_amount: float, interest_rate: float, months: int) -> None:
    if deposit_amount <= 0:
        raise InvalidArgumentError("deposit amount must be positive")
    if interest_rate < 0:
        raise InvalidArgumentError("interest rate must be non-negative")
    if months <= 0:
        raise InvalidArgumentError("number of months must be positive")


def _as_float(value: float) -> float:
    # ints past the float range raise on conversion; validated inputs are >= 0.
    try:
        return float(value)
    except OverflowError:
        return math.inf


def _growth_factor(rate: float, periods: float) -> float:
    # float ** float raises instead of returning inf; the base is always >= 1 here.
    try:
        return (1 + rate) ** periods
    except OverflowError:
        return math.inf


class DepositCalculator:
    """Stateless calculator for interest earned on a deposit."""

    def calculate_profit(
        self, deposit_amount: float, interest_rate: float, months: int
    ) -> float:
        """Simple interest earned over ``months``, principal excluded."""
        validate_deposit(deposit_amount, interest_rate, months)
        accrued = _as_float(deposit_amount) * monthly_rate(_as_float(interest_rate))
        # zero monthly accrual stays zero over any term, including an infinite one.
        if accrued == 0:
            return 0.0
        return accrued * _as_float(months)

    def calculate_profit_capitalization(
        self, deposit_amount: float, interest_rate: float, months: int
    ) -> float:
        """Principal plus interest compounded once a month."""
        validate_deposit(deposit_amount, interest_rate, months)
        rate = monthly_rate(_as_float(interest_rate))
        return _as_float(deposit_amount) * _growth_factor(rate, _as_float(months))


def calculate_capitalization_schedule(request: DepositRequest) -> CapitalizationSchedule:
    """Month-by-month balances of a compounding deposit."""
    validate_deposit(request.deposit_amount, request.interest_rate, request.months)
    rate = monthly_rate(request.interest_rate)

    schedule: List[SchedulePoint] = [
        SchedulePoint(period=0, balance=request.deposit_amount, interest=0.0)
    ]
    for month in range(1, request.months + 1):
        previous = schedule[-1].balance
        balance = request.deposit_amount * _growth_factor(rate, month)
        schedule.append(
            SchedulePoint(period=month, balance=balance, interest=previous * rate)
        )

    return CapitalizationSchedule(schedule=schedule, final_balance=schedule[-1].balance)
