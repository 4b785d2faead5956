"""Data contracts for deposit calculations."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

MAX_SCHEDULE_MONTHS = 1200


class DepositRequest(BaseModel):
    """Inputs shared by every deposit calculation.

    Ranges are left to the calculator so its messages reach the caller.
    """

    model_config = ConfigDict(extra="forbid")

    deposit_amount: float = Field(..., description="Principal placed on deposit.")
    interest_rate: float = Field(
        ...,
        description="Annual nominal rate in percent (e.g. 10 for 10%).",
    )
    months: int = Field(..., description="Number of monthly accrual periods.")


class ScheduleRequest(DepositRequest):
    """Deposit inputs for a month-by-month schedule."""

    months: int = Field(
        ...,
        le=MAX_SCHEDULE_MONTHS,
        description="Number of monthly periods to list.",
    )


class ProfitResponse(BaseModel):
    """Simple interest earned on the deposit."""

    profit: float


class CapitalizationResponse(BaseModel):
    """Balance of a monthly-compounding deposit."""

    total: float
    profit: float


class SchedulePoint(BaseModel):
    """Single month of a compounding schedule."""

    period: int = Field(..., ge=0)
    balance: float
    interest: float


class CapitalizationSchedule(BaseModel):
    """Compounding schedule from the opening month to maturity."""

    schedule: List[SchedulePoint]
    final_balance: float
