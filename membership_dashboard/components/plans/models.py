"""
Plans component models.

Raw plan payloads as the membership backend sends them, validated with
pydantic before they become MembershipPlan records.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlanInterval(str, Enum):
    """Billing interval of a plan."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


class ApiMembershipPlan(BaseModel):
    """One plan record from the membership-plans endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    planName: str = ""
    price: Decimal = Field(ge=0)
    activeMembersCount: int | None = Field(default=None, ge=0)
    planPeriod: int | None = None
    planInterval: str | None = None
    features: list[str] = []
    description: str | None = None

    @field_validator("features", mode="before")
    @classmethod
    def _features_list(cls, value: Any) -> Any:
        # Backend sends null or a JSON string for plans without features
        if not isinstance(value, list):
            return []
        return value


class ApiEnvelope(BaseModel):
    """Response wrapper used by the backend for list endpoints."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    data: list[dict[str, Any]] = []
    message: str | None = None
