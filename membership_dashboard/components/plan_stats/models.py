"""
Plan stats component input/output models.

Plan records flow in from the plan source, summaries flow out to the
dashboard cards. Both are frozen: the aggregator never mutates a record and
every summary is a fresh value.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Literal

Number = int | float | Decimal

MemoKey = Literal["identity", "structural"]


# --- Validation Error ---


@dataclass(frozen=True)
class PlanStatsValidationError:
    """Plan record validation error."""

    code: str
    message: str
    field_name: str | None = None
    index: int | None = None


class InvalidRecordError(ValueError):
    """
    A plan record is missing or mistyping a numeric field.

    Raised synchronously to the caller; the aggregator never coerces a bad
    record to zero.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "INVALID_RECORD",
        field_name: str | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.field_name = field_name
        self.index = index

    @classmethod
    def from_error(cls, error: PlanStatsValidationError) -> InvalidRecordError:
        return cls(
            error.message,
            code=error.code,
            field_name=error.field_name,
            index=error.index,
        )


# --- Domain Models ---


@dataclass(frozen=True, eq=False)
class MembershipPlan:
    """
    One membership tier.

    Equality is identity: two plans with the same id are still distinct
    entries for counting and for most-popular selection.
    """

    id: Any
    price: Number
    active_members: int
    name: str = ""
    duration: int | None = None
    duration_unit: str | None = None
    features: tuple[str, ...] = ()
    description: str = ""
    # Interval-adjusted monthly estimate; None means the price is already monthly
    monthly_revenue: Number | None = None


@dataclass(frozen=True)
class PlanStatsSummary:
    """Derived dashboard statistics over a list of plans."""

    total_plans: int
    total_active_members: int
    monthly_revenue: Number
    most_popular_plan: MembershipPlan | None  # alias into the input, never a copy
    estimated_monthly_revenue: Number = 0  # sum of per-plan interval-adjusted estimates

    @property
    def is_empty(self) -> bool:
        return self.total_plans == 0


EMPTY_SUMMARY = PlanStatsSummary(
    total_plans=0,
    total_active_members=0,
    monthly_revenue=0,
    most_popular_plan=None,
    estimated_monthly_revenue=0,
)


# --- Input Models ---


@dataclass(frozen=True)
class ComputePlanStatsInput:
    """Input for computing stats over an already-loaded plan list."""

    plans: Sequence[MembershipPlan]


@dataclass(frozen=True)
class LoadPlanStatsInput:
    """Input for loading plans from the plan source, then computing stats."""

    use_memo: bool = True


# --- Output Models ---


@dataclass(frozen=True)
class ComputePlanStatsOutput:
    """Output from a stats computation."""

    summary: PlanStatsSummary
    from_cache: bool = False
