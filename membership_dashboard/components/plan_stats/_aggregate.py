"""
Plan stats aggregation - Functional Core.

Pure reduction over a plan list. No I/O, no state.

Key behaviors:
- Sums run left to right from 0 in input order (reproducible float totals)
- Most popular plan uses strict ">" on a left-to-right scan, so the first
  plan wins a tie on active members
- No deduplication by id
- Negative values are not rejected and propagate arithmetically
- estimated_monthly_revenue sums each plan's interval-adjusted estimate,
  falling back to price * active_members for plans billed monthly
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from .models import (
    EMPTY_SUMMARY,
    InvalidRecordError,
    MembershipPlan,
    PlanStatsSummary,
    PlanStatsValidationError,
)

logger = logging.getLogger(__name__)

_MISSING = object()


# --- Validation Functions ---


def _is_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def validate_plan_record(plan: Any, index: int | None = None) -> list[PlanStatsValidationError]:
    """
    Validate the numeric fields the aggregation reads.

    Args:
        plan: Plan record (MembershipPlan or any object with the same attributes)
        index: Position of the record in its list, for error reporting

    Returns:
        List of validation errors (empty if valid)
    """
    errors: list[PlanStatsValidationError] = []

    price = getattr(plan, "price", _MISSING)
    if price is _MISSING:
        errors.append(
            PlanStatsValidationError(
                code="MISSING_FIELD",
                message="Plan record has no price",
                field_name="price",
                index=index,
            )
        )
    elif isinstance(price, bool) or not isinstance(price, (numbers.Real, Decimal)):
        errors.append(
            PlanStatsValidationError(
                code="INVALID_TYPE",
                message=f"Price must be a number, got {type(price).__name__}",
                field_name="price",
                index=index,
            )
        )
    elif not _is_finite(price):
        errors.append(
            PlanStatsValidationError(
                code="INVALID_VALUE",
                message=f"Price must be finite, got {price!r}",
                field_name="price",
                index=index,
            )
        )

    members = getattr(plan, "active_members", _MISSING)
    if members is _MISSING:
        errors.append(
            PlanStatsValidationError(
                code="MISSING_FIELD",
                message="Plan record has no active_members",
                field_name="active_members",
                index=index,
            )
        )
    elif isinstance(members, bool) or not isinstance(members, numbers.Integral):
        errors.append(
            PlanStatsValidationError(
                code="INVALID_TYPE",
                message=f"Active members must be an integer, got {type(members).__name__}",
                field_name="active_members",
                index=index,
            )
        )

    estimate = getattr(plan, "monthly_revenue", None)
    if estimate is not None and (
        isinstance(estimate, bool)
        or not isinstance(estimate, (numbers.Real, Decimal))
        or not _is_finite(estimate)
    ):
        errors.append(
            PlanStatsValidationError(
                code="INVALID_VALUE",
                message=f"Monthly revenue estimate must be a finite number, got {estimate!r}",
                field_name="monthly_revenue",
                index=index,
            )
        )

    return errors


def ensure_valid_plans(plans: Sequence[Any]) -> None:
    """
    Fail fast on the first malformed record.

    Raises:
        InvalidRecordError: naming the offending index and field
    """
    for index, plan in enumerate(plans):
        errors = validate_plan_record(plan, index)
        if errors:
            first = errors[0]
            logger.warning(
                "Rejected plan record at index %s: %s (%s)",
                index,
                first.message,
                first.code,
            )
            raise InvalidRecordError.from_error(first)


# --- Aggregation ---


def plan_monthly_estimate(plan: Any) -> Any:
    """
    Interval-adjusted monthly revenue of one plan.

    Plans without an estimate are billed monthly: price * active_members.
    """
    estimate = getattr(plan, "monthly_revenue", None)
    if estimate is None:
        return plan.price * plan.active_members
    return estimate


def aggregate_plans(plans: Sequence[MembershipPlan]) -> tuple[PlanStatsSummary, int | None]:
    """
    Reduce plans to a summary.

    Returns the summary together with the index of the most popular plan
    (None for an empty list). Callers must validate first.
    """
    if len(plans) == 0:
        return EMPTY_SUMMARY, None

    total_active_members = 0
    monthly_revenue: Any = 0
    estimated_monthly_revenue: Any = 0
    best_index = 0

    for index, plan in enumerate(plans):
        total_active_members = total_active_members + plan.active_members
        monthly_revenue = monthly_revenue + plan.price * plan.active_members
        estimated_monthly_revenue = estimated_monthly_revenue + plan_monthly_estimate(plan)
        if plan.active_members > plans[best_index].active_members:
            best_index = index

    summary = PlanStatsSummary(
        total_plans=len(plans),
        total_active_members=total_active_members,
        monthly_revenue=monthly_revenue,
        most_popular_plan=plans[best_index],
        estimated_monthly_revenue=estimated_monthly_revenue,
    )
    return summary, best_index


def compute_plan_stats(plans: Sequence[MembershipPlan]) -> PlanStatsSummary:
    """
    Compute dashboard statistics for a plan list.

    Args:
        plans: Ordered plan records; may be empty

    Returns:
        PlanStatsSummary (most_popular_plan is None only for empty input)

    Raises:
        InvalidRecordError: if any record lacks or mistypes price/active_members
    """
    ensure_valid_plans(plans)
    summary, _ = aggregate_plans(plans)
    return summary
