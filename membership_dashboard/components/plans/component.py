"""
Plans component - Raw plan payloads to MembershipPlan records.

Validates backend plan payloads, normalises the billing interval and
estimates per-plan monthly revenue. The output feeds the plan stats
component.

Invariants:
- Every MembershipPlan produced carries a finite, non-negative Decimal price
  and a non-negative int member count (missing count -> 0)
- A payload that fails validation raises InvalidRecordError with its index
- Output order matches input order
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import ValidationError

from membership_dashboard.components.plan_stats import InvalidRecordError, MembershipPlan

from .models import ApiEnvelope, ApiMembershipPlan, PlanInterval

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = "₱"

_INTERVAL_ALIASES: dict[str, PlanInterval] = {
    "day": PlanInterval.DAYS,
    "days": PlanInterval.DAYS,
    "daily": PlanInterval.DAYS,
    "week": PlanInterval.WEEKS,
    "weeks": PlanInterval.WEEKS,
    "weekly": PlanInterval.WEEKS,
    "month": PlanInterval.MONTHS,
    "months": PlanInterval.MONTHS,
    "monthly": PlanInterval.MONTHS,
    "year": PlanInterval.YEARS,
    "years": PlanInterval.YEARS,
    "yearly": PlanInterval.YEARS,
    "annual": PlanInterval.YEARS,
}

# Monthly multiplier per interval: a month is 4 weeks or 30 days
_MONTHLY_FACTOR: dict[PlanInterval, Decimal] = {
    PlanInterval.DAYS: Decimal(30),
    PlanInterval.WEEKS: Decimal(4),
    PlanInterval.MONTHS: Decimal(1),
}


# --- Pure Functions (Functional Core) ---


def normalize_interval(value: str | None) -> str | None:
    """
    Map a backend interval label to its canonical value.

    Unknown labels are returned unchanged.
    """
    if value is None:
        return None
    interval = _INTERVAL_ALIASES.get(value.strip().lower())
    return interval.value if interval is not None else value


def estimate_monthly_revenue(
    price: Decimal | int | float,
    active_members: int,
    interval: str | None,
) -> Decimal:
    """
    Estimate monthly revenue for one plan.

    Yearly plans are spread over 12 months, weekly plans count 4 weeks and
    daily plans 30 days. Unknown intervals are treated as monthly.
    """
    amount = Decimal(str(price)) * active_members
    if interval == PlanInterval.YEARS.value:
        return amount / 12
    for known, factor in _MONTHLY_FACTOR.items():
        if interval == known.value:
            return amount * factor
    return amount


def format_currency(amount: Decimal | int | float) -> str:
    """Format an amount as pesos with two decimals, e.g. "₱1,234.50"."""
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if value < 0:
        return f"-{CURRENCY_SYMBOL}{-value:,.2f}"
    return f"{CURRENCY_SYMBOL}{value:,.2f}"


def _first_error_field(error: ValidationError) -> str | None:
    errors = error.errors()
    if not errors or not errors[0].get("loc"):
        return None
    return ".".join(str(part) for part in errors[0]["loc"])


def transform_membership_plan(payload: Mapping[str, Any], index: int | None = None) -> MembershipPlan:
    """
    Convert one backend plan payload into a MembershipPlan.

    Args:
        payload: Raw plan dict from the API
        index: Position in the payload list, for error reporting

    Returns:
        MembershipPlan

    Raises:
        InvalidRecordError: if the payload is not a mapping or fails validation
    """
    if not isinstance(payload, Mapping):
        raise InvalidRecordError(
            f"Plan payload must be an object, got {type(payload).__name__}",
            code="INVALID_PAYLOAD",
            index=index,
        )

    try:
        api_plan = ApiMembershipPlan.model_validate(dict(payload))
    except ValidationError as e:
        field_name = _first_error_field(e)
        logger.warning("Invalid plan payload at index %s: %s", index, field_name)
        raise InvalidRecordError(
            f"Invalid plan payload: {e.errors()[0]['msg']}",
            code="INVALID_PAYLOAD",
            field_name=field_name,
            index=index,
        ) from e

    active_members = api_plan.activeMembersCount or 0
    interval = normalize_interval(api_plan.planInterval)

    return MembershipPlan(
        id=api_plan.id,
        name=api_plan.planName,
        price=api_plan.price,
        active_members=active_members,
        duration=api_plan.planPeriod,
        duration_unit=interval,
        features=tuple(api_plan.features),
        description=api_plan.description or "",
        monthly_revenue=estimate_monthly_revenue(api_plan.price, active_members, interval),
    )


def transform_membership_plans(payloads: Iterable[Mapping[str, Any]]) -> list[MembershipPlan]:
    """Convert payloads in order, failing on the first invalid one."""
    return [transform_membership_plan(payload, index) for index, payload in enumerate(payloads)]


def unwrap_api_envelope(body: Any) -> list[dict[str, Any]]:
    """
    Extract the plan list from a backend response body.

    The backend wraps lists as {"success": bool, "data": [...]}; an
    unsuccessful envelope yields an empty list. A bare list is returned as is.
    """
    if isinstance(body, list):
        return body
    if not isinstance(body, Mapping):
        raise InvalidRecordError(
            f"Response body must be an object or list, got {type(body).__name__}",
            code="INVALID_ENVELOPE",
        )

    try:
        envelope = ApiEnvelope.model_validate(dict(body))
    except ValidationError as e:
        raise InvalidRecordError(
            f"Invalid response envelope: {e.errors()[0]['msg']}",
            code="INVALID_ENVELOPE",
            field_name=_first_error_field(e),
        ) from e

    if not envelope.success:
        logger.info("Plan list envelope not successful: %s", envelope.message or "no message")
        return []
    return envelope.data
