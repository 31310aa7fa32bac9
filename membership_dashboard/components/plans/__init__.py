"""
Plans component - Backend plan payload validation and transformation.
"""

from .component import (
    CURRENCY_SYMBOL,
    estimate_monthly_revenue,
    format_currency,
    normalize_interval,
    transform_membership_plan,
    transform_membership_plans,
    unwrap_api_envelope,
)
from .models import ApiEnvelope, ApiMembershipPlan, PlanInterval

__all__ = [
    # Pure functions
    "estimate_monthly_revenue",
    "format_currency",
    "normalize_interval",
    "transform_membership_plan",
    "transform_membership_plans",
    "unwrap_api_envelope",
    "CURRENCY_SYMBOL",
    # Models
    "ApiEnvelope",
    "ApiMembershipPlan",
    "PlanInterval",
]
