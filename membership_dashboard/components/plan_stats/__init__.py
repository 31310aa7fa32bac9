"""
Plan stats component - Membership plan summary statistics.
"""

from ._impl import PlanStatsMemo, create_plan_stats_memo, memoized_plan_stats
from .component import (
    aggregate_plans,
    compute_plan_stats,
    ensure_valid_plans,
    plan_monthly_estimate,
    run,
    run_compute,
    run_load_and_compute,
    validate_plan_record,
)
from .models import (
    EMPTY_SUMMARY,
    ComputePlanStatsInput,
    ComputePlanStatsOutput,
    InvalidRecordError,
    LoadPlanStatsInput,
    MembershipPlan,
    MemoKey,
    PlanStatsSummary,
    PlanStatsValidationError,
)
from .ports import PlanSourcePort

__all__ = [
    # Entry points
    "run",
    "run_compute",
    "run_load_and_compute",
    # Pure functions
    "aggregate_plans",
    "compute_plan_stats",
    "ensure_valid_plans",
    "plan_monthly_estimate",
    "validate_plan_record",
    # Memoization
    "PlanStatsMemo",
    "create_plan_stats_memo",
    "memoized_plan_stats",
    # Models
    "ComputePlanStatsInput",
    "ComputePlanStatsOutput",
    "LoadPlanStatsInput",
    "MembershipPlan",
    "MemoKey",
    "PlanStatsSummary",
    "PlanStatsValidationError",
    "InvalidRecordError",
    "EMPTY_SUMMARY",
    # Ports
    "PlanSourcePort",
]
