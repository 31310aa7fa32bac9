"""
Plan stats component - Dashboard summary over membership plans.

Computes total plans, total active members, projected monthly revenue and
the most popular plan from a list of plan records.

Invariants:
- I1: total_plans == 0 iff most_popular_plan is None
- I2: most_popular_plan is an element of the input (same object), with
  active_members >= every other plan's; first occurrence wins ties
- I3: inputs are never mutated; every summary is a fresh frozen value
- I4: a memoized summary is never served for a list it was not computed from
"""

from __future__ import annotations

import logging

from ._aggregate import (
    aggregate_plans,
    compute_plan_stats,
    ensure_valid_plans,
    plan_monthly_estimate,
    validate_plan_record,
)
from ._impl import PlanStatsMemo
from .models import (
    ComputePlanStatsInput,
    ComputePlanStatsOutput,
    LoadPlanStatsInput,
)
from .ports import PlanSourcePort

logger = logging.getLogger(__name__)

__all__ = [
    "aggregate_plans",
    "compute_plan_stats",
    "ensure_valid_plans",
    "plan_monthly_estimate",
    "validate_plan_record",
    "run",
    "run_compute",
    "run_load_and_compute",
]


# --- Component Entry Points ---


def run_compute(
    inp: ComputePlanStatsInput,
    *,
    memo: PlanStatsMemo | None = None,
) -> ComputePlanStatsOutput:
    """
    Compute stats for an already-loaded plan list.

    Args:
        inp: Input containing the plan list
        memo: Optional memo; without one the summary is always recomputed

    Returns:
        ComputePlanStatsOutput with the summary

    Raises:
        InvalidRecordError: if a record is malformed
    """
    if memo is None:
        return ComputePlanStatsOutput(summary=compute_plan_stats(inp.plans))

    summary, from_cache = memo.compute(inp.plans)
    return ComputePlanStatsOutput(summary=summary, from_cache=from_cache)


def run_load_and_compute(
    inp: LoadPlanStatsInput,
    *,
    source: PlanSourcePort,
    memo: PlanStatsMemo | None = None,
) -> ComputePlanStatsOutput:
    """
    Load plans from the source, then compute stats.

    Args:
        inp: Load options
        source: Plan source port
        memo: Optional memo, used only when inp.use_memo is set

    Returns:
        ComputePlanStatsOutput with the summary
    """
    plans = source.list_plans()
    logger.info("Loaded %d plans from source", len(plans))
    return run_compute(
        ComputePlanStatsInput(plans=plans),
        memo=memo if inp.use_memo else None,
    )


def run(
    inp: ComputePlanStatsInput | LoadPlanStatsInput,
    *,
    source: PlanSourcePort | None = None,
    memo: PlanStatsMemo | None = None,
) -> ComputePlanStatsOutput:
    """
    Main entry point for the plan stats component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ComputePlanStatsInput):
        return run_compute(inp, memo=memo)
    elif isinstance(inp, LoadPlanStatsInput):
        if source is None:
            raise ValueError("PlanSourcePort is required for load operations")
        return run_load_and_compute(inp, source=source, memo=memo)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
