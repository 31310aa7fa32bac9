"""
PlanStatsMemo - single-entry cache in front of the aggregation.

Holds the last (key, summary) pair and recomputes only when the incoming
plan list no longer matches the key.

Key disciplines:
- identity: same plan objects in the same order (the list object itself may
  differ). Catches appends, removals and element replacement, including
  in-place mutation of a list. Does not see field changes inside a mutable
  record.
- structural: same (id, price, active_members, monthly_revenue) per
  position, values and types. Catches field changes too, at the cost of
  reading every record on each call.

Records are validated on every call, hit or miss, so a malformed list raises
exactly as it would without the memo.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from threading import Lock
from typing import Any

from ._aggregate import aggregate_plans, ensure_valid_plans
from .models import MemoKey, MembershipPlan, PlanStatsSummary

logger = logging.getLogger(__name__)


def _field(plan: Any, name: str) -> tuple[type, Any]:
    value = getattr(plan, name, None)
    return type(value), value


def _structural_key(plans: Sequence[Any]) -> tuple[tuple[Any, ...], ...]:
    # Types are part of the key so 5 and 5.0 (or 1 and True) never collide
    return tuple(
        (
            getattr(p, "id", None),
            _field(p, "price"),
            _field(p, "active_members"),
            _field(p, "monthly_revenue"),
        )
        for p in plans
    )


class PlanStatsMemo:
    """
    Memoized plan statistics.

    Thread-safe: the cache entry is read and replaced under a lock.
    """

    def __init__(self, key: MemoKey = "identity") -> None:
        if key not in ("identity", "structural"):
            raise ValueError(f"Unknown memo key discipline: {key!r}")
        self.key = key
        self._lock = Lock()
        self._last_items: tuple[Any, ...] | None = None
        self._last_key: tuple[Any, ...] | None = None
        self._last_summary: PlanStatsSummary | None = None
        self._last_best_index: int | None = None
        self.hits = 0
        self.misses = 0

    def _matches(self, items: tuple[Any, ...]) -> bool:
        if self._last_items is None:
            return False
        if self.key == "identity":
            return len(items) == len(self._last_items) and all(
                a is b for a, b in zip(items, self._last_items)
            )
        return _structural_key(items) == self._last_key

    def compute(self, plans: Sequence[MembershipPlan]) -> tuple[PlanStatsSummary, bool]:
        """
        Return the summary for plans and whether it came from the cache.

        Raises:
            InvalidRecordError: on a malformed record (nothing is cached)
        """
        items = tuple(plans)
        ensure_valid_plans(items)

        with self._lock:
            if self._matches(items) and self._last_summary is not None:
                self.hits += 1
                summary = self._last_summary
                best = self._last_best_index
                # Structural hits may come from a list holding different objects;
                # most_popular_plan must alias the caller's own record.
                if best is not None and summary.most_popular_plan is not items[best]:
                    summary = dataclasses.replace(summary, most_popular_plan=items[best])
                logger.debug("Plan stats cache hit (%s key)", self.key)
                return summary, True

            summary, best = aggregate_plans(items)

            self._last_items = items
            self._last_key = _structural_key(items) if self.key == "structural" else None
            self._last_summary = summary
            self._last_best_index = best
            self.misses += 1
            logger.debug(
                "Plan stats recomputed for %d plans (%s key)", summary.total_plans, self.key
            )
            return summary, False

    def __call__(self, plans: Sequence[MembershipPlan]) -> PlanStatsSummary:
        summary, _ = self.compute(plans)
        return summary

    def clear(self) -> None:
        """Drop the cached entry."""
        with self._lock:
            self._last_items = None
            self._last_key = None
            self._last_summary = None
            self._last_best_index = None


_default_memo = PlanStatsMemo()


def memoized_plan_stats(plans: Sequence[MembershipPlan]) -> PlanStatsSummary:
    """Compute stats through the process-wide identity memo."""
    return _default_memo(plans)


def create_plan_stats_memo(key: MemoKey = "identity") -> PlanStatsMemo:
    """Factory for a plan stats memo."""
    return PlanStatsMemo(key=key)
