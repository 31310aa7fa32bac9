"""
Plan stats component port definitions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import MembershipPlan


class PlanSourcePort(Protocol):
    """
    Supplier of plan records.

    Implementations fetch and validate plan data (API export, fixture file,
    state store) before handing it to the aggregator.
    """

    def list_plans(self) -> Sequence[MembershipPlan]:
        """Return all plans in display order."""
        ...
