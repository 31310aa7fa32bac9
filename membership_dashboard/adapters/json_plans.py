import json
import logging
from pathlib import Path

from membership_dashboard.components.plan_stats import InvalidRecordError, MembershipPlan
from membership_dashboard.components.plans import transform_membership_plans, unwrap_api_envelope

logger = logging.getLogger(__name__)


class JsonFilePlanSource:
    """
    Plan source backed by a saved membership-plans API response.

    Accepts either the {"success": ..., "data": [...]} envelope or a bare
    list of plan payloads. The file is re-read on every call so edits show up
    on the next refresh.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def list_plans(self) -> list[MembershipPlan]:
        if not self.path.exists():
            raise FileNotFoundError(f"Plans file not found: {self.path}")

        with open(self.path, encoding="utf-8") as f:
            try:
                body = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidRecordError(
                    f"Plans file is not valid JSON: {e}", code="INVALID_JSON"
                ) from e

        plans = transform_membership_plans(unwrap_api_envelope(body))
        logger.debug("Read %d plans from %s", len(plans), self.path)
        return plans
