"""
JSON file plan source tests.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest

from membership_dashboard.adapters.json_plans import JsonFilePlanSource
from membership_dashboard.components.plan_stats import (
    InvalidRecordError,
    LoadPlanStatsInput,
    PlanStatsMemo,
    run_load_and_compute,
)


def test_reads_envelope(plans_file: Path) -> None:
    plans = JsonFilePlanSource(plans_file).list_plans()
    assert [p.name for p in plans] == ["Basic", "Premium", "Annual"]
    assert plans[2].duration_unit == "years"
    assert plans[2].monthly_revenue == Decimal("50000")


def test_reads_bare_list(tmp_path: Path, sample_payloads: list[dict[str, Any]]) -> None:
    path = tmp_path / "bare.json"
    path.write_text(json.dumps(sample_payloads), encoding="utf-8")
    assert len(JsonFilePlanSource(path).list_plans()) == 3


def test_unsuccessful_envelope_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "failed.json"
    path.write_text(json.dumps({"success": False, "message": "maintenance"}), encoding="utf-8")
    assert JsonFilePlanSource(path).list_plans() == []


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        JsonFilePlanSource(tmp_path / "missing.json").list_plans()


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidRecordError) as exc_info:
        JsonFilePlanSource(path).list_plans()
    assert exc_info.value.code == "INVALID_JSON"


def test_stats_from_file(plans_file: Path) -> None:
    out = run_load_and_compute(LoadPlanStatsInput(), source=JsonFilePlanSource(plans_file))
    summary = out.summary
    assert summary.total_plans == 3
    assert summary.total_active_members == 105
    assert summary.monthly_revenue == Decimal("680000")
    assert summary.estimated_monthly_revenue == Decimal("130000")
    assert summary.most_popular_plan.name == "Premium"


def test_reread_file_is_recomputed_with_identity_memo(plans_file: Path) -> None:
    source = JsonFilePlanSource(plans_file)
    memo = PlanStatsMemo(key="identity")
    run_load_and_compute(LoadPlanStatsInput(), source=source, memo=memo)
    out = run_load_and_compute(LoadPlanStatsInput(), source=source, memo=memo)
    # Each read builds new plan objects
    assert not out.from_cache


def test_reread_file_hits_structural_memo(plans_file: Path) -> None:
    source = JsonFilePlanSource(plans_file)
    memo = PlanStatsMemo(key="structural")
    run_load_and_compute(LoadPlanStatsInput(), source=source, memo=memo)
    out = run_load_and_compute(LoadPlanStatsInput(), source=source, memo=memo)
    assert out.from_cache
    assert out.summary.most_popular_plan.name == "Premium"


def test_edited_file_is_not_served_stale(plans_file: Path, sample_payloads: list[dict[str, Any]]) -> None:
    source = JsonFilePlanSource(plans_file)
    memo = PlanStatsMemo(key="structural")
    run_load_and_compute(LoadPlanStatsInput(), source=source, memo=memo)

    sample_payloads[0]["activeMembersCount"] = 100
    plans_file.write_text(json.dumps({"success": True, "data": sample_payloads}), encoding="utf-8")

    out = run_load_and_compute(LoadPlanStatsInput(), source=source, memo=memo)
    assert not out.from_cache
    assert out.summary.most_popular_plan.name == "Basic"
    assert out.summary.total_active_members == 180
