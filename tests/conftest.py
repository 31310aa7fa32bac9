import json
from pathlib import Path
from typing import Any

import pytest

SAMPLE_PLANS: list[dict[str, Any]] = [
    {
        "id": 1,
        "planName": "Basic",
        "price": "800.00",
        "activeMembersCount": 25,
        "planPeriod": 1,
        "planInterval": "months",
        "features": ["Gym access"],
        "description": "Weekday access",
    },
    {
        "id": 2,
        "planName": "Premium",
        "price": "1500.00",
        "activeMembersCount": 40,
        "planPeriod": 1,
        "planInterval": "months",
        "features": ["Gym access", "Classes", "Locker"],
        "description": None,
    },
    {
        "id": 3,
        "planName": "Annual",
        "price": "15000.00",
        "activeMembersCount": 40,
        "planPeriod": 1,
        "planInterval": "years",
        "features": None,
    },
]


@pytest.fixture
def sample_payloads() -> list[dict[str, Any]]:
    return [dict(p) for p in SAMPLE_PLANS]


@pytest.fixture
def plans_file(tmp_path: Path, sample_payloads: list[dict[str, Any]]) -> Path:
    """Saved membership-plans API response in the backend envelope."""
    path = tmp_path / "plans.json"
    path.write_text(json.dumps({"success": True, "data": sample_payloads}), encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "dashboard.yaml"
    path.write_text(
        "api:\n"
        "  base_url: https://gym.example.com/api/\n"
        "stats:\n"
        "  memo_key: identity\n"
        "pagination:\n"
        "  per_page: 2\n",
        encoding="utf-8",
    )
    return path
