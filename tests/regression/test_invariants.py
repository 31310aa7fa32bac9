import random

import pytest

from membership_dashboard.components.plan_stats import (
    MembershipPlan,
    PlanStatsMemo,
    compute_plan_stats,
)

SEEDS = [3, 11, 2024, 31337]


def random_plans(rng: random.Random) -> list[MembershipPlan]:
    # Small member range so ties are common
    return [
        MembershipPlan(id=rng.randint(1, 5), price=rng.randint(0, 3000), active_members=rng.randint(0, 6))
        for _ in range(rng.randint(0, 25))
    ]


# --- I1: Empty iff no most popular plan ---
@pytest.mark.parametrize("seed", SEEDS)
def test_I1_empty_iff_no_most_popular(seed):
    """I1: total_plans == 0 exactly when most_popular_plan is None."""
    plans = random_plans(random.Random(seed))
    summary = compute_plan_stats(plans)
    assert (summary.total_plans == 0) == (summary.most_popular_plan is None)
    assert compute_plan_stats([]).most_popular_plan is None


# --- I2: Most popular is a maximal element of the input, first on ties ---
@pytest.mark.parametrize("seed", SEEDS)
def test_I2_most_popular_is_first_maximal_input_element(seed):
    """I2: most_popular_plan aliases the earliest plan with the highest member count."""
    plans = random_plans(random.Random(seed))
    summary = compute_plan_stats(plans)
    if not plans:
        return
    popular = summary.most_popular_plan
    assert any(popular is p for p in plans)
    assert all(popular.active_members >= p.active_members for p in plans)
    first_index = next(i for i, p in enumerate(plans) if p is popular)
    assert all(p.active_members < popular.active_members for p in plans[:first_index])


# --- I3: Purity ---
@pytest.mark.parametrize("seed", SEEDS)
def test_I3_inputs_untouched_and_results_equal(seed):
    """I3: Repeated computation is deterministic and leaves inputs unchanged."""
    plans = random_plans(random.Random(seed))
    snapshot = [(p.id, p.price, p.active_members) for p in plans]
    identities = [id(p) for p in plans]

    assert compute_plan_stats(plans) == compute_plan_stats(plans)
    assert [(p.id, p.price, p.active_members) for p in plans] == snapshot
    assert [id(p) for p in plans] == identities


# --- I4: No stale memo results ---
@pytest.mark.parametrize("key", ["identity", "structural"])
@pytest.mark.parametrize("seed", SEEDS)
def test_I4_memo_never_serves_stale_summary(key, seed):
    """I4: A memoized summary always matches a fresh computation of the current input."""
    rng = random.Random(seed)
    memo = PlanStatsMemo(key=key)
    plans = random_plans(rng)

    for _ in range(30):
        action = rng.choice(["same", "append", "pop", "replace", "new"])
        if action == "append":
            plans.append(MembershipPlan(id=99, price=rng.randint(0, 100), active_members=rng.randint(0, 9)))
        elif action == "pop" and plans:
            plans.pop(rng.randrange(len(plans)))
        elif action == "replace" and plans:
            i = rng.randrange(len(plans))
            plans[i] = MembershipPlan(id=plans[i].id, price=plans[i].price, active_members=rng.randint(0, 9))
        elif action == "new":
            plans = random_plans(rng)

        memoized = memo(plans)
        fresh = compute_plan_stats(plans)
        assert memoized.total_plans == fresh.total_plans
        assert memoized.total_active_members == fresh.total_active_members
        assert memoized.monthly_revenue == fresh.monthly_revenue
        assert memoized.estimated_monthly_revenue == fresh.estimated_monthly_revenue
        assert memoized.most_popular_plan is fresh.most_popular_plan
