import argparse
import logging
import sys
from pathlib import Path

from membership_dashboard.adapters.json_plans import JsonFilePlanSource
from membership_dashboard.components.pagination import PaginationError, paginate
from membership_dashboard.components.plan_stats import (
    InvalidRecordError,
    LoadPlanStatsInput,
    PlanStatsSummary,
    create_plan_stats_memo,
    run_load_and_compute,
)
from membership_dashboard.components.plans import format_currency
from membership_dashboard.config import DashboardConfig, load_config_or_default, plans_endpoint

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

CONFIG_PATH = "dashboard.yaml"


def get_config(path: str) -> DashboardConfig:
    try:
        config = load_config_or_default(Path(path))
    except ValueError as e:
        logger.error(f"Config {path} is invalid: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.logging.level)
    return config


def format_summary(summary: PlanStatsSummary) -> list[str]:
    popular = summary.most_popular_plan
    popular_name = (popular.name or str(popular.id)) if popular is not None else "N/A"
    return [
        f"Total Plans: {summary.total_plans}",
        f"Active Members: {summary.total_active_members}",
        f"Est. Monthly Revenue: {format_currency(summary.estimated_monthly_revenue)}",
        f"Billed per Cycle: {format_currency(summary.monthly_revenue)}",
        f"Most Popular Plan: {popular_name}",
    ]


def handle_stats(config: DashboardConfig, args: argparse.Namespace) -> None:
    # One memo for the whole run: unchanged snapshots reuse the previous summary
    memo = create_plan_stats_memo(config.stats.memo_key)
    show_headers = len(args.plans_files) > 1

    for index, plans_file in enumerate(args.plans_files):
        source = JsonFilePlanSource(plans_file)
        out = run_load_and_compute(LoadPlanStatsInput(), source=source, memo=memo)
        if show_headers:
            if index > 0:
                print()
            print(f"== {plans_file}")
        for line in format_summary(out.summary):
            print(line)


def handle_list(config: DashboardConfig, args: argparse.Namespace) -> None:
    plans = JsonFilePlanSource(args.plans_file).list_plans()
    per_page = args.per_page if args.per_page is not None else config.pagination.per_page
    page_items, window = paginate(plans, per_page, args.page)

    for plan in page_items:
        print(
            f"{plan.id}\t{plan.name}\t{format_currency(plan.price)}"
            f"\t{plan.active_members} members"
        )
    print(window.label)
    if window.should_display:
        print(window.page_label)


def handle_config(config: DashboardConfig, args: argparse.Namespace) -> None:
    print(f"Plans endpoint: {plans_endpoint(config)}")
    print(f"Stats memo key: {config.stats.memo_key}")
    print(f"Page size: {config.pagination.per_page}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Membership Dashboard CLI")
    parser.add_argument("--config", default=CONFIG_PATH, help="Path to dashboard.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # stats
    stats_parser = subparsers.add_parser("stats", help="Summarize membership plans")
    stats_parser.add_argument(
        "plans_files", nargs="+", help="Saved membership-plans API responses (JSON), in order"
    )

    # list
    list_parser = subparsers.add_parser("list", help="List one page of membership plans")
    list_parser.add_argument("plans_file", help="Saved membership-plans API response (JSON)")
    list_parser.add_argument("--page", type=int, default=1, help="Page number (1-based)")
    list_parser.add_argument("--per-page", type=int, default=None, help="Override page size")

    # config
    subparsers.add_parser("config", help="Show resolved configuration")

    args = parser.parse_args(argv)

    config = get_config(args.config)

    try:
        if args.command == "stats":
            handle_stats(config, args)
        elif args.command == "list":
            handle_list(config, args)
        elif args.command == "config":
            handle_config(config, args)
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except InvalidRecordError as e:
        location = f" (plan {e.index})" if e.index is not None else ""
        logger.error(f"Invalid plan data{location}: {e.message}")
        sys.exit(1)
    except PaginationError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
