#!/usr/bin/env python3
"""Inspect, export or reseed the employee storage slot.

Run from the backend/ directory:

    python3 scripts/manage_store.py summary [--verbose]
    python3 scripts/manage_store.py export --output employees.json
    python3 scripts/manage_store.py reset [--dry-run]

Uses the same STORAGE_* settings as the API, so point STORAGE_PATH at the
file the running server uses.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from staffboard.core.config import Settings  # noqa: E402
from staffboard.services.analytics import build_dashboard, summarize  # noqa: E402
from staffboard.services.employee_store import EmployeeStore  # noqa: E402

logger = logging.getLogger(__name__)


def export_records(store: EmployeeStore) -> list[dict]:
    return [employee.model_dump(by_alias=True) for employee in store.list()]


def log_summary(store: EmployeeStore) -> None:
    employees = store.list()
    summary = summarize(employees)
    charts = build_dashboard(employees)

    logger.info("Employees: %d (%d active, %d%%)", summary.total, summary.active_count, summary.active_percentage)
    logger.info("Departments: %d", summary.department_count)
    logger.info("Average salary: %.2f", summary.average_salary)
    for point in charts.departments:
        logger.info("  %-20s %3d  (%.1f%%)", point.name, point.value, point.percentage)
    for point in charts.salary_by_department:
        logger.debug("  avg salary %-20s %d", point.name, point.value)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inspect, export or reseed the employee storage slot",
    )
    parser.add_argument(
        "command",
        choices=("summary", "export", "reset"),
        help="summary: log headline numbers; export: dump records as JSON; reset: restore the seed records",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Export destination (default: stdout)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="With reset: report what would be replaced without writing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace, settings: Settings | None = None) -> int:
    settings = settings or Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    # Only a real reset may write; the other commands seed a missing slot in memory.
    writes = args.command == "reset" and not args.dry_run
    store = EmployeeStore.from_settings(settings, persist_seed=writes)

    if args.command == "summary":
        log_summary(store)
    elif args.command == "export":
        payload = json.dumps(export_records(store), ensure_ascii=False, indent=2)
        if args.output is None:
            sys.stdout.write(payload + "\n")
        else:
            args.output.write_text(payload + "\n", encoding="utf-8")
            logger.info("Exported %d employees to %s", len(store.list()), args.output)
    elif args.command == "reset":
        if args.dry_run:
            logger.info("[DRY RUN] Would replace %d employees with %d seed records", len(store.list()), len(store.seed))
            return 0
        replaced = len(store.list())
        store.reset()
        logger.info("Replaced %d employees with %d seed records", replaced, len(store.seed))
    return 0


def main() -> None:
    args = parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
