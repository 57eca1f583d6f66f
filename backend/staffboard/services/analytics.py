"""Chart and summary aggregations over an employee list.

Pure functions: they never touch the store, only the sequence they are given.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime
from typing import NamedTuple

from staffboard.models.analytics import ChartPoint, ChartSlice, DashboardCharts, Summary, Tenure
from staffboard.models.employee import STATUS_ACTIVE, Employee

UNSPECIFIED = "Unspecified"

TOP_POSITIONS = 6
TOP_DEPARTMENTS = 5

DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

_LEADING_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

KeySelector = str | Callable[[Employee], str]


class Bucket(NamedTuple):
    name: str
    value: float


def parse_salary(value: str | None) -> float:
    """Parse the leading number of ``value`` the way a browser parseFloat does.

    Anything without a leading number, or a non-finite result, counts as 0.
    """
    if not value:
        return 0.0
    match = _LEADING_NUMBER.match(value.strip())
    if not match:
        return 0.0
    number = float(match.group(0))
    return number if math.isfinite(number) else 0.0


def _selector(key: KeySelector) -> Callable[[Employee], str]:
    if callable(key):
        return key
    return lambda employee: getattr(employee, key)


def _label(raw: str | None) -> str:
    if raw is None:
        return UNSPECIFIED
    text = str(raw).strip()
    return text or UNSPECIFIED


def group_and_count(employees: Iterable[Employee], key: KeySelector) -> list[Bucket]:
    """Count employees per distinct key value, in first-seen order."""
    select = _selector(key)
    counts: dict[str, int] = {}
    for employee in employees:
        name = _label(select(employee))
        counts[name] = counts.get(name, 0) + 1
    return [Bucket(name, count) for name, count in counts.items()]


def top_n(employees: Iterable[Employee], key: KeySelector, n: int) -> list[Bucket]:
    """Largest buckets first; ties keep first-seen order (sorted() is stable)."""
    if n <= 0:
        return []
    buckets = group_and_count(employees, key)
    return sorted(buckets, key=lambda b: b.value, reverse=True)[:n]


def average_by_group(
    employees: Iterable[Employee],
    group_key: KeySelector = "department",
    value_key: KeySelector = "salary",
) -> list[Bucket]:
    select_group = _selector(group_key)
    select_value = _selector(value_key)
    totals: dict[str, float] = {}
    counts: dict[str, int] = {}
    for employee in employees:
        name = _label(select_group(employee))
        totals[name] = totals.get(name, 0.0) + parse_salary(select_value(employee))
        counts[name] = counts.get(name, 0) + 1
    return [Bucket(name, totals[name] / counts[name]) for name in totals]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def summarize(employees: Sequence[Employee]) -> Summary:
    total = len(employees)
    active = sum(1 for e in employees if e.status == STATUS_ACTIVE)
    departments = {_label(e.department) for e in employees}
    salary_total = sum(parse_salary(e.salary) for e in employees)

    return Summary(
        total=total,
        active_count=active,
        active_percentage=_round_half_up(active / total * 100) if total else 0,
        department_count=len(departments),
        average_salary=salary_total / total if total else 0.0,
        status_counts={b.name: int(b.value) for b in group_and_count(employees, "status")},
    )


def with_shares(buckets: Iterable[Bucket], total: int | float) -> list[ChartSlice]:
    """Attach each bucket's share of ``total`` as a percentage with one decimal."""
    slices: list[ChartSlice] = []
    for bucket in buckets:
        share = round(bucket.value / total * 100, 1) if total else 0.0
        slices.append(ChartSlice(name=bucket.name, value=bucket.value, percentage=share))
    return slices


def build_dashboard(employees: Sequence[Employee]) -> DashboardCharts:
    total = len(employees)
    salaries = [
        ChartPoint(name=b.name, value=_round_half_up(b.value))
        for b in average_by_group(employees, "department", "salary")
    ]
    return DashboardCharts(
        departments=with_shares(group_and_count(employees, "department"), total),
        statuses=with_shares(group_and_count(employees, "status"), total),
        top_positions=with_shares(top_n(employees, "position", TOP_POSITIONS), total),
        top_departments=with_shares(top_n(employees, "department", TOP_DEPARTMENTS), total),
        salary_by_department=salaries,
    )


def _to_datetime(value: str | date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return _to_datetime(date.fromisoformat(value))


def compute_tenure(hire_date: str | date | datetime, now: date | datetime | None = None) -> Tenure:
    """Elapsed whole days between hire date and now; partial days count as a full day."""
    start = _to_datetime(hire_date)
    end = _to_datetime(now if now is not None else datetime.now())  # noqa: DTZ005
    seconds = abs((end - start).total_seconds())
    days = math.ceil(seconds / 86400)
    months = days // DAYS_PER_MONTH
    return Tenure(days=days, months=months, years=months // MONTHS_PER_YEAR)


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_tenure(tenure: Tenure) -> str:
    if tenure.years >= 1:
        remainder = tenure.months % MONTHS_PER_YEAR
        return f"{_plural(tenure.years, 'año', 'años')}, {_plural(remainder, 'mes', 'meses')}"
    return _plural(tenure.months, "mes", "meses")


def _is_wildcard(value: str | None) -> bool:
    return value is None or value == "" or value == "all"


def filter_employees(
    employees: Iterable[Employee],
    search: str = "",
    department: str | None = None,
    status: str | None = None,
) -> list[Employee]:
    """Case-insensitive search over name, email and position plus exact filters."""
    needle = search.lower()
    results: list[Employee] = []
    for employee in employees:
        if needle and not (
            needle in employee.full_name.lower()
            or needle in employee.email.lower()
            or needle in employee.position.lower()
        ):
            continue
        if not _is_wildcard(department) and employee.department != department:
            continue
        if not _is_wildcard(status) and employee.status != status:
            continue
        results.append(employee)
    return results
