"""Derived analytics models (never persisted)."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChartPoint(BaseModel):
    name: str
    value: int | float


class ChartSlice(ChartPoint):
    """Chart point plus its share of the whole, in percent."""

    percentage: float = Field(..., ge=0)


class Summary(BaseModel):
    total: int
    active_count: int
    active_percentage: int = Field(..., ge=0, le=100)
    department_count: int
    average_salary: float
    status_counts: dict[str, int] = {}


class DashboardCharts(BaseModel):
    departments: list[ChartSlice]
    statuses: list[ChartSlice]
    top_positions: list[ChartSlice]
    top_departments: list[ChartSlice]
    salary_by_department: list[ChartPoint]


class Tenure(BaseModel):
    days: int
    months: int
    years: int
