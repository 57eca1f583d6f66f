"""Employee models.

Attributes are snake_case; the persisted and wire format uses the camelCase
keys the dashboard frontend keeps in browser storage (``firstName``, ``hireDate``, ...).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

STATUS_ACTIVE = "Active"
STATUS_VACATION = "Vacation"
STATUS_LEAVE = "Leave"
STATUS_INACTIVE = "Inactive"

STATUSES: tuple[str, ...] = (STATUS_ACTIVE, STATUS_VACATION, STATUS_LEAVE, STATUS_INACTIVE)

DEPARTMENTS: tuple[str, ...] = (
    "Technology",
    "Design",
    "Marketing",
    "Sales",
    "Human Resources",
    "Finance",
    "Management",
)

_EMAIL_PATTERN = r"^\S+@\S+\.\S+$"

_TEXT_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "position",
    "department",
    "salary",
    "hire_date",
    "status",
    "address",
    "emergency_contact",
    "emergency_phone",
    "notes",
)


def _to_text(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int | float):
        return str(value)
    return value


class EmployeeFields(BaseModel):
    """Every employee field except the id.

    Accepts anything string-shaped: null becomes the field default and numbers become text.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    position: str = ""
    department: str = ""
    salary: str = ""
    hire_date: str = ""
    status: str = STATUS_ACTIVE
    address: str = ""
    emergency_contact: str = ""
    emergency_phone: str = ""
    notes: str = ""

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name == "status":
            return STATUS_ACTIVE
        return _to_text(value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Employee(EmployeeFields):
    """A stored employee record."""

    id: str


class EmployeeCreate(EmployeeFields):
    """Request body for new employees, with the form's required fields."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=_EMAIL_PATTERN)
    position: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    hire_date: str = Field(..., min_length=1)

    @field_validator("hire_date")
    @classmethod
    def _check_hire_date(cls, value: str) -> str:
        date.fromisoformat(value)
        return value


class EmployeeUpdate(BaseModel):
    """Partial update. Only fields present in the request are applied."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str | None = Field(None, min_length=1)
    last_name: str | None = Field(None, min_length=1)
    email: str | None = Field(None, pattern=_EMAIL_PATTERN)
    phone: str | None = None
    position: str | None = Field(None, min_length=1)
    department: str | None = Field(None, min_length=1)
    salary: str | None = None
    hire_date: str | None = Field(None, min_length=1)
    status: str | None = None
    address: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    notes: str | None = None

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return None if value is None else _to_text(value)

    @field_validator("hire_date")
    @classmethod
    def _check_hire_date(cls, value: str | None) -> str | None:
        if value is not None:
            date.fromisoformat(value)
        return value

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class EmployeeDetail(Employee):
    """Employee plus derived, non-persisted values."""

    tenure: str
