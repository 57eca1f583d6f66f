"""Employee store: the authoritative employee list and its durable mirror."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from staffboard.core.config import Settings
from staffboard.core.storage import KeyValueStorage, create_storage
from staffboard.models.employee import Employee, EmployeeFields, EmployeeUpdate

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "employees"

_employee_list = TypeAdapter(list[Employee])

SEED_EMPLOYEES: tuple[Employee, ...] = (
    Employee(
        id="1",
        first_name="Ana",
        last_name="García",
        email="ana.garcia@empresa.com",
        phone="+1 (555) 123-4567",
        position="Frontend Developer",
        department="Technology",
        salary="45000",
        hire_date="2023-01-15",
        status="Active",
        address="123 Main Street, Ciudad, Estado 12345",
        emergency_contact="Carlos García",
        emergency_phone="+1 (555) 987-6543",
        notes="React and TypeScript specialist. Great teamwork and communication.",
    ),
    Employee(
        id="2",
        first_name="Carlos",
        last_name="Rodríguez",
        email="carlos.rodriguez@empresa.com",
        phone="+1 (555) 234-5678",
        position="UX/UI Designer",
        department="Design",
        salary="42000",
        hire_date="2023-03-20",
        status="Active",
        address="456 Oak Avenue, Ciudad, Estado 12345",
        emergency_contact="María Rodríguez",
        emergency_phone="+1 (555) 876-5432",
        notes="Expert in interface design and user experience.",
    ),
    Employee(
        id="3",
        first_name="María",
        last_name="López",
        email="maria.lopez@empresa.com",
        phone="+1 (555) 345-6789",
        position="Project Manager",
        department="Management",
        salary="55000",
        hire_date="2022-08-10",
        status="Vacation",
        address="789 Pine Street, Ciudad, Estado 12345",
        emergency_contact="Juan López",
        emergency_phone="+1 (555) 765-4321",
        notes="Experienced leader with excellent project management skills.",
    ),
)


def _now_ms() -> int:
    return int(time.time() * 1000)


class EmployeeStore:
    """Owns the employee list; every mutation rewrites the whole list to storage.

    Single writer assumed: two stores on the same slot overwrite each other.
    With ``persist_seed=False`` a missing or malformed slot is seeded in memory only,
    so read-only callers never write.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = DEFAULT_STORAGE_KEY,
        seed: tuple[Employee, ...] = SEED_EMPLOYEES,
        persist_seed: bool = True,
    ) -> None:
        self.storage = storage
        self.key = key
        self.seed = tuple(seed)
        self.persist_seed = persist_seed
        self._employees: list[Employee] = []
        self._last_id = 0
        self._load()

    @classmethod
    def from_settings(cls, settings: Settings, persist_seed: bool = True) -> EmployeeStore:
        return cls(create_storage(settings), key=settings.EMPLOYEES_STORAGE_KEY, persist_seed=persist_seed)

    @property
    def backup_key(self) -> str:
        return f"{self.key}.backup"

    def _load(self) -> None:
        raw = self.storage.get_item(self.key)
        if raw is None:
            logger.info("No persisted employees under '%s' — seeding %d records", self.key, len(self.seed))
            self._seed()
            return

        try:
            self._employees = _employee_list.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Persisted employees under '%s' are malformed (%s) — reseeding", self.key, e)
            if self.persist_seed:
                self.storage.set_item(self.backup_key, raw)
                logger.warning("Kept the unreadable value under '%s'", self.backup_key)
            self._seed()
            return

        logger.info("Loaded %d employees from '%s'", len(self._employees), self.key)

    def _seed(self) -> None:
        if self.persist_seed:
            self.reset()
        else:
            self._employees = list(self.seed)

    def _commit(self, employees: list[Employee]) -> None:
        payload = _employee_list.dump_json(employees, by_alias=True).decode("utf-8")
        self.storage.set_item(self.key, payload)
        self._employees = employees

    def _next_id(self) -> str:
        taken = {e.id for e in self._employees}
        candidate = max(_now_ms(), self._last_id + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last_id = candidate
        return str(candidate)

    def _index_of(self, employee_id: str) -> int | None:
        for i, employee in enumerate(self._employees):
            if employee.id == employee_id:
                return i
        return None

    def list(self) -> tuple[Employee, ...]:
        return tuple(self._employees)

    def get(self, employee_id: str) -> Employee | None:
        index = self._index_of(employee_id)
        return None if index is None else self._employees[index]

    def find_by_email(self, email: str) -> Employee | None:
        wanted = email.lower()
        for employee in self._employees:
            if employee.email.lower() == wanted:
                return employee
        return None

    def add(self, data: EmployeeFields | Mapping[str, Any]) -> Employee:
        if isinstance(data, EmployeeFields):
            fields = data.model_dump(exclude={"id"})
        else:
            fields = {k: v for k, v in data.items() if k != "id"}

        employee = Employee.model_validate({**fields, "id": self._next_id()})
        self._commit([*self._employees, employee])
        logger.info("Added employee %s", employee.id)
        return employee

    def update(self, employee_id: str, partial: EmployeeUpdate | Mapping[str, Any]) -> None:
        index = self._index_of(employee_id)
        if index is None:
            logger.debug("Update ignored — employee %s not found", employee_id)
            return

        changes = partial.changes() if isinstance(partial, EmployeeUpdate) else dict(partial)
        changes.pop("id", None)
        if not changes:
            return

        current = self._employees[index]
        merged = current.model_dump()
        merged.update(changes)
        merged["id"] = current.id
        employees = list(self._employees)
        employees[index] = Employee.model_validate(merged)
        self._commit(employees)
        logger.info("Updated employee %s (%s)", employee_id, ", ".join(sorted(changes)))

    def delete(self, employee_id: str) -> None:
        index = self._index_of(employee_id)
        if index is None:
            logger.debug("Delete ignored — employee %s not found", employee_id)
            return

        employees = list(self._employees)
        del employees[index]
        self._commit(employees)
        logger.info("Deleted employee %s", employee_id)

    def reset(self) -> None:
        self._commit(list(self.seed))
