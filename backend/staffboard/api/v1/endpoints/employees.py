from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from staffboard.core.dependencies import get_current_user, get_employee_store
from staffboard.core.storage import StorageError
from staffboard.models.auth import UserInfo
from staffboard.models.employee import Employee, EmployeeCreate, EmployeeDetail, EmployeeUpdate
from staffboard.services.analytics import compute_tenure, filter_employees, format_tenure
from staffboard.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _not_found(employee_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Employee with id '{employee_id}' not found",
    )


def _email_taken() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="An employee with this email already exists",
    )


def _storage_failed(action: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action} employee",
    )


def _tenure_label(hire_date: str) -> str:
    try:
        return format_tenure(compute_tenure(hire_date))
    except ValueError:
        return "N/A"


@router.get("", response_model=list[Employee])
async def list_employees(
    search: str = "",
    department: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    return filter_employees(store.list(), search=search, department=department, status=status_filter)


@router.get("/{employee_id}", response_model=EmployeeDetail)
async def get_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    employee = store.get(employee_id)
    if employee is None:
        raise _not_found(employee_id)

    return EmployeeDetail(**employee.model_dump(), tenure=_tenure_label(employee.hire_date))


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: EmployeeCreate,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    if store.find_by_email(body.email) is not None:
        raise _email_taken()

    try:
        return store.add(body)
    except StorageError as err:
        logger.exception("Failed to create employee")
        raise _storage_failed("create") from err


@router.patch("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    if store.get(employee_id) is None:
        raise _not_found(employee_id)

    changes = body.changes()
    if "email" in changes:
        owner = store.find_by_email(changes["email"])
        if owner is not None and owner.id != employee_id:
            raise _email_taken()

    try:
        store.update(employee_id, changes)
    except StorageError as err:
        logger.exception("Failed to update employee %s", employee_id)
        raise _storage_failed("update") from err

    return store.get(employee_id)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    if store.get(employee_id) is None:
        raise _not_found(employee_id)

    try:
        store.delete(employee_id)
    except StorageError as err:
        logger.exception("Failed to delete employee %s", employee_id)
        raise _storage_failed("delete") from err

    return Response(status_code=status.HTTP_204_NO_CONTENT)
