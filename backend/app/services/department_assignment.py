"""
Employee <-> department assignment.

Every employee belongs to exactly one department. Writes that touch the
department fields go through sync_department_association and then
ensure_department_assignment, which falls back to the "Unassigned"
department when nothing usable was supplied.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Tuple
from uuid import UUID

from sqlmodel import Session, select, update

from app.core.errors import NotFoundError, ValidationError
from app.models import Department, Employee, utc_now
from app.services.departments import (
    DEFAULT_DEPARTMENT_DESCRIPTION,
    DEFAULT_DEPARTMENT_NAME,
    ensure_department_by_name,
    get_department,
)

logger = logging.getLogger(__name__)

DEPARTMENT_FIELDS = ("department_id", "department")


def touches_department(payload: dict[str, Any]) -> bool:
    return any(field in payload for field in DEPARTMENT_FIELDS)


def ensure_default_department(session: Session) -> Department:
    return ensure_department_by_name(
        session, DEFAULT_DEPARTMENT_NAME, DEFAULT_DEPARTMENT_DESCRIPTION
    )


def _resolve_selected_department(session: Session, raw_id: str) -> Department:
    try:
        department_id = UUID(raw_id)
    except ValueError:
        raise ValidationError("Selected department not found") from None
    try:
        return get_department(session, department_id)
    except NotFoundError:
        raise ValidationError("Selected department not found") from None


def sync_department_association(session: Session, payload: dict[str, Any]) -> None:
    """
    Resolve department_id / department in an employee write payload, in place.

    An id wins over a name and both fields are rewritten from the stored
    department. A name alone is looked up or created. When both are blank,
    department_id is cleared and the name dropped so that
    ensure_department_assignment picks the default.
    """
    if not touches_department(payload):
        return

    raw_id = payload.get("department_id")
    raw_id = str(raw_id).strip() if raw_id is not None else ""
    name = payload.get("department")
    name = name.strip() if isinstance(name, str) else ""

    if raw_id:
        department = _resolve_selected_department(session, raw_id)
    elif name:
        department = ensure_department_by_name(session, name)
    else:
        payload["department_id"] = None
        payload.pop("department", None)
        return

    payload["department_id"] = department.id
    payload["department"] = department.name


def ensure_department_assignment(session: Session, payload: dict[str, Any]) -> None:
    if payload.get("department_id"):
        return
    department = ensure_default_department(session)
    payload["department_id"] = department.id
    payload["department"] = department.name


def _normalize_employee_ids(employee_ids: Iterable[Any]) -> List[str]:
    seen: dict[str, None] = {}
    for raw in employee_ids:
        value = str(raw).strip() if raw is not None else ""
        if value:
            seen.setdefault(value, None)
    return list(seen)


def _parse_uuids(values: Iterable[str]) -> List[UUID]:
    parsed = []
    for value in values:
        try:
            parsed.append(UUID(value))
        except ValueError:
            # Cannot match any row; treated like an unknown id
            continue
    return parsed


def assign_employees(
    session: Session, department_id: UUID, employee_ids: Iterable[Any]
) -> Tuple[Department, List[Employee]]:
    """
    Move employees into a department in one statement.

    Unknown ids are ignored as long as at least one employee matched.
    """
    department = get_department(session, department_id)
    unique_ids = _normalize_employee_ids(employee_ids)
    if not unique_ids:
        raise ValidationError("At least one employee id is required")

    ids = _parse_uuids(unique_ids)
    if not ids:
        raise NotFoundError("No matching employees found")

    result = session.exec(
        update(Employee)
        .where(Employee.id.in_(ids))
        .values(
            department_id=department.id,
            department=department.name,
            updated_at=utc_now(),
        )
    )
    if result.rowcount == 0:
        session.rollback()
        raise NotFoundError("No matching employees found")

    session.commit()
    employees = session.exec(
        select(Employee)
        .where(Employee.id.in_(ids))
        .order_by(Employee.last_name, Employee.first_name)
    ).all()
    session.refresh(department)
    logger.info(
        "Assigned %d employee(s) to department %s (%s)",
        len(employees),
        department.name,
        department.id,
    )
    return department, list(employees)


def unassign_employee(
    session: Session, department_id: UUID, employee_id: UUID
) -> Employee:
    """
    Move an employee from department_id back to the default department.

    The write only matches while the employee is still in department_id, so
    a missing employee and one that sits elsewhere look the same.
    """
    default_department = ensure_default_department(session)
    result = session.exec(
        update(Employee)
        .where(Employee.id == employee_id, Employee.department_id == department_id)
        .values(
            department_id=default_department.id,
            department=default_department.name,
            updated_at=utc_now(),
        )
    )
    if result.rowcount == 0:
        session.rollback()
        raise NotFoundError("Employee not found in this department")

    session.commit()
    employee = session.get(Employee, employee_id)
    session.refresh(employee)
    logger.info(
        "Moved employee %s from department %s to %s",
        employee_id,
        department_id,
        default_department.name,
    )
    return employee
