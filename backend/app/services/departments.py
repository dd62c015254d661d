"""
Department persistence and hierarchy integrity.

Departments form a forest: every write that sets parent_id walks the
proposed parent's ancestor chain first so that no department can become
its own ancestor. Functions here flush or commit on the caller's session;
ensure_department_by_name only flushes so it can run inside a larger
employee write.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, update

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models import Department, Employee

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENT_NAME = "Unassigned"
DEFAULT_DEPARTMENT_DESCRIPTION = "Employees without an assigned department"

UPDATABLE_FIELDS = ("name", "description", "parent_id", "head_id")


def is_default_department(department: Department) -> bool:
    return department.name.strip().lower() == DEFAULT_DEPARTMENT_NAME.lower()


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Department name is required")
    return cleaned


def find_department_by_name(session: Session, name: str) -> Department | None:
    """Case-insensitive lookup by name."""
    return session.exec(
        select(Department).where(func.lower(Department.name) == name.strip().lower())
    ).first()


def get_department(session: Session, department_id: UUID) -> Department:
    department = session.get(Department, department_id)
    if not department:
        raise NotFoundError("Department not found")
    return department


def ensure_department_by_name(
    session: Session, name: str, description: Optional[str] = None
) -> Department:
    """
    Return the department with this name, creating it when missing.

    The new row is flushed, not committed. Two requests racing to create the
    same name both miss the lookup; the loser's insert hits the unique index,
    its transaction is rolled back and the lookup runs once more.
    """
    cleaned = _clean_name(name)
    existing = find_department_by_name(session, cleaned)
    if existing:
        return existing

    department = Department(name=cleaned, description=description)
    session.add(department)
    try:
        session.flush()
    except IntegrityError:
        session.rollback()
        existing = find_department_by_name(session, cleaned)
        if existing is None:
            raise
        return existing

    logger.info("Created department %s (%s) on first use", department.name, department.id)
    return department


def _ensure_unique_name(
    session: Session, name: str, exclude_id: Optional[UUID] = None
) -> None:
    existing = find_department_by_name(session, name)
    if existing and existing.id != exclude_id:
        raise ValidationError("Department with this name already exists")


def _ensure_head_exists(session: Session, head_id: UUID) -> None:
    if not session.get(Employee, head_id):
        raise ValidationError("Department head not found")


def ensure_no_cycle(session: Session, department_id: UUID, parent_id: UUID) -> None:
    """
    Reject reparenting department_id under parent_id when that would loop.

    The recursive query climbs from parent_id to the root. UNION drops
    repeated rows, so the walk also stops on chains that already loop.
    """
    if parent_id == department_id:
        raise ValidationError("Department cannot be its own parent")

    ancestors = (
        select(Department.id, Department.parent_id)
        .where(Department.id == parent_id)
        .cte("ancestors", recursive=True)
    )
    ancestors = ancestors.union(
        select(Department.id, Department.parent_id).join(
            ancestors, Department.id == ancestors.c.parent_id
        )
    )
    hit = session.exec(
        select(ancestors.c.id).where(ancestors.c.id == department_id)
    ).first()
    if hit is not None:
        raise ValidationError("Department cannot be moved under its own descendant")


def list_departments_with_member_counts(
    session: Session,
) -> List[Tuple[Department, int]]:
    """All departments ordered by name, each with its direct employee count."""
    statement = (
        select(Department, func.count(Employee.id))
        .join(Employee, Employee.department_id == Department.id, isouter=True)
        .group_by(Department.id)
        .order_by(Department.name)
    )
    return [(department, count) for department, count in session.exec(statement).all()]


def count_members(session: Session, department_id: UUID) -> int:
    return session.exec(
        select(func.count(Employee.id)).where(Employee.department_id == department_id)
    ).one()


def create_department(
    session: Session,
    *,
    name: str,
    description: Optional[str] = None,
    parent_id: Optional[UUID] = None,
    head_id: Optional[UUID] = None,
) -> Department:
    cleaned = _clean_name(name)
    _ensure_unique_name(session, cleaned)
    if parent_id:
        get_department(session, parent_id)
    if head_id:
        _ensure_head_exists(session, head_id)

    department = Department(
        name=cleaned,
        description=description,
        parent_id=parent_id,
        head_id=head_id,
    )
    session.add(department)
    session.commit()
    session.refresh(department)
    logger.info("Created department %s (%s)", department.name, department.id)
    return department


def update_department(
    session: Session, department_id: UUID, changes: dict[str, Any]
) -> Department:
    """Apply a partial update. Keys absent from `changes` are left untouched."""
    department = get_department(session, department_id)
    changes = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}

    if "name" in changes:
        changes["name"] = _clean_name(changes["name"])
        _ensure_unique_name(session, changes["name"], exclude_id=department.id)
    if changes.get("parent_id") and changes["parent_id"] != department.parent_id:
        get_department(session, changes["parent_id"])
        ensure_no_cycle(session, department.id, changes["parent_id"])
    if changes.get("head_id"):
        _ensure_head_exists(session, changes["head_id"])

    renamed = "name" in changes and changes["name"] != department.name
    for field, value in changes.items():
        setattr(department, field, value)
    department.touch()
    session.add(department)

    if renamed:
        # Keep the denormalized name on member rows in step
        session.exec(
            update(Employee)
            .where(Employee.department_id == department.id)
            .values(department=department.name)
        )

    session.commit()
    session.refresh(department)
    logger.info("Updated department %s (%s): %s", department.name, department.id, sorted(changes))
    return department


def delete_department(session: Session, department_id: UUID) -> None:
    department = get_department(session, department_id)
    if is_default_department(department):
        raise ValidationError("The default department cannot be deleted")

    child_id = session.exec(
        select(Department.id).where(Department.parent_id == department_id).limit(1)
    ).first()
    if child_id is not None:
        raise ConflictError("Department has child departments; move or delete them first")

    member_id = session.exec(
        select(Employee.id).where(Employee.department_id == department_id).limit(1)
    ).first()
    if member_id is not None:
        raise ConflictError("Department has assigned employees; reassign them first")

    session.delete(department)
    session.commit()
    logger.info("Deleted department %s (%s)", department.name, department_id)
