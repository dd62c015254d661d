"""Read-only org chart projection built from the flat departments table."""
from __future__ import annotations

import logging
from typing import Dict, List, Set
from uuid import UUID

from sqlmodel import Session, select

from app.models import Employee
from app.schemas import DepartmentMember, DepartmentNode, DepartmentRead
from app.services.departments import list_departments_with_member_counts

logger = logging.getLogger(__name__)


def _name_key(node: DepartmentNode) -> tuple[str, str]:
    return (node.name.casefold(), node.name)


def _member_key(member: DepartmentMember) -> tuple[str, str]:
    return (member.last_name.casefold(), member.first_name.casefold())


def _annotate(
    node: DepartmentNode, depth: int, path: List[UUID], path_names: List[str]
) -> None:
    node.depth = depth
    node.path = [*path, node.id]
    node.path_names = [*path_names, node.name]
    for child in node.children:
        _annotate(child, depth + 1, node.path, node.path_names)


def _mark_reachable(node: DepartmentNode, reached: Set[UUID]) -> None:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.id in reached:
            continue
        reached.add(current.id)
        stack.extend(current.children)


def _promote_unreachable(
    nodes: Dict[UUID, DepartmentNode], roots: List[DepartmentNode]
) -> None:
    """Cut parent links that close a loop so every department is shown once."""
    reached: Set[UUID] = set()
    for root in roots:
        _mark_reachable(root, reached)

    for node in sorted(nodes.values(), key=_name_key):
        if node.id in reached:
            continue
        parent = nodes[node.parent_id]
        parent.children = [child for child in parent.children if child is not node]
        roots.append(node)
        logger.warning(
            "Department %s (%s) is part of a parent_id loop; shown as a root",
            node.name,
            node.id,
        )
        _mark_reachable(node, reached)


def build_department_tree(session: Session) -> List[DepartmentNode]:
    """
    Build the department forest with per-node rosters, depth and path.

    Employees pointing at a department that no longer exists are skipped.
    Children and roots are ordered by name, rosters by last then first name.
    Stored data that loops through parent_id is broken up at the first
    department by name in each loop, which becomes a root.
    """
    nodes: Dict[UUID, DepartmentNode] = {}
    for department, member_count in list_departments_with_member_counts(session):
        base = DepartmentRead.model_validate(department)
        nodes[department.id] = DepartmentNode(
            **base.model_dump(exclude={"member_count"}),
            member_count=member_count,
        )

    members = session.exec(
        select(
            Employee.id,
            Employee.employee_id,
            Employee.first_name,
            Employee.last_name,
            Employee.position,
            Employee.department_id,
        )
        .where(Employee.department_id.is_not(None))
        .order_by(Employee.last_name, Employee.first_name)
    ).all()
    for row in members:
        node = nodes.get(row.department_id)
        if node is None:
            continue
        node.employees.append(
            DepartmentMember(
                id=row.id,
                employee_id=row.employee_id,
                first_name=row.first_name,
                last_name=row.last_name,
                position=row.position,
            )
        )

    roots: List[DepartmentNode] = []
    for node in nodes.values():
        node.employees.sort(key=_member_key)
        parent = nodes.get(node.parent_id) if node.parent_id else None
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent.children.append(node)

    _promote_unreachable(nodes, roots)

    for node in nodes.values():
        node.children.sort(key=_name_key)
    roots.sort(key=_name_key)

    for root in roots:
        _annotate(root, 0, [], [])
    return roots
