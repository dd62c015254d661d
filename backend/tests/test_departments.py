from uuid import uuid4

import pytest
from sqlmodel import Session, func, select

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models import Department, Employee
from app.services import departments
from app.services.departments import (
    create_department,
    delete_department,
    ensure_department_by_name,
    ensure_no_cycle,
    get_department,
    list_departments_with_member_counts,
    update_department,
)


def _department_count(session) -> int:
    return session.exec(select(func.count(Department.id))).one()


class TestCreateDepartment:
    def test_trims_name_and_persists_links(self, session, make_department, make_employee):
        parent = make_department("Operations")
        head = make_employee("Grace", "Hopper")

        department = create_department(
            session,
            name="  Logistics ",
            description="Warehouses",
            parent_id=parent.id,
            head_id=head.id,
        )

        assert department.name == "Logistics"
        assert department.parent_id == parent.id
        assert department.head_id == head.id
        assert get_department(session, department.id).description == "Warehouses"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_requires_name(self, session, name):
        with pytest.raises(ValidationError):
            create_department(session, name=name)
        assert _department_count(session) == 0

    def test_missing_parent_is_not_found(self, session):
        with pytest.raises(NotFoundError):
            create_department(session, name="Orphan", parent_id=uuid4())

    def test_unknown_head_is_rejected(self, session):
        with pytest.raises(ValidationError):
            create_department(session, name="Finance", head_id=uuid4())

    def test_duplicate_name_is_rejected_case_insensitively(self, session, make_department):
        make_department("Engineering")

        with pytest.raises(ValidationError):
            create_department(session, name="ENGINEERING")


class TestEnsureByName:
    def test_is_idempotent(self, session):
        first = ensure_department_by_name(session, "Engineering")
        second = ensure_department_by_name(session, "Engineering")
        session.commit()

        assert first.id == second.id
        assert _department_count(session) == 1

    def test_matches_existing_name_in_any_case(self, session, make_department):
        existing = make_department("Engineering")

        found = ensure_department_by_name(session, "  engineering ")

        assert found.id == existing.id
        assert _department_count(session) == 1

    def test_blank_name_is_rejected(self, session):
        with pytest.raises(ValidationError):
            ensure_department_by_name(session, "  ")

    def test_losing_a_concurrent_insert_returns_the_winner(
        self, session, engine, monkeypatch
    ):
        with Session(engine) as other:
            winner = Department(name="Engineering")
            winner_id = winner.id
            other.add(winner)
            other.commit()

        real_find = departments.find_department_by_name
        lookups = []

        def lookup_before_commit_was_visible(session, name):
            lookups.append(name)
            if len(lookups) == 1:
                return None
            return real_find(session, name)

        monkeypatch.setattr(
            departments, "find_department_by_name", lookup_before_commit_was_visible
        )

        found = ensure_department_by_name(session, "engineering")

        assert found.id == winner_id
        assert len(lookups) == 2
        assert _department_count(session) == 1


class TestFetchById:
    def test_missing_department(self, session):
        with pytest.raises(NotFoundError):
            get_department(session, uuid4())


class TestUpdateDepartment:
    def test_self_parent_is_rejected(self, session, make_department):
        department = make_department("Sales")

        with pytest.raises(ValidationError):
            update_department(session, department.id, {"parent_id": department.id})

    def test_moving_under_descendant_is_rejected(self, session, make_department):
        a = make_department("A")
        b = make_department("B", parent=a)
        c = make_department("C", parent=b)

        with pytest.raises(ValidationError):
            update_department(session, a.id, {"parent_id": c.id})

        session.refresh(a)
        assert a.parent_id is None

    def test_valid_reparent(self, session, make_department):
        a = make_department("A")
        b = make_department("B")
        c = make_department("C", parent=a)

        updated = update_department(session, c.id, {"parent_id": b.id})

        assert updated.parent_id == b.id

    def test_explicit_none_moves_to_root(self, session, make_department):
        root = make_department("Root")
        child = make_department("Child", parent=root)

        updated = update_department(session, child.id, {"parent_id": None})

        assert updated.parent_id is None

    def test_missing_parent_is_not_found(self, session, make_department):
        department = make_department("Sales")

        with pytest.raises(NotFoundError):
            update_department(session, department.id, {"parent_id": uuid4()})

    def test_missing_department_is_not_found(self, session):
        with pytest.raises(NotFoundError):
            update_department(session, uuid4(), {"name": "Ghost"})

    def test_blank_name_is_rejected(self, session, make_department):
        department = make_department("Sales")

        with pytest.raises(ValidationError):
            update_department(session, department.id, {"name": " "})

    def test_unknown_head_is_rejected(self, session, make_department):
        department = make_department("Sales")

        with pytest.raises(ValidationError):
            update_department(session, department.id, {"head_id": uuid4()})

    def test_partial_update_keeps_other_fields(self, session, make_department):
        parent = make_department("Parent")
        department = make_department("Sales", parent=parent, description="Field sales")

        updated = update_department(session, department.id, {"description": None})

        assert updated.description is None
        assert updated.parent_id == parent.id
        assert updated.name == "Sales"

    def test_rename_refreshes_updated_at_and_member_names(
        self, session, make_department, make_employee
    ):
        department = make_department("Sales")
        before = department.updated_at
        employee = make_employee("Ada", "Lovelace", department)

        updated = update_department(session, department.id, {"name": "Revenue"})

        session.refresh(employee)
        assert updated.updated_at >= before
        assert employee.department == "Revenue"
        assert employee.department_id == department.id


class TestCycleCheck:
    def test_terminates_on_already_looping_chain(self, session, make_department):
        a = make_department("A")
        b = make_department("B", parent=a)
        a.parent_id = b.id
        session.add(a)
        session.commit()
        outsider = make_department("Outsider")

        ensure_no_cycle(session, outsider.id, a.id)

    def test_unrelated_parent_is_accepted(self, session, make_department):
        a = make_department("A")
        b = make_department("B", parent=a)
        other = make_department("Other")

        ensure_no_cycle(session, other.id, b.id)


class TestDeleteDepartment:
    @pytest.mark.parametrize("name", ["Unassigned", "unassigned", "UNASSIGNED"])
    def test_default_department_is_protected(self, session, make_department, name):
        department = make_department(name)

        with pytest.raises(ValidationError):
            delete_department(session, department.id)

        assert get_department(session, department.id)

    def test_with_children_is_conflict(self, session, make_department):
        parent = make_department("Parent")
        make_department("Child", parent=parent)

        with pytest.raises(ConflictError):
            delete_department(session, parent.id)

    def test_with_members_is_conflict_until_reassigned(
        self, session, make_department, make_employee
    ):
        child_a = make_department("ChildA")
        child_b = make_department("ChildB")
        employee = make_employee("Eve", "Example", child_a)

        with pytest.raises(ConflictError):
            delete_department(session, child_a.id)

        employee.department_id = child_b.id
        employee.department = child_b.name
        session.add(employee)
        session.commit()

        delete_department(session, child_a.id)
        assert session.get(Department, child_a.id) is None

    def test_missing_department(self, session):
        with pytest.raises(NotFoundError):
            delete_department(session, uuid4())


def test_member_counts_are_direct_only(session, make_department, make_employee):
    root = make_department("Root")
    child = make_department("Child", parent=root)
    make_employee("Ann", "Archer", child)
    make_employee("Bob", "Baker", child)

    counts = {
        department.name: member_count
        for department, member_count in list_departments_with_member_counts(session)
    }

    assert counts == {"Child": 2, "Root": 0}
    assert session.exec(select(func.count(Employee.id))).one() == 2
