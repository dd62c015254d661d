"""
Seed a starter department hierarchy.

Existing departments are reused by name, so the script can be run again
after the structure has been edited by hand.

Usage:
    python scripts/seed_departments.py
"""

import logging
import sys
from pathlib import Path

# Make the backend package importable when run from the scripts directory
BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BASE_DIR))

from sqlmodel import Session

from app.db import engine, init_db
from app.services.department_assignment import ensure_default_department
from app.services.departments import ensure_department_by_name, find_department_by_name

logger = logging.getLogger("seed_departments")

# (name, parent name, description)
DEFAULT_STRUCTURE = [
    ("Head Office", None, "Executive management"),
    ("Human Resources", "Head Office", "Hiring, onboarding and people operations"),
    ("Finance", "Head Office", "Accounting and payroll"),
    ("Engineering", "Head Office", "Product development"),
    ("Platform", "Engineering", "Infrastructure and internal tooling"),
    ("Applications", "Engineering", "Customer-facing software"),
]


def seed_departments(session: Session, structure=DEFAULT_STRUCTURE) -> int:
    """Create missing departments and link new ones to their parents."""
    created = 0
    by_name = {}
    for name, parent_name, description in structure:
        department = find_department_by_name(session, name)
        if department is None:
            department = ensure_department_by_name(session, name, description)
            if parent_name:
                department.parent_id = by_name[parent_name].id
                session.add(department)
            created += 1
        by_name[name] = department
    ensure_default_department(session)
    session.commit()
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    with Session(engine) as session:
        count = seed_departments(session)
    logger.info("Created %d department(s)", count)
