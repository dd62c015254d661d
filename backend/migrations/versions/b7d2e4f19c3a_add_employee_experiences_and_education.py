"""add employee experiences and education tables

Revision ID: b7d2e4f19c3a
Revises: a1f3c9d2e7b4
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "b7d2e4f19c3a"
down_revision: Union[str, None] = "a1f3c9d2e7b4"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employee_experiences",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("employee_id", sa.Uuid(), nullable=False),
        sa.Column("company", sa.String(length=255), nullable=False),
        sa.Column("position", sa.String(length=255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_employee_experiences_id"), "employee_experiences", ["id"], unique=False)
    op.create_index(
        op.f("ix_employee_experiences_employee_id"),
        "employee_experiences",
        ["employee_id"],
        unique=False,
    )

    op.create_table(
        "employee_education",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("employee_id", sa.Uuid(), nullable=False),
        sa.Column("institution", sa.String(length=255), nullable=False),
        sa.Column("degree", sa.String(length=255), nullable=False),
        sa.Column("field_of_study", sa.String(length=255), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_employee_education_id"), "employee_education", ["id"], unique=False)
    op.create_index(
        op.f("ix_employee_education_employee_id"),
        "employee_education",
        ["employee_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_employee_education_employee_id"), table_name="employee_education")
    op.drop_index(op.f("ix_employee_education_id"), table_name="employee_education")
    op.drop_table("employee_education")
    op.drop_index(op.f("ix_employee_experiences_employee_id"), table_name="employee_experiences")
    op.drop_index(op.f("ix_employee_experiences_id"), table_name="employee_experiences")
    op.drop_table("employee_experiences")
