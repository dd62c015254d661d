from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Index, func
from sqlmodel import Field, SQLModel

from app.models.timestamps import utc_now


class Department(SQLModel, table=True):
    """Organizational unit; departments form a forest through parent_id."""

    __tablename__ = "departments"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=500)
    parent_id: Optional[UUID] = Field(
        default=None, foreign_key="departments.id", nullable=True, index=True
    )
    # Checked against employees at write time only, no FK so that the
    # departments <-> employees tables stay free of a reference cycle
    head_id: Optional[UUID] = Field(default=None, nullable=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)
    updated_at: datetime = Field(default_factory=utc_now, nullable=False)

    def touch(self) -> None:
        """Update timestamp."""
        self.updated_at = utc_now()


Index("uq_departments_name_lower", func.lower(Department.name), unique=True)
