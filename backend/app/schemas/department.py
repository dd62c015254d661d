from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .employee import EmployeeRead


class DepartmentBase(BaseModel):
    name: str
    description: Optional[str] = None
    parent_id: Optional[UUID] = None
    head_id: Optional[UUID] = None


class DepartmentCreate(DepartmentBase):
    pass


class DepartmentUpdate(BaseModel):
    """Partial update; only fields present in the request body are applied."""

    name: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[UUID] = None
    head_id: Optional[UUID] = None


class DepartmentRead(DepartmentBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    member_count: int = 0


class DepartmentMember(BaseModel):
    """Minimal employee projection shown inside the org chart."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    employee_id: str
    first_name: str
    last_name: str
    position: str


class DepartmentNode(DepartmentRead):
    children: List["DepartmentNode"] = Field(default_factory=list)
    employees: List[DepartmentMember] = Field(default_factory=list)
    depth: int = 0
    path: List[UUID] = Field(default_factory=list)
    path_names: List[str] = Field(default_factory=list)


class DepartmentAssignmentRequest(BaseModel):
    employee_ids: List[str]


class DepartmentAssignmentResponse(BaseModel):
    department: DepartmentRead
    employees: List[EmployeeRead]
