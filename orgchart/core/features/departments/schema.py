# (c) Copyright Datacraft, 2026
"""Department schemas."""
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from orgchart.core.features.employees.schema import EmployeeBrief, Name


class Department(BaseModel):
	"""Department model."""
	id: uuid.UUID
	name: str
	manager_id: uuid.UUID | None = None
	parent_id: uuid.UUID | None = None
	created_at: datetime | None = None
	updated_at: datetime | None = None

	model_config = ConfigDict(from_attributes=True)


class DepartmentCreate(BaseModel):
	"""Create department request."""
	name: Name
	manager_id: uuid.UUID
	parent_id: uuid.UUID | None = None

	model_config = ConfigDict(extra="forbid")


class DepartmentUpdate(BaseModel):
	"""Update department request. Omitted or null fields are left unchanged."""
	name: Name | None = None
	manager_id: uuid.UUID | None = None
	parent_id: uuid.UUID | None = None

	model_config = ConfigDict(extra="forbid")


class DepartmentTree(BaseModel):
	"""Department with its manager and the whole sub-department tree."""
	id: uuid.UUID
	name: str
	manager_id: uuid.UUID | None = None
	manager: EmployeeBrief | None = None
	parent_id: uuid.UUID | None = None
	created_at: datetime | None = None
	updated_at: datetime | None = None
	sub_departments: list["DepartmentTree"] = Field(default_factory=list)

	model_config = ConfigDict(from_attributes=True)


class DepartmentSearch(BaseModel):
	"""Filters and pagination for department search."""
	name: str | None = None
	manager_name: str | None = None
	parent_id: uuid.UUID | None = None
	page_number: int = Field(1, ge=1)
	page_size: int = Field(10, ge=1, le=100)


class DepartmentPage(BaseModel):
	items: list[Department]
	total: int
	page_number: int
	page_size: int


# Update forward references
DepartmentTree.model_rebuild()
