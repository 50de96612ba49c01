# (c) Copyright Datacraft, 2026
"""Employee schemas."""
import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

CPF_PATTERN = r"^\d{11}$"

# Surrounding whitespace is dropped, so a blank name is rejected
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class Employee(BaseModel):
	"""Employee model."""
	id: uuid.UUID
	name: str
	cpf: str
	rg: str | None = None
	department_id: uuid.UUID
	created_at: datetime | None = None
	updated_at: datetime | None = None

	model_config = ConfigDict(from_attributes=True)


class EmployeeBrief(BaseModel):
	"""Minimal employee reference, e.g. a department manager."""
	id: uuid.UUID
	name: str

	model_config = ConfigDict(from_attributes=True)


class EmployeeDetails(Employee):
	"""Employee with the name of their department's manager."""
	manager_name: str | None = None


class EmployeeCreate(BaseModel):
	"""Create employee request."""
	name: Name
	cpf: str = Field(..., pattern=CPF_PATTERN, description="11 digits, no punctuation")
	rg: str | None = Field(None, min_length=1, max_length=20)
	department_id: uuid.UUID

	model_config = ConfigDict(extra="forbid")


class EmployeeUpdate(BaseModel):
	"""Update employee request. Omitted fields are left unchanged."""
	name: Name | None = None
	cpf: str | None = Field(None, pattern=CPF_PATTERN)
	rg: str | None = Field(None, min_length=1, max_length=20)
	department_id: uuid.UUID | None = None

	model_config = ConfigDict(extra="forbid")


class EmployeeSearch(BaseModel):
	"""Filters and pagination for employee search."""
	name: str | None = None
	cpf: str | None = None
	rg: str | None = None
	department_id: uuid.UUID | None = None
	page_number: int = Field(1, ge=1)
	page_size: int = Field(10, ge=1, le=100)


class EmployeePage(BaseModel):
	items: list[Employee]
	total: int
	page_number: int
	page_size: int
