# (c) Copyright Datacraft, 2026
"""Employees API router."""
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from orgchart.core.db.engine import get_db

from .dependencies import get_employee_service
from .schema import (
	Employee,
	EmployeeCreate,
	EmployeeDetails,
	EmployeePage,
	EmployeeSearch,
	EmployeeUpdate,
)
from .service import EmployeeService

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
	data: EmployeeCreate,
	service: Annotated[EmployeeService, Depends(get_employee_service)],
	session: Annotated[AsyncSession, Depends(get_db)],
):
	"""Create a new employee."""
	employee = await service.create_employee(
		name=data.name,
		cpf=data.cpf,
		rg=data.rg,
		department_id=data.department_id,
	)
	await session.commit()

	return Employee.model_validate(employee)


@router.post("/search", response_model=EmployeePage)
async def search_employees(
	service: Annotated[EmployeeService, Depends(get_employee_service)],
	data: EmployeeSearch | None = None,
):
	"""List employees with filters and pagination."""
	data = data or EmployeeSearch()
	employees, total = await service.list_employees(
		name=data.name,
		cpf=data.cpf,
		rg=data.rg,
		department_id=data.department_id,
		page_number=data.page_number,
		page_size=data.page_size,
	)

	return EmployeePage(
		items=[Employee.model_validate(e) for e in employees],
		total=total,
		page_number=data.page_number,
		page_size=data.page_size,
	)


@router.get("/{employee_id}", response_model=EmployeeDetails)
async def get_employee(
	employee_id: uuid.UUID,
	service: Annotated[EmployeeService, Depends(get_employee_service)],
):
	"""Get an employee and the name of their department's manager."""
	return await service.get_employee_with_manager(employee_id)


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
	employee_id: uuid.UUID,
	data: EmployeeUpdate,
	service: Annotated[EmployeeService, Depends(get_employee_service)],
	session: Annotated[AsyncSession, Depends(get_db)],
):
	"""Update an employee."""
	employee = await service.update_employee(
		employee_id,
		name=data.name,
		cpf=data.cpf,
		rg=data.rg,
		department_id=data.department_id,
	)
	await session.commit()

	return Employee.model_validate(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
	employee_id: uuid.UUID,
	service: Annotated[EmployeeService, Depends(get_employee_service)],
	session: Annotated[AsyncSession, Depends(get_db)],
):
	"""Soft delete an employee who manages no department."""
	await service.delete_employee(employee_id)
	await session.commit()
