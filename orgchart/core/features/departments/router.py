# (c) Copyright Datacraft, 2026
"""Departments API router."""
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from orgchart.core.db.engine import get_db

from .dependencies import get_department_service
from .schema import (
	Department,
	DepartmentCreate,
	DepartmentPage,
	DepartmentSearch,
	DepartmentTree,
	DepartmentUpdate,
)
from .service import DepartmentService

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.post("", response_model=Department, status_code=status.HTTP_201_CREATED)
async def create_department(
	data: DepartmentCreate,
	service: Annotated[DepartmentService, Depends(get_department_service)],
	session: Annotated[AsyncSession, Depends(get_db)],
):
	"""Create a department; its manager is moved into it."""
	department = await service.create_department(
		name=data.name,
		manager_id=data.manager_id,
		parent_id=data.parent_id,
	)
	await session.commit()

	return Department.model_validate(department)


@router.post("/search", response_model=DepartmentPage)
async def search_departments(
	service: Annotated[DepartmentService, Depends(get_department_service)],
	data: DepartmentSearch | None = None,
):
	"""List departments with filters and pagination."""
	data = data or DepartmentSearch()
	departments, total = await service.list_departments(
		name=data.name,
		manager_name=data.manager_name,
		parent_id=data.parent_id,
		page_number=data.page_number,
		page_size=data.page_size,
	)

	return DepartmentPage(
		items=[Department.model_validate(d) for d in departments],
		total=total,
		page_number=data.page_number,
		page_size=data.page_size,
	)


@router.get("/{department_id}", response_model=DepartmentTree)
async def get_department(
	department_id: uuid.UUID,
	service: Annotated[DepartmentService, Depends(get_department_service)],
):
	"""Get a department with its manager and complete sub-department tree."""
	return await service.get_department_with_tree(department_id)


@router.put("/{department_id}", response_model=Department)
async def update_department(
	department_id: uuid.UUID,
	data: DepartmentUpdate,
	service: Annotated[DepartmentService, Depends(get_department_service)],
	session: Annotated[AsyncSession, Depends(get_db)],
):
	"""Rename, re-parent or re-manage a department."""
	department = await service.update_department(
		department_id,
		name=data.name,
		manager_id=data.manager_id,
		parent_id=data.parent_id,
	)
	await session.commit()

	return Department.model_validate(department)


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_department(
	department_id: uuid.UUID,
	service: Annotated[DepartmentService, Depends(get_department_service)],
	session: Annotated[AsyncSession, Depends(get_db)],
):
	"""Soft delete an empty department."""
	await service.delete_department(department_id)
	await session.commit()
