# (c) Copyright Datacraft, 2026
"""Managers API router."""
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from orgchart.core.exceptions import ManagerNotFound
from orgchart.core.features.departments.dependencies import get_department_service
from orgchart.core.features.departments.service import DepartmentService
from orgchart.core.features.employees.schema import Employee

router = APIRouter(prefix="/managers", tags=["Managers"])


@router.get("/{manager_id}/employees", response_model=list[Employee])
async def list_subordinate_employees(
	manager_id: uuid.UUID,
	service: Annotated[DepartmentService, Depends(get_department_service)],
):
	"""Employees of every department under the manager, recursively."""
	try:
		employees = await service.get_subordinate_employees_recursively(manager_id)
	except ManagerNotFound as e:
		# the manager is the addressed resource here
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

	return [Employee.model_validate(e) for e in employees]
