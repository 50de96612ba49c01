# (c) Copyright Datacraft, 2026
"""Service factories bound to the request's database session."""
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from orgchart.core.db.engine import get_db
from orgchart.core.features.departments.db.api import DepartmentDB

from .db.api import EmployeeDB
from .service import EmployeeService


async def get_employee_service(
	session: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeService:
	return EmployeeService(EmployeeDB(session), DepartmentDB(session))
