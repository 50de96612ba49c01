# (c) Copyright Datacraft, 2026
"""Service factories bound to the request's database session."""
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from orgchart.core.db.engine import get_db
from orgchart.core.features.employees.db.api import EmployeeDB

from .db.api import DepartmentDB
from .service import DepartmentService


async def get_department_service(
	session: Annotated[AsyncSession, Depends(get_db)],
) -> DepartmentService:
	return DepartmentService(DepartmentDB(session), EmployeeDB(session))
