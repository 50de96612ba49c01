# (c) Copyright Datacraft, 2026
"""Employees database API."""
import uuid

from sqlalchemy import and_, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from orgchart.core.db.audit_cols import utc_now
from orgchart.core.exceptions import CPFDuplicated, RGDuplicated

from .base import EmployeeFilter, EmployeeStore
from .orm import CPF_UNIQUE_INDEX, RG_UNIQUE_INDEX, Employee


def _duplicated_identifier(error: IntegrityError) -> Exception | None:
	"""Classify a unique violation by the index (PostgreSQL) or column (SQLite)."""
	message = str(error.orig)
	if CPF_UNIQUE_INDEX in message or "employees.cpf" in message:
		return CPFDuplicated()
	if RG_UNIQUE_INDEX in message or "employees.rg" in message:
		return RGDuplicated()
	return None


def _conditions(filters: EmployeeFilter) -> list:
	conditions = [Employee.deleted_at.is_(None)]
	if filters.name:
		conditions.append(Employee.name.ilike(f"%{filters.name}%"))
	if filters.cpf:
		conditions.append(Employee.cpf == filters.cpf)
	if filters.rg:
		conditions.append(Employee.rg == filters.rg)
	if filters.department_id is not None:
		conditions.append(Employee.department_id == filters.department_id)
	if filters.department_ids is not None:
		conditions.append(Employee.department_id.in_(list(filters.department_ids)))
	return conditions


class EmployeeDB(EmployeeStore):
	"""SQLAlchemy implementation of the employee store."""

	def __init__(self, session: AsyncSession):
		self.session = session

	async def _flush(self) -> None:
		try:
			await self.session.flush()
		except IntegrityError as e:
			duplicated = _duplicated_identifier(e)
			if duplicated is None:
				raise
			raise duplicated from e

	async def create(self, employee: Employee) -> Employee:
		now = utc_now()
		employee.created_at = now
		employee.updated_at = now
		self.session.add(employee)
		await self._flush()
		await self.session.refresh(employee)
		return employee

	async def get(
		self,
		employee_id: uuid.UUID,
		include_deleted: bool = False,
	) -> Employee | None:
		stmt = select(Employee).where(Employee.id == employee_id)
		if not include_deleted:
			stmt = stmt.where(Employee.deleted_at.is_(None))
		result = await self.session.execute(stmt)
		return result.scalar_one_or_none()

	async def update(self, employee: Employee) -> Employee:
		employee.updated_at = utc_now()
		self.session.add(employee)
		await self._flush()
		await self.session.refresh(employee)
		return employee

	async def soft_delete(self, employee_id: uuid.UUID) -> None:
		employee = await self.get(employee_id)
		if employee is None:
			return
		employee.deleted_at = utc_now()
		await self.session.flush()

	async def count(self, filters: EmployeeFilter) -> int:
		stmt = select(func.count(Employee.id)).where(and_(*_conditions(filters)))
		result = await self.session.execute(stmt)
		return result.scalar_one()

	async def find(
		self,
		filters: EmployeeFilter,
		page_number: int | None = None,
		page_size: int | None = None,
	) -> list[Employee]:
		stmt = (
			select(Employee)
			.where(and_(*_conditions(filters)))
			.order_by(Employee.name.asc(), Employee.id.asc())
		)
		if page_size is not None:
			offset = ((page_number or 1) - 1) * page_size
			stmt = stmt.offset(offset).limit(page_size)

		result = await self.session.execute(stmt)
		return list(result.scalars().all())
