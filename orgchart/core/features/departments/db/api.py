# (c) Copyright Datacraft, 2026
"""Departments database API."""
import uuid

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from orgchart.core.db.audit_cols import utc_now
from orgchart.core.features.employees.db.orm import Employee

from .base import DepartmentFilter, DepartmentStore
from .orm import Department


class DepartmentDB(DepartmentStore):
	"""SQLAlchemy implementation of the department store."""

	def __init__(self, session: AsyncSession):
		self.session = session

	def _filtered(self, stmt, filters: DepartmentFilter):
		stmt = stmt.where(Department.deleted_at.is_(None))

		if filters.name:
			stmt = stmt.where(Department.name.ilike(f"%{filters.name}%"))
		if filters.parent_id is not None:
			stmt = stmt.where(Department.parent_id == filters.parent_id)
		if filters.manager_id is not None:
			stmt = stmt.where(Department.manager_id == filters.manager_id)
		if filters.manager_name:
			stmt = stmt.join(
				Employee,
				and_(
					Employee.id == Department.manager_id,
					Employee.deleted_at.is_(None),
				),
			).where(Employee.name.ilike(f"%{filters.manager_name}%"))

		return stmt

	async def create(self, department: Department) -> Department:
		now = utc_now()
		department.created_at = now
		department.updated_at = now
		self.session.add(department)
		await self.session.flush()
		await self.session.refresh(department)
		return department

	async def get(
		self,
		department_id: uuid.UUID,
		include_deleted: bool = False,
	) -> Department | None:
		stmt = select(Department).where(Department.id == department_id)
		if not include_deleted:
			stmt = stmt.where(Department.deleted_at.is_(None))
		result = await self.session.execute(stmt)
		return result.scalar_one_or_none()

	async def update(self, department: Department) -> Department:
		department.updated_at = utc_now()
		self.session.add(department)
		await self.session.flush()
		await self.session.refresh(department)
		return department

	async def soft_delete(self, department_id: uuid.UUID) -> None:
		department = await self.get(department_id)
		if department is None:
			return
		department.deleted_at = utc_now()
		await self.session.flush()

	async def count(self, filters: DepartmentFilter) -> int:
		stmt = self._filtered(select(func.count(Department.id)), filters)
		result = await self.session.execute(stmt)
		return result.scalar_one()

	async def find(
		self,
		filters: DepartmentFilter,
		page_number: int | None = None,
		page_size: int | None = None,
	) -> list[Department]:
		stmt = self._filtered(select(Department), filters).order_by(
			Department.name.asc(), Department.id.asc()
		)
		if page_size is not None:
			offset = ((page_number or 1) - 1) * page_size
			stmt = stmt.offset(offset).limit(page_size)

		result = await self.session.execute(stmt)
		return list(result.scalars().all())

	async def find_children(self, parent_id: uuid.UUID) -> list[Department]:
		return await self.find(DepartmentFilter(parent_id=parent_id))

	async def find_descendant_ids(self, root_id: uuid.UUID) -> set[uuid.UUID]:
		tree = (
			select(Department.id)
			.where(
				Department.id == root_id,
				Department.deleted_at.is_(None),
			)
			.cte("descendants", recursive=True)
		)
		# UNION (not UNION ALL) stops on rows already produced, so even a
		# corrupt cyclic parent graph terminates
		tree = tree.union(
			select(Department.id)
			.join(tree, Department.parent_id == tree.c.id)
			.where(Department.deleted_at.is_(None))
		)
		result = await self.session.execute(select(tree.c.id))
		return set(result.scalars().all())
