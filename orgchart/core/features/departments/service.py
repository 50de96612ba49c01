# (c) Copyright Datacraft, 2026
"""Department hierarchy service.

Keeps the department tree consistent: no cycles through parent links,
managers are active employees working in the department they manage, and
departments are only removed once they are empty.
"""
import logging
import uuid

from orgchart.core.exceptions import (
	CycleDetected,
	DepartmentHasEmployees,
	DepartmentHasSubDepartments,
	DepartmentNotFound,
	InvalidInput,
	ManagerNotFound,
	ParentDepartmentNotFound,
)
from orgchart.core.features.employees.db import Employee, EmployeeFilter, EmployeeStore
from orgchart.core.features.employees.schema import EmployeeBrief

from .db import Department, DepartmentFilter, DepartmentStore
from .schema import DepartmentTree

logger = logging.getLogger(__name__)


class DepartmentService:
	"""
	Create, reshape and query the department hierarchy.

	Usage:
		service = DepartmentService(DepartmentDB(session), EmployeeDB(session))
		department = await service.create_department("Finance", manager_id)
		await session.commit()
	"""

	def __init__(self, departments: DepartmentStore, employees: EmployeeStore):
		self.departments = departments
		self.employees = employees

	async def _bind_manager(self, manager: Employee, department_id: uuid.UUID) -> None:
		"""Move the manager into the department they manage."""
		if manager.department_id == department_id:
			return
		logger.info(
			f"Moving manager {manager.id} from department "
			f"{manager.department_id} to {department_id}"
		)
		manager.department_id = department_id
		await self.employees.update(manager)

	async def create_department(
		self,
		name: str,
		manager_id: uuid.UUID,
		parent_id: uuid.UUID | None = None,
	) -> Department:
		manager = await self.employees.get(manager_id)
		if manager is None:
			raise ManagerNotFound()

		if parent_id is not None:
			if await self.departments.get(parent_id) is None:
				raise ParentDepartmentNotFound()

		department = await self.departments.create(
			Department(name=name, manager_id=manager_id, parent_id=parent_id)
		)
		logger.info(f"Created department {department.id} ({department.name})")

		# Re-read: the manager row may have changed since validation
		manager = await self.employees.get(manager_id)
		if manager is None:
			raise ManagerNotFound()
		await self._bind_manager(manager, department.id)

		return department

	async def get_department(self, department_id: uuid.UUID) -> Department:
		department = await self.departments.get(department_id)
		if department is None:
			raise DepartmentNotFound()
		return department

	async def _manager_brief(self, manager_id: uuid.UUID | None) -> EmployeeBrief | None:
		"""Best-effort manager lookup; a missing manager yields None."""
		if manager_id is None:
			return None
		manager = await self.employees.get(manager_id)
		if manager is None:
			logger.debug(f"Manager {manager_id} not found, leaving it empty")
			return None
		return EmployeeBrief.model_validate(manager)

	async def _tree_node(self, department: Department) -> DepartmentTree:
		node = DepartmentTree.model_validate(department)
		node.manager = await self._manager_brief(department.manager_id)
		return node

	async def get_department_with_tree(self, department_id: uuid.UUID) -> DepartmentTree:
		department = await self.get_department(department_id)

		root = await self._tree_node(department)
		visited = {department.id}
		pending = [root]
		while pending:
			node = pending.pop()
			for child in await self.departments.find_children(node.id):
				if child.id in visited:
					logger.warning(
						f"Department {child.id} reached twice while loading tree "
						f"of {department_id}; skipping"
					)
					continue
				visited.add(child.id)
				child_node = await self._tree_node(child)
				node.sub_departments.append(child_node)
				pending.append(child_node)

		return root

	async def update_department(
		self,
		department_id: uuid.UUID,
		name: str | None = None,
		manager_id: uuid.UUID | None = None,
		parent_id: uuid.UUID | None = None,
	) -> Department:
		department = await self.get_department(department_id)

		# Everything is validated before the first write
		reparent = parent_id is not None and parent_id != department.parent_id
		if reparent:
			if parent_id == department_id:
				raise CycleDetected("Department cannot be its own parent")
			descendants = await self.departments.find_descendant_ids(department_id)
			if parent_id in descendants:
				raise CycleDetected("Department cannot be moved below its own sub-department")
			if await self.departments.get(parent_id) is None:
				raise ParentDepartmentNotFound()

		manager = None
		if manager_id is not None and manager_id != department.manager_id:
			manager = await self.employees.get(manager_id)
			if manager is None:
				raise ManagerNotFound()

		if manager is not None:
			await self._bind_manager(manager, department.id)
			department.manager_id = manager.id
		if reparent:
			department.parent_id = parent_id
		if name is not None:
			department.name = name

		department = await self.departments.update(department)
		logger.info(f"Updated department {department.id}")
		return department

	async def delete_department(self, department_id: uuid.UUID) -> None:
		await self.get_department(department_id)

		employee_count = await self.employees.count(
			EmployeeFilter(department_id=department_id)
		)
		if employee_count > 0:
			raise DepartmentHasEmployees()

		child_count = await self.departments.count(
			DepartmentFilter(parent_id=department_id)
		)
		if child_count > 0:
			raise DepartmentHasSubDepartments()

		await self.departments.soft_delete(department_id)
		logger.info(f"Deleted department {department_id}")

	async def list_departments(
		self,
		name: str | None = None,
		manager_name: str | None = None,
		parent_id: uuid.UUID | None = None,
		page_number: int = 1,
		page_size: int = 10,
	) -> tuple[list[Department], int]:
		"""List departments with pagination and filtering."""
		if page_number < 1 or page_size < 1:
			raise InvalidInput("page_number and page_size must be at least 1")

		filters = DepartmentFilter(
			name=name,
			manager_name=manager_name,
			parent_id=parent_id,
		)
		total = await self.departments.count(filters)
		departments = await self.departments.find(
			filters,
			page_number=page_number,
			page_size=page_size,
		)
		return departments, total

	async def get_subordinate_employees_recursively(
		self,
		manager_id: uuid.UUID,
	) -> list[Employee]:
		"""Active employees of every department under the manager's departments."""
		managed = await self.departments.find(DepartmentFilter(manager_id=manager_id))
		if not managed:
			raise ManagerNotFound()

		department_ids: set[uuid.UUID] = set()
		for department in managed:
			if department.id in department_ids:
				# already covered by another managed department's subtree
				continue
			department_ids |= await self.departments.find_descendant_ids(department.id)

		return await self.employees.find(EmployeeFilter(department_ids=department_ids))
