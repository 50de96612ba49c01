# (c) Copyright Datacraft, 2026
"""Employee lifecycle service."""
import logging
import uuid

from orgchart.core.exceptions import (
	AssignedDepartmentNotFound,
	EmployeeNotFound,
	InvalidInput,
	ManagerCannotBeDeleted,
)
from orgchart.core.features.departments.db import DepartmentFilter, DepartmentStore

from .db import Employee, EmployeeFilter, EmployeeStore
from .schema import EmployeeDetails

logger = logging.getLogger(__name__)


class EmployeeService:
	"""Create, update and remove employees.

	CPF/RG uniqueness is enforced by the store, which raises
	``CPFDuplicated``/``RGDuplicated``.
	"""

	def __init__(self, employees: EmployeeStore, departments: DepartmentStore):
		self.employees = employees
		self.departments = departments

	async def _ensure_department(self, department_id: uuid.UUID) -> None:
		if await self.departments.get(department_id) is None:
			raise AssignedDepartmentNotFound()

	async def get_employee(self, employee_id: uuid.UUID) -> Employee:
		employee = await self.employees.get(employee_id)
		if employee is None:
			raise EmployeeNotFound()
		return employee

	async def create_employee(
		self,
		name: str,
		cpf: str,
		rg: str | None,
		department_id: uuid.UUID,
	) -> Employee:
		await self._ensure_department(department_id)

		employee = await self.employees.create(
			Employee(name=name, cpf=cpf, rg=rg, department_id=department_id)
		)
		logger.info(f"Created employee {employee.id} in department {department_id}")
		return employee

	async def get_employee_with_manager(self, employee_id: uuid.UUID) -> EmployeeDetails:
		"""Employee plus the name of their department's manager, if any."""
		employee = await self.get_employee(employee_id)
		details = EmployeeDetails.model_validate(employee)

		department = await self.departments.get(employee.department_id)
		if department is not None and department.manager_id is not None:
			manager = await self.employees.get(department.manager_id)
			if manager is not None:
				details.manager_name = manager.name

		return details

	async def update_employee(
		self,
		employee_id: uuid.UUID,
		name: str | None = None,
		cpf: str | None = None,
		rg: str | None = None,
		department_id: uuid.UUID | None = None,
	) -> Employee:
		employee = await self.get_employee(employee_id)

		if department_id is not None and department_id != employee.department_id:
			await self._ensure_department(department_id)

		if name is not None:
			employee.name = name
		if cpf is not None:
			employee.cpf = cpf
		if rg is not None:
			employee.rg = rg
		if department_id is not None:
			employee.department_id = department_id

		employee = await self.employees.update(employee)
		logger.info(f"Updated employee {employee.id}")
		return employee

	async def delete_employee(self, employee_id: uuid.UUID) -> None:
		await self.get_employee(employee_id)

		managed = await self.departments.count(DepartmentFilter(manager_id=employee_id))
		if managed > 0:
			raise ManagerCannotBeDeleted()

		await self.employees.soft_delete(employee_id)
		logger.info(f"Deleted employee {employee_id}")

	async def list_employees(
		self,
		name: str | None = None,
		cpf: str | None = None,
		rg: str | None = None,
		department_id: uuid.UUID | None = None,
		page_number: int = 1,
		page_size: int = 10,
	) -> tuple[list[Employee], int]:
		if page_number < 1 or page_size < 1:
			raise InvalidInput("page_number and page_size must be at least 1")

		filters = EmployeeFilter(name=name, cpf=cpf, rg=rg, department_id=department_id)
		total = await self.employees.count(filters)
		employees = await self.employees.find(
			filters,
			page_number=page_number,
			page_size=page_size,
		)
		return employees, total
