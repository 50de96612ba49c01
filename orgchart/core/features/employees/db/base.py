# (c) Copyright Datacraft, 2026
"""Abstract employee storage interface."""
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .orm import Employee


@dataclass
class EmployeeFilter:
	"""Predicate for employee queries. All set fields are ANDed."""
	name: str | None = None
	cpf: str | None = None
	rg: str | None = None
	department_id: uuid.UUID | None = None
	department_ids: set[uuid.UUID] | None = None


class EmployeeStore(ABC):
	"""Keyed storage for employee records.

	Reads exclude soft deleted rows unless ``include_deleted`` is set.
	"""

	@abstractmethod
	async def create(self, employee: Employee) -> Employee:
		"""Persist a new employee, assigning its id and timestamps.

		Raises:
			CPFDuplicated: another active employee has the same CPF
			RGDuplicated: another active employee has the same RG
		"""
		...

	@abstractmethod
	async def get(
		self,
		employee_id: uuid.UUID,
		include_deleted: bool = False,
	) -> Employee | None:
		...

	@abstractmethod
	async def update(self, employee: Employee) -> Employee:
		"""Replace the stored record. Same duplicate semantics as ``create``."""
		...

	@abstractmethod
	async def soft_delete(self, employee_id: uuid.UUID) -> None:
		...

	@abstractmethod
	async def count(self, filters: EmployeeFilter) -> int:
		...

	@abstractmethod
	async def find(
		self,
		filters: EmployeeFilter,
		page_number: int | None = None,
		page_size: int | None = None,
	) -> list[Employee]:
		"""Return matching employees; unpaginated when ``page_size`` is None."""
		...
