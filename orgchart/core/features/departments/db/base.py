# (c) Copyright Datacraft, 2026
"""Abstract department storage interface."""
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .orm import Department


@dataclass
class DepartmentFilter:
	"""Predicate for department queries. All set fields are ANDed."""
	name: str | None = None
	manager_name: str | None = None
	parent_id: uuid.UUID | None = None
	manager_id: uuid.UUID | None = None


class DepartmentStore(ABC):
	"""Keyed storage for department records.

	Reads exclude soft deleted rows unless ``include_deleted`` is set.
	"""

	@abstractmethod
	async def create(self, department: Department) -> Department:
		"""Persist a new department, assigning its id and timestamps."""
		...

	@abstractmethod
	async def get(
		self,
		department_id: uuid.UUID,
		include_deleted: bool = False,
	) -> Department | None:
		...

	@abstractmethod
	async def update(self, department: Department) -> Department:
		"""Replace the stored record with ``department``."""
		...

	@abstractmethod
	async def soft_delete(self, department_id: uuid.UUID) -> None:
		"""Mark the department deleted. Other timestamps are kept."""
		...

	@abstractmethod
	async def count(self, filters: DepartmentFilter) -> int:
		...

	@abstractmethod
	async def find(
		self,
		filters: DepartmentFilter,
		page_number: int | None = None,
		page_size: int | None = None,
	) -> list[Department]:
		"""Return matching departments ordered by name.

		Unpaginated when ``page_size`` is None.
		"""
		...

	@abstractmethod
	async def find_children(self, parent_id: uuid.UUID) -> list[Department]:
		"""Direct, active sub-departments of ``parent_id``."""
		...

	@abstractmethod
	async def find_descendant_ids(self, root_id: uuid.UUID) -> set[uuid.UUID]:
		"""Ids of all active departments below ``root_id``, root included.

		Empty when the root itself is unknown or deleted.
		"""
		...
