# (c) Copyright Datacraft, 2026
"""Departments ORM models."""
import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column
from uuid_extensions import uuid7

from orgchart.core.db.audit_cols import AuditColumns
from orgchart.core.db.base import Base


class Department(Base, AuditColumns):
	"""Department model for organizational hierarchy."""
	__tablename__ = "departments"

	id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid7)
	name: Mapped[str] = mapped_column(String(255), nullable=False)
	manager_id: Mapped[uuid.UUID | None] = mapped_column(
		# departments <-> employees reference each other
		ForeignKey("employees.id", use_alter=True, name="fk_departments_manager_id"),
		nullable=True
	)
	parent_id: Mapped[uuid.UUID | None] = mapped_column(
		ForeignKey("departments.id"),
		nullable=True
	)

	def __repr__(self) -> str:
		return f"Department({self.id=}, {self.name=}, {self.parent_id=})"

	__table_args__ = (
		CheckConstraint(
			"length(trim(name)) > 0",
			name="department_name_not_empty"
		),
		Index("idx_departments_parent_id", "parent_id"),
		Index("idx_departments_manager_id", "manager_id"),
	)
