# (c) Copyright Datacraft, 2026
"""Employees ORM models."""
import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column
from uuid_extensions import uuid7

from orgchart.core.db.audit_cols import AuditColumns
from orgchart.core.db.base import Base

CPF_UNIQUE_INDEX = "idx_employees_cpf_active_unique"
RG_UNIQUE_INDEX = "idx_employees_rg_active_unique"


class Employee(Base, AuditColumns):
	__tablename__ = "employees"

	id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid7)
	name: Mapped[str] = mapped_column(String(255), nullable=False)
	cpf: Mapped[str] = mapped_column(String(11), nullable=False)
	rg: Mapped[str | None] = mapped_column(String(20), nullable=True)
	department_id: Mapped[uuid.UUID] = mapped_column(
		ForeignKey("departments.id"),
		nullable=False
	)

	def __repr__(self) -> str:
		return f"Employee({self.id=}, {self.name=}, {self.department_id=})"

	__table_args__ = (
		CheckConstraint(
			"length(trim(name)) > 0",
			name="employee_name_not_empty"
		),
		Index(
			CPF_UNIQUE_INDEX,
			"cpf",
			unique=True,
			postgresql_where=text("deleted_at IS NULL"),
			sqlite_where=text("deleted_at IS NULL"),
		),
		Index(
			RG_UNIQUE_INDEX,
			"rg",
			unique=True,
			postgresql_where=text("deleted_at IS NULL AND rg IS NOT NULL"),
			sqlite_where=text("deleted_at IS NULL AND rg IS NOT NULL"),
		),
		Index("idx_employees_department_id", "department_id"),
	)
