# (c) Copyright Datacraft, 2026
"""Add employees and departments tables.

Revision ID: orgc_0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = 'orgc_0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
	# Departments table (manager FK added once employees exists)
	op.create_table(
		'departments',
		sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
		sa.Column('name', sa.String(255), nullable=False),
		sa.Column('manager_id', postgresql.UUID(as_uuid=True), nullable=True),
		sa.Column('parent_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('departments.id'), nullable=True),
		sa.Column('created_at', postgresql.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
		sa.Column('updated_at', postgresql.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
		sa.Column('deleted_at', postgresql.TIMESTAMP(timezone=True), nullable=True),
		sa.CheckConstraint("length(trim(name)) > 0", name='department_name_not_empty'),
	)
	op.create_index('idx_departments_parent_id', 'departments', ['parent_id'])
	op.create_index('idx_departments_manager_id', 'departments', ['manager_id'])
	op.create_index('ix_departments_deleted_at', 'departments', ['deleted_at'])

	# Employees table
	op.create_table(
		'employees',
		sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
		sa.Column('name', sa.String(255), nullable=False),
		sa.Column('cpf', sa.String(11), nullable=False),
		sa.Column('rg', sa.String(20), nullable=True),
		sa.Column('department_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('departments.id'), nullable=False),
		sa.Column('created_at', postgresql.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
		sa.Column('updated_at', postgresql.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
		sa.Column('deleted_at', postgresql.TIMESTAMP(timezone=True), nullable=True),
		sa.CheckConstraint("length(trim(name)) > 0", name='employee_name_not_empty'),
	)
	op.create_index('idx_employees_cpf_active_unique', 'employees', ['cpf'], unique=True, postgresql_where=sa.text('deleted_at IS NULL'))
	op.create_index('idx_employees_rg_active_unique', 'employees', ['rg'], unique=True, postgresql_where=sa.text('deleted_at IS NULL AND rg IS NOT NULL'))
	op.create_index('idx_employees_department_id', 'employees', ['department_id'])
	op.create_index('ix_employees_deleted_at', 'employees', ['deleted_at'])

	op.create_foreign_key(
		'fk_departments_manager_id',
		'departments', 'employees',
		['manager_id'], ['id'],
	)


def downgrade() -> None:
	op.drop_constraint('fk_departments_manager_id', 'departments', type_='foreignkey')
	op.drop_table('employees')
	op.drop_table('departments')
