# (c) Copyright Datacraft, 2026
"""Central ORM model exports."""
from .features.departments.db.orm import Department
from .features.employees.db.orm import Employee

__all__ = [
	'Department',
	'Employee',
]
