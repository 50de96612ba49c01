# (c) Copyright Datacraft, 2026
"""Employees feature: people assigned to exactly one department."""

from .schema import (
	Employee,
	EmployeeBrief,
	EmployeeCreate,
	EmployeeDetails,
	EmployeeUpdate,
	EmployeeSearch,
	EmployeePage,
)

__all__ = [
	"Employee",
	"EmployeeBrief",
	"EmployeeCreate",
	"EmployeeDetails",
	"EmployeeUpdate",
	"EmployeeSearch",
	"EmployeePage",
]
