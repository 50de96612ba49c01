# (c) Copyright Datacraft, 2026
"""Employees database models and operations."""
from .base import EmployeeFilter, EmployeeStore
from .orm import Employee

__all__ = [
	"Employee",
	"EmployeeFilter",
	"EmployeeStore",
]
