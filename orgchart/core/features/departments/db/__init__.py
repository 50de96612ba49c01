# (c) Copyright Datacraft, 2026
"""Departments database models and operations."""
from .base import DepartmentFilter, DepartmentStore
from .orm import Department

__all__ = [
	"Department",
	"DepartmentFilter",
	"DepartmentStore",
]
