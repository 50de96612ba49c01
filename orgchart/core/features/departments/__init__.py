# (c) Copyright Datacraft, 2026
"""Departments feature for hierarchical organizational structure."""

from .schema import (
	Department,
	DepartmentCreate,
	DepartmentUpdate,
	DepartmentTree,
	DepartmentSearch,
	DepartmentPage,
)

__all__ = [
	"Department",
	"DepartmentCreate",
	"DepartmentUpdate",
	"DepartmentTree",
	"DepartmentSearch",
	"DepartmentPage",
]
