# (c) Copyright Datacraft, 2026
"""Errors raised by the employee/department services.

The request layer maps each family to one HTTP status class, see
``orgchart.core.errors``.
"""


class OrgChartError(Exception):
	"""Base class of every error raised deliberately by the services."""
	default_message = "Organization chart error"

	def __init__(self, message: str | None = None):
		self.message = message or self.default_message
		super().__init__(self.message)


class InvalidInput(OrgChartError):
	default_message = "Provided data is invalid"


# --- Not found ---

class NotFoundError(OrgChartError):
	default_message = "Resource not found"


class DepartmentNotFound(NotFoundError):
	default_message = "Department not found"


class EmployeeNotFound(NotFoundError):
	default_message = "Employee not found"


# --- Business rules ---

class BusinessRuleViolation(OrgChartError):
	default_message = "Business rule violated"


class ManagerNotFound(BusinessRuleViolation):
	default_message = "Manager not found"


class ParentDepartmentNotFound(BusinessRuleViolation):
	default_message = "Parent department not found"


class AssignedDepartmentNotFound(BusinessRuleViolation):
	"""The department an employee is being assigned to does not exist."""
	default_message = "Department not found"


class CycleDetected(BusinessRuleViolation):
	default_message = "Hierarchy cycle detected"


class DepartmentHasEmployees(BusinessRuleViolation):
	default_message = "Department has employees"


class DepartmentHasSubDepartments(BusinessRuleViolation):
	default_message = "Department has sub-departments"


class ManagerCannotBeDeleted(BusinessRuleViolation):
	default_message = "Employee manages a department and cannot be deleted"


# --- Unique identifiers ---

class IdentifierDuplicated(OrgChartError):
	default_message = "Identifier already registered"


class CPFDuplicated(IdentifierDuplicated):
	default_message = "CPF already registered"


class RGDuplicated(IdentifierDuplicated):
	default_message = "RG already registered"
