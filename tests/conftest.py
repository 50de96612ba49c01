# (c) Copyright Datacraft, 2026
"""Shared fixtures: in-memory stores for the services, SQLite for the SQL layer."""
import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from uuid_extensions import uuid7

from orgchart.core import orm  # noqa: F401
from orgchart.core.db.audit_cols import utc_now
from orgchart.core.db.base import Base
from orgchart.core.exceptions import CPFDuplicated, RGDuplicated
from orgchart.core.features.departments.db import (
    Department,
    DepartmentFilter,
    DepartmentStore,
)
from orgchart.core.features.departments.service import DepartmentService
from orgchart.core.features.employees.db import (
    Employee,
    EmployeeFilter,
    EmployeeStore,
)
from orgchart.core.features.employees.service import EmployeeService


def _page(rows: list, page_number: int | None, page_size: int | None) -> list:
    if page_size is None:
        return rows
    offset = ((page_number or 1) - 1) * page_size
    return rows[offset:offset + page_size]


class MemoryEmployeeStore(EmployeeStore):
    """Employee store keeping ORM instances in a dict."""

    def __init__(self):
        self.rows: dict[uuid.UUID, Employee] = {}

    def _check_unique(self, employee: Employee) -> None:
        for other in self.rows.values():
            if other.id == employee.id or other.deleted_at is not None:
                continue
            if other.cpf == employee.cpf:
                raise CPFDuplicated()
            if employee.rg is not None and other.rg == employee.rg:
                raise RGDuplicated()

    def _matches(self, employee: Employee, filters: EmployeeFilter) -> bool:
        if employee.deleted_at is not None:
            return False
        if filters.name and filters.name.lower() not in employee.name.lower():
            return False
        if filters.cpf and employee.cpf != filters.cpf:
            return False
        if filters.rg and employee.rg != filters.rg:
            return False
        if filters.department_id is not None and employee.department_id != filters.department_id:
            return False
        if filters.department_ids is not None and employee.department_id not in filters.department_ids:
            return False
        return True

    async def create(self, employee: Employee) -> Employee:
        if employee.id is None:
            employee.id = uuid7()
        self._check_unique(employee)
        now = utc_now()
        employee.created_at = now
        employee.updated_at = now
        self.rows[employee.id] = employee
        return employee

    async def get(self, employee_id, include_deleted=False):
        employee = self.rows.get(employee_id)
        if employee is None:
            return None
        if employee.deleted_at is not None and not include_deleted:
            return None
        return employee

    async def update(self, employee: Employee) -> Employee:
        self._check_unique(employee)
        employee.updated_at = utc_now()
        self.rows[employee.id] = employee
        return employee

    async def soft_delete(self, employee_id) -> None:
        employee = await self.get(employee_id)
        if employee is not None:
            employee.deleted_at = utc_now()

    async def count(self, filters: EmployeeFilter) -> int:
        return len(await self.find(filters))

    async def find(self, filters, page_number=None, page_size=None):
        rows = sorted(
            (e for e in self.rows.values() if self._matches(e, filters)),
            key=lambda e: (e.name, str(e.id)),
        )
        return _page(rows, page_number, page_size)


class MemoryDepartmentStore(DepartmentStore):
    """Department store keeping ORM instances in a dict.

    Needs the employee store to resolve ``manager_name`` filters.
    """

    def __init__(self, employees: MemoryEmployeeStore):
        self.rows: dict[uuid.UUID, Department] = {}
        self.employees = employees

    def _matches(self, department: Department, filters: DepartmentFilter) -> bool:
        if department.deleted_at is not None:
            return False
        if filters.name and filters.name.lower() not in department.name.lower():
            return False
        if filters.parent_id is not None and department.parent_id != filters.parent_id:
            return False
        if filters.manager_id is not None and department.manager_id != filters.manager_id:
            return False
        if filters.manager_name:
            manager = self.employees.rows.get(department.manager_id)
            if manager is None or manager.deleted_at is not None:
                return False
            if filters.manager_name.lower() not in manager.name.lower():
                return False
        return True

    async def create(self, department: Department) -> Department:
        if department.id is None:
            department.id = uuid7()
        now = utc_now()
        department.created_at = now
        department.updated_at = now
        self.rows[department.id] = department
        return department

    async def get(self, department_id, include_deleted=False):
        department = self.rows.get(department_id)
        if department is None:
            return None
        if department.deleted_at is not None and not include_deleted:
            return None
        return department

    async def update(self, department: Department) -> Department:
        department.updated_at = utc_now()
        self.rows[department.id] = department
        return department

    async def soft_delete(self, department_id) -> None:
        department = await self.get(department_id)
        if department is not None:
            department.deleted_at = utc_now()

    async def count(self, filters: DepartmentFilter) -> int:
        return len(await self.find(filters))

    async def find(self, filters, page_number=None, page_size=None):
        rows = sorted(
            (d for d in self.rows.values() if self._matches(d, filters)),
            key=lambda d: (d.name, str(d.id)),
        )
        return _page(rows, page_number, page_size)

    async def find_children(self, parent_id):
        return await self.find(DepartmentFilter(parent_id=parent_id))

    async def find_descendant_ids(self, root_id):
        if await self.get(root_id) is None:
            return set()
        found = {root_id}
        frontier = [root_id]
        while frontier:
            current = frontier.pop(0)
            for department in self.rows.values():
                if department.deleted_at is not None or department.id in found:
                    continue
                if department.parent_id == current:
                    found.add(department.id)
                    frontier.append(department.id)
        return found


@pytest.fixture
def employee_store():
    return MemoryEmployeeStore()


@pytest.fixture
def department_store(employee_store):
    return MemoryDepartmentStore(employee_store)


@pytest.fixture
def department_service(department_store, employee_store):
    return DepartmentService(department_store, employee_store)


@pytest.fixture
def employee_service(employee_store, department_store):
    return EmployeeService(employee_store, department_store)


@pytest.fixture
def make_department(department_store):
    """Insert a department directly, bypassing the manager requirement."""
    async def _make(name, parent_id=None, manager_id=None):
        return await department_store.create(
            Department(name=name, parent_id=parent_id, manager_id=manager_id)
        )
    return _make


@pytest.fixture
def make_employee(employee_store):
    """Insert an employee with a generated CPF."""
    counter = iter(range(10_000_000_000, 99_999_999_999))

    async def _make(name, department_id, cpf=None, rg=None):
        return await employee_store.create(
            Employee(
                name=name,
                cpf=cpf or str(next(counter)),
                rg=rg,
                department_id=department_id,
            )
        )
    return _make


@pytest.fixture
async def sql_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(sql_engine):
    return async_sessionmaker(sql_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def api_client(session_maker):
    """HTTP client against the app, one fresh SQLite session per request."""
    from orgchart.app import app
    from orgchart.core.db.engine import get_db

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test/api/v1") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def seed(session_maker):
    """Commit rows straight through the SQL stores; returns an insert helper."""
    from orgchart.core.features.departments.db.api import DepartmentDB
    from orgchart.core.features.employees.db.api import EmployeeDB

    class Seed:
        async def department(self, name, parent_id=None, manager_id=None):
            async with session_maker() as session:
                dept = await DepartmentDB(session).create(
                    Department(name=name, parent_id=parent_id, manager_id=manager_id)
                )
                await session.commit()
                return dept

        async def employee(self, name, cpf, department_id, rg=None):
            async with session_maker() as session:
                employee = await EmployeeDB(session).create(
                    Employee(name=name, cpf=cpf, rg=rg, department_id=department_id)
                )
                await session.commit()
                return employee

    return Seed()
