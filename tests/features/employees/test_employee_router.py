# (c) Copyright Datacraft, 2026
"""HTTP tests for the employees endpoints."""
import uuid

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.mark.asyncio
async def test_create_employee_returns_201(api_client, seed):
    dept = await seed.department("Finance")

    response = await api_client.post(
        "/employees",
        json={"name": "Ana", "cpf": "12345678901", "rg": "MG123", "department_id": str(dept.id)},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Ana"
    assert body["department_id"] == str(dept.id)


@pytest.mark.asyncio
async def test_create_employee_bad_cpf_is_400(api_client, seed):
    dept = await seed.department("Finance")

    response = await api_client.post(
        "/employees",
        json={"name": "Ana", "cpf": "123.456.789-01", "department_id": str(dept.id)},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_employee_unknown_department_is_422(api_client):
    response = await api_client.post(
        "/employees",
        json={"name": "Ana", "cpf": "12345678901", "department_id": str(uuid.uuid4())},
    )

    assert response.status_code == 422
    assert response.json() == {"detail": "Department not found"}


@pytest.mark.asyncio
async def test_duplicate_cpf_is_409(api_client, seed):
    dept = await seed.department("Finance")
    await seed.employee("Ana", "12345678901", dept.id)

    response = await api_client.post(
        "/employees",
        json={"name": "Bia", "cpf": "12345678901", "department_id": str(dept.id)},
    )

    assert response.status_code == 409
    assert response.json() == {"detail": "CPF already registered"}


@pytest.mark.asyncio
async def test_get_employee_with_manager_name(api_client, seed):
    root = await seed.department("Head Office")
    boss = await seed.employee("Ana", "11111111111", root.id)
    finance = await seed.department("Finance", manager_id=boss.id)
    clerk = await seed.employee("Bruno", "22222222222", finance.id)

    response = await api_client.get(f"/employees/{clerk.id}")

    assert response.status_code == 200
    assert response.json()["manager_name"] == "Ana"


@pytest.mark.asyncio
async def test_get_employee_malformed_id_is_400(api_client):
    response = await api_client.get("/employees/not-a-uuid")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_missing_employee_is_404(api_client):
    response = await api_client.get(f"/employees/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"detail": "Employee not found"}


@pytest.mark.asyncio
async def test_update_employee(api_client, seed):
    dept = await seed.department("Finance")
    clerk = await seed.employee("Bruno", "22222222222", dept.id)

    response = await api_client.put(f"/employees/{clerk.id}", json={"name": "Bruno Lima"})

    assert response.status_code == 200
    assert response.json()["name"] == "Bruno Lima"
    assert response.json()["cpf"] == "22222222222"


@pytest.mark.asyncio
async def test_delete_employee_then_404(api_client, seed):
    dept = await seed.department("Finance")
    clerk = await seed.employee("Bruno", "22222222222", dept.id)

    response = await api_client.delete(f"/employees/{clerk.id}")
    assert response.status_code == 204

    response = await api_client.get(f"/employees/{clerk.id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_manager_is_422(api_client, seed):
    root = await seed.department("Head Office")
    boss = await seed.employee("Ana", "11111111111", root.id)
    await seed.department("Finance", manager_id=boss.id)

    response = await api_client.delete(f"/employees/{boss.id}")

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_search_employees_envelope(api_client, seed):
    dept = await seed.department("Finance")
    await seed.employee("Ana", "11111111111", dept.id)
    await seed.employee("Bruno", "22222222222", dept.id)

    response = await api_client.post("/employees/search", json={"name": "an"})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["page_number"] == 1
    assert body["page_size"] == 10
    assert [e["name"] for e in body["items"]] == ["Ana"]


@pytest.mark.asyncio
async def test_search_employees_without_body(api_client, seed):
    dept = await seed.department("Finance")
    await seed.employee("Ana", "11111111111", dept.id)

    response = await api_client.post("/employees/search")

    assert response.status_code == 200
    assert response.json()["total"] == 1


@pytest.mark.asyncio
async def test_unexpected_error_is_500():
    """Test that unclassified failures become a 500 with the error text."""
    from orgchart.app import app
    from orgchart.core.features.employees.dependencies import get_employee_service

    class BrokenService:
        async def get_employee_with_manager(self, employee_id):
            raise RuntimeError("store unavailable")

    app.dependency_overrides[get_employee_service] = lambda: BrokenService()
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test/api/v1") as client:
            response = await client.get(f"/employees/{uuid.uuid4()}")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error", "error": "store unavailable"}


@pytest.mark.asyncio
async def test_create_employee_blank_name_is_400(api_client, seed):
    dept = await seed.department("Finance")

    response = await api_client.post(
        "/employees",
        json={"name": " ", "cpf": "12345678901", "department_id": str(dept.id)},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_rename_employee_to_blank_is_400(api_client, seed):
    dept = await seed.department("Finance")
    clerk = await seed.employee("Bruno", "22222222222", dept.id)

    response = await api_client.put(f"/employees/{clerk.id}", json={"name": "\t "})

    assert response.status_code == 400
