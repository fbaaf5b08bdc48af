from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient

from main import create_app
from taskboard.config.settings import AdminSeed, Settings

from helpers import ADMIN_EMAIL, ADMIN_PASSWORD, auth_headers, login, signup


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        admin_seeds=[
            AdminSeed(email=ADMIN_EMAIL, password=ADMIN_PASSWORD, name="First Admin", username="firstadmin"),
        ],
        extra_admin_emails=("boss@example.com",),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    # Entering the client runs startup: tables are created and admins seeded
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_factory(app, client):
    """Open a fresh session per check; the app commits on the same in-memory database"""
    return app.state.database.SessionLocal


@pytest.fixture
def admin_token(client) -> str:
    return login(client, ADMIN_EMAIL, ADMIN_PASSWORD).json()["token"]


@pytest.fixture
def employee_a(client) -> Dict:
    assert signup(client, "alice").status_code == 201
    data = login(client, "alice@example.com").json()
    return {"id": data["user"]["id"], "token": data["token"]}


@pytest.fixture
def employee_b(client) -> Dict:
    assert signup(client, "bob").status_code == 201
    data = login(client, "bob@example.com").json()
    return {"id": data["user"]["id"], "token": data["token"]}


@pytest.fixture
def deploy_task(client, admin_token, employee_a) -> Dict:
    response = client.post(
        "/api/admin/tasks",
        json={"title": "Deploy", "assignedTo": employee_a["id"], "priority": "High", "dueDate": "2024-01-01"},
        headers=auth_headers(admin_token),
    )
    assert response.status_code == 201
    return response.json()
