from typing import Dict

from fastapi.testclient import TestClient

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-secret"
PASSWORD = "password123"


def signup(client: TestClient, username: str, email: str = None, password: str = PASSWORD, name: str = None):
    return client.post("/api/auth/signup", json={
        "username": username,
        "name": name or username.title(),
        "email": email or f"{username}@example.com",
        "password": password,
    })


def login(client: TestClient, email: str, password: str = PASSWORD):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
