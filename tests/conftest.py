"""Shared fixtures: an app pointed at a throwaway users file"""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from console.main import create_app
from limetools.utils.config import Settings

ADMIN = {"name": "Ada", "surname": "Admin", "mail": "admin@x.com", "password": "secret", "type": "admin"}
REGULAR = {"name": "Uma", "surname": "User", "mail": "user@x.com", "password": "hunter2", "type": "user"}


def read_roster(path: Path) -> list:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def users_file(tmp_path: Path) -> Path:
    path = tmp_path / "users.json"
    path.write_text(json.dumps([ADMIN, REGULAR], indent=2), encoding="utf-8")
    return path


@pytest.fixture
def client(users_file: Path) -> TestClient:
    app = create_app(Settings(users_file=users_file))
    return TestClient(app)


def login(client: TestClient, record: dict):
    return client.post(
        "/login",
        data={"mail": record["mail"], "password": record["password"]},
        follow_redirects=False,
    )


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    res = login(client, ADMIN)
    assert res.status_code == 302, res.text
    return client


@pytest.fixture
def user_client(client: TestClient) -> TestClient:
    res = login(client, REGULAR)
    assert res.status_code == 302, res.text
    return client
