from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from lessonpages import create_app
from lessonpages.application.users.create_user import create_user
from lessonpages.domain.policy import AuthContext
from lessonpages.extensions import db
from lessonpages.repository import CMSRepository

ADMIN_PASSWORD = "admin123"
EDITOR_PASSWORD = "editor-pass"


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def app(upload_dir: Path) -> Iterator[Flask]:
    """App on an in-memory SQLite store with the admin already seeded.

    The app context stays pushed for the whole test so services and the
    test client share one session.
    """

    app = create_app(
        "testing",
        overrides={
            "UPLOAD_FOLDER": str(upload_dir),
            "SEED_ADMIN_PASSWORD": ADMIN_PASSWORD,
        },
    )
    with app.app_context():
        try:
            yield app
        finally:
            db.session.remove()
            db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def repo(app: Flask) -> CMSRepository:
    return CMSRepository(db.session)


@pytest.fixture
def admin_ctx(repo: CMSRepository) -> AuthContext:
    admin = repo.get_user_by_username("admin")
    assert admin is not None
    return AuthContext(id=admin.id, username=admin.username, role=admin.role)


@pytest.fixture
def editor_ctx(repo: CMSRepository, admin_ctx: AuthContext) -> AuthContext:
    editor = create_user(
        repo=repo,
        ctx=admin_ctx,
        data={"username": "editor", "password": EDITOR_PASSWORD, "role": "editor"},
    )
    return AuthContext(id=editor.id, username=editor.username, role=editor.role)


def login(client: FlaskClient, username: str, password: str) -> dict[str, str]:
    response = client.post(
        "/api/v1/auth/login",
        json={"username": username, "password": password},
    )
    assert response.status_code == 200, response.get_json()
    token = response.get_json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client: FlaskClient) -> dict[str, str]:
    return login(client, "admin", ADMIN_PASSWORD)


@pytest.fixture
def editor_headers(client: FlaskClient, editor_ctx: AuthContext) -> dict[str, str]:
    return login(client, "editor", EDITOR_PASSWORD)
