from __future__ import annotations

import pytest

from lessonpages.application.users.authenticate import authenticate
from lessonpages.application.users.create_user import create_user
from lessonpages.application.users.delete_user import delete_user
from lessonpages.application.users.list_users import list_users
from lessonpages.application.users.seed_admin import seed_admin
from lessonpages.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)

from .conftest import ADMIN_PASSWORD, EDITOR_PASSWORD


def test_admin_is_seeded_once(repo) -> None:
    admin = repo.get_user_by_username("admin")

    assert admin.role == "admin"
    assert admin.check_password(ADMIN_PASSWORD)
    assert admin.password_hash != ADMIN_PASSWORD
    assert seed_admin(repo=repo, username="admin", password="other") is None


def test_blank_role_defaults_to_editor(repo, admin_ctx) -> None:
    user = create_user(repo=repo, ctx=admin_ctx, data={"username": "ann", "password": "pw"})
    assert user.role == "editor"


def test_unknown_role_is_rejected(repo, admin_ctx) -> None:
    with pytest.raises(ValidationError):
        create_user(repo=repo, ctx=admin_ctx, data={"username": "bob", "password": "pw", "role": "owner"})
    assert repo.get_user_by_username("bob") is None


def test_missing_credentials_are_rejected(repo, admin_ctx) -> None:
    with pytest.raises(ValidationError):
        create_user(repo=repo, ctx=admin_ctx, data={"username": "carl"})


@pytest.mark.parametrize(
    "data",
    [
        {"username": 123, "password": "pw"},
        {"username": "erin", "password": ["pw"]},
        {"username": "erin", "password": "pw", "role": {"admin": True}},
    ],
)
def test_non_text_user_fields_are_rejected(repo, admin_ctx, data) -> None:
    with pytest.raises(ValidationError):
        create_user(repo=repo, ctx=admin_ctx, data=data)

    assert [u.username for u in repo.list_users()] == ["admin"]


def test_duplicate_username_is_a_conflict(repo, admin_ctx) -> None:
    with pytest.raises(ConflictError):
        create_user(repo=repo, ctx=admin_ctx, data={"username": "admin", "password": "pw"})


def test_editor_cannot_manage_users(repo, editor_ctx) -> None:
    with pytest.raises(ForbiddenError):
        create_user(repo=repo, ctx=editor_ctx, data={"username": "dan", "password": "pw"})
    with pytest.raises(ForbiddenError):
        list_users(repo=repo, ctx=editor_ctx)


def test_admin_cannot_delete_own_account(repo, admin_ctx) -> None:
    with pytest.raises(ForbiddenError):
        delete_user(repo=repo, ctx=admin_ctx, user_id=admin_ctx.id)

    assert repo.get_user(admin_ctx.id) is not None


def test_admin_deletes_other_account(repo, admin_ctx, editor_ctx) -> None:
    delete_user(repo=repo, ctx=admin_ctx, user_id=editor_ctx.id)

    assert repo.get_user(editor_ctx.id) is None
    with pytest.raises(NotFoundError):
        delete_user(repo=repo, ctx=admin_ctx, user_id=editor_ctx.id)


def test_users_listed_newest_first(repo, admin_ctx, editor_ctx) -> None:
    assert [u.username for u in list_users(repo=repo, ctx=admin_ctx)] == ["editor", "admin"]


def test_authenticate_returns_session_identity(repo, editor_ctx) -> None:
    ctx = authenticate(repo=repo, username="editor", password=EDITOR_PASSWORD)
    assert ctx == editor_ctx


@pytest.mark.parametrize("username, password", [("editor", "wrong"), ("ghost", "pw")])
def test_bad_credentials(repo, editor_ctx, username, password) -> None:
    with pytest.raises(AuthenticationError):
        authenticate(repo=repo, username=username, password=password)
