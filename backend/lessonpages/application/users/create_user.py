from typing import Any, Dict
from lessonpages.models.user import User
from lessonpages.domain.exceptions import ConflictError, ValidationError
from lessonpages.domain.policy import AuthContext, ROLE_EDITOR, ROLES, USER_MANAGE, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action
from lessonpages.utils.form import text_field

USERNAME_TAKEN = "Username already exists."


def create_user(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    data: Dict[str, Any],
) -> User:
    """
    Admin creates an account.

    A blank role means editor; any other unknown role is rejected.
    """
    authorize(ctx, USER_MANAGE)

    username = text_field(data, "username").strip()
    password = text_field(data, "password")
    role = text_field(data, "role").strip() or ROLE_EDITOR

    form = {"username": username, "role": role}

    if not username or not password:
        raise ValidationError("Username and password required.", context={"data": form})

    if role not in ROLES:
        raise ValidationError(f"Invalid role: {role!r}", context={"data": form})

    if repo.username_taken(username):
        raise ConflictError(USERNAME_TAKEN, context={"data": form})

    user = User()
    user.username = username
    user.role = role
    user.set_password(password)

    with repo.transaction(conflict_message=USERNAME_TAKEN):
        repo.add(user)
        repo.flush()

        log_action(
            action="user.create",
            entity_type="user",
            entity_id=user.id,
            actor_id=ctx.id,
            payload={"username": user.username, "role": user.role},
        )

    return user
