from typing import Optional
from flask import current_app
from lessonpages.models.user import User
from lessonpages.domain.policy import ROLE_ADMIN
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action


def seed_admin(*, repo: CMSRepository, username: str, password: str) -> Optional[User]:
    """
    Create the bootstrap admin if no user with that name exists.

    Returns the new user, or None when it was already there.
    """
    if repo.get_user_by_username(username):
        return None

    if password == "admin123":
        current_app.logger.warning(
            "Seeding admin %r with the default password; set SEED_ADMIN_PASSWORD", username
        )

    user = User()
    user.username = username
    user.role = ROLE_ADMIN
    user.set_password(password)

    with repo.transaction():
        repo.add(user)
        repo.flush()

        log_action(
            action="user.seed",
            entity_type="user",
            entity_id=user.id,
            payload={"username": username},
        )

    return user
