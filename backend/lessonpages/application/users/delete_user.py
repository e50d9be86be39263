from lessonpages.domain.policy import AuthContext, assert_can_delete_user
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action


def delete_user(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    user_id: str,
) -> None:
    # admin only, never the caller's own account
    assert_can_delete_user(ctx, user_id)

    user = repo.require_user(user_id)

    with repo.transaction():
        repo.delete(user)

        log_action(
            action="user.delete",
            entity_type="user",
            entity_id=user_id,
            actor_id=ctx.id,
            payload={"username": user.username},
        )
