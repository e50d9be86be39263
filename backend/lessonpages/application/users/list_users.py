from typing import List
from lessonpages.models.user import User
from lessonpages.domain.policy import AuthContext, USER_MANAGE, authorize
from lessonpages.repository import CMSRepository


def list_users(*, repo: CMSRepository, ctx: AuthContext) -> List[User]:
    authorize(ctx, USER_MANAGE)
    return repo.list_users()
