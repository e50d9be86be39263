# lessonpages/domain/policy.py
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .exceptions import AuthenticationRequired, ForbiddenError

ROLE_ADMIN = "admin"
ROLE_EDITOR = "editor"
ROLES = (ROLE_ADMIN, ROLE_EDITOR)

# Operations gated by the policy
ADMIN_VIEW = "admin.view"
PAGE_CREATE = "page.create"
PAGE_EDIT = "page.edit"
PAGE_DELETE = "page.delete"
BLOCK_CREATE = "block.create"
BLOCK_EDIT = "block.edit"
BLOCK_DELETE = "block.delete"
BLOCK_MOVE = "block.move"
MEDIA_UPLOAD = "media.upload"
MEDIA_DELETE = "media.delete"
USER_MANAGE = "user.manage"

OPERATIONS = frozenset({
    ADMIN_VIEW,
    PAGE_CREATE,
    PAGE_EDIT,
    PAGE_DELETE,
    BLOCK_CREATE,
    BLOCK_EDIT,
    BLOCK_DELETE,
    BLOCK_MOVE,
    MEDIA_UPLOAD,
    MEDIA_DELETE,
    USER_MANAGE,
})

ADMIN_ONLY_OPERATIONS = frozenset({PAGE_DELETE, MEDIA_DELETE, USER_MANAGE})

FORBIDDEN_MESSAGES = {
    PAGE_DELETE: "Only admin can delete pages.",
    MEDIA_DELETE: "Only admin can delete media.",
    USER_MANAGE: "Forbidden: admin only",
}


@dataclass(frozen=True)
class AuthContext:
    """Identity of the authenticated caller, threaded through every service call."""

    id: str
    username: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "AuthContext":
        return cls(
            id=str(claims["sub"]),
            username=claims.get("username", ""),
            role=claims.get("role", ROLE_EDITOR),
        )

    def additional_claims(self) -> dict:
        return {"username": self.username, "role": self.role}


def is_permitted(ctx: Optional[AuthContext], operation: str) -> bool:
    if ctx is None:
        return False
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown operation: {operation}")
    if operation in ADMIN_ONLY_OPERATIONS:
        return ctx.is_admin
    return ctx.role in ROLES


def authorize(ctx: Optional[AuthContext], operation: str) -> AuthContext:
    """
    Gate an operation.

    Raises AuthenticationRequired when there is no session at all and
    ForbiddenError when the role is not enough.
    """
    if ctx is None:
        raise AuthenticationRequired("Login required")

    if not is_permitted(ctx, operation):
        raise ForbiddenError(FORBIDDEN_MESSAGES.get(operation, "Forbidden"))

    return ctx


def assert_can_delete_user(ctx: Optional[AuthContext], user_id: str) -> None:
    authorize(ctx, USER_MANAGE)

    if str(user_id) == ctx.id:
        raise ForbiddenError("You cannot delete yourself.")
