from lessonpages.domain.exceptions import AuthenticationError, ValidationError
from lessonpages.domain.policy import AuthContext
from lessonpages.repository import CMSRepository

INVALID_CREDENTIALS = "Invalid username or password"


def authenticate(*, repo: CMSRepository, username: str, password: str) -> AuthContext:
    """Check credentials and return the session identity {id, username, role}."""
    if not username or not password:
        raise ValidationError("Username and password required.", context={"data": {"username": username or ""}})

    user = repo.get_user_by_username(username)

    if not user or not user.check_password(password):
        raise AuthenticationError(INVALID_CREDENTIALS, context={"data": {"username": username}})

    return AuthContext(id=user.id, username=user.username, role=user.role)
