from functools import wraps
from flask_jwt_extended import get_jwt, verify_jwt_in_request
from lessonpages.domain.policy import AuthContext


def authenticated(fn):
    """
    Require a valid JWT and hand the view an explicit `ctx` (AuthContext).

    Missing, invalid or expired tokens are turned into a redirect to the
    login entry point by the JWT loaders registered in create_app.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        kwargs["ctx"] = AuthContext.from_claims(get_jwt())
        return fn(*args, **kwargs)
    return wrapper
