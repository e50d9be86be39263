# lessonpages/domain/exceptions.py
from typing import Any, Dict, Optional


class CMSError(Exception):
    """
    Base class for errors the API turns into a client-facing response.

    `context` carries state the caller should echo back (e.g. the previous
    form values) so a rejected submission can be redisplayed.
    """

    status_code = 400

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(CMSError):
    status_code = 400


class InvariantViolation(CMSError):
    status_code = 400


class AuthenticationError(CMSError):
    status_code = 401


class ForbiddenError(CMSError):
    status_code = 403


class NotFoundError(CMSError):
    status_code = 404


class ConflictError(CMSError):
    status_code = 409


class StorageFault(CMSError):
    status_code = 500


class AuthenticationRequired(CMSError):
    """No authenticated context; the HTTP layer redirects to the login entry point."""

    status_code = 302
