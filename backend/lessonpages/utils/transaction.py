from contextlib import contextmanager
from flask import current_app
from sqlalchemy.exc import DBAPIError, IntegrityError
from lessonpages.domain.exceptions import ConflictError, StorageFault


@contextmanager
def transactional(session, *, conflict_message="Resource already exists."):
    """
    Context manager for database transactions.

    - IntegrityError (unique constraints) -> ConflictError(conflict_message)
    - driver/connection failures          -> StorageFault
    """
    try:
        yield
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError(conflict_message) from exc
    except DBAPIError as exc:
        session.rollback()
        current_app.logger.error("Storage failure: %s", exc)
        raise StorageFault("Storage is unavailable.") from exc
    except Exception:
        session.rollback()
        raise
