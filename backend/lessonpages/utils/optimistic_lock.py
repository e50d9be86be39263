from datetime import timezone
from dateutil.parser import parse, ParserError
from lessonpages.domain.exceptions import ConflictError, ValidationError


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(entity, client_ts):
    """
    Enforces optimistic locking from an If-Unmodified-Since value.
    Raises ConflictError if the entity has been modified since.
    """
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ParserError, OverflowError, ValueError) as exc:
        raise ValidationError("Invalid If-Unmodified-Since header") from exc

    if entity.updated_at is None:
        return

    # HTTP dates carry whole seconds only
    server_ts = normalize_ts(entity.updated_at).replace(microsecond=0)

    if server_ts > client_ts:
        raise ConflictError("Conflict detected. Resource has been modified.")
