import logging
from typing import Optional

audit_logger = logging.getLogger("lessonpages.audit")


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    actor_id: Optional[str] = None,
    payload: dict | None = None
):
    """One structured log line per mutation. Nothing is persisted."""
    audit_logger.info(
        "%s %s=%s actor=%s payload=%s",
        action,
        entity_type,
        entity_id,
        actor_id or "-",
        payload or {},
    )
