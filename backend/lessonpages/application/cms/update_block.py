from typing import Any, Dict, Optional
from lessonpages.models.block import Block
from lessonpages.domain.blocks import decode_payload, encode_payload, validate_edit
from lessonpages.domain.policy import AuthContext, BLOCK_EDIT, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action
from lessonpages.utils.optimistic_lock import enforce_optimistic_lock


def update_block(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    block_id: str,
    data: Dict[str, Any],
    if_unmodified_since: Optional[str] = None,
) -> Block:
    """
    Replace a block's payload from an editor submission.

    The block type is fixed at creation. A malformed quiz raises
    ValidationError carrying the stored payload; nothing is written.
    """
    authorize(ctx, BLOCK_EDIT)

    block = repo.require_block(block_id)
    enforce_optimistic_lock(block, if_unmodified_since)

    previous = decode_payload(block.type, block.data_json)
    payload = validate_edit(block.type, data, previous=previous)

    with repo.transaction():
        block.data_json = encode_payload(payload)

        log_action(
            action="block.update",
            entity_type="block",
            entity_id=block.id,
            actor_id=ctx.id,
            payload={"page_id": block.page_id, "type": block.type},
        )

    return block
