from lessonpages.domain.invariants.block import assert_block_positions
from lessonpages.domain.policy import AuthContext, BLOCK_DELETE, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action
from lessonpages.utils.order import compact_order


def delete_block(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    block_id: str,
) -> str:
    """
    Delete a block, then renumber the rest of its page to 1..N.

    Returns the owning page id.
    """
    authorize(ctx, BLOCK_DELETE)

    block = repo.require_block(block_id)
    page_id = block.page_id

    with repo.transaction():
        repo.delete(block)
        repo.flush()

        remaining = repo.list_blocks(page_id)
        compact_order(remaining)
        assert_block_positions(remaining)

        log_action(
            action="block.delete",
            entity_type="block",
            entity_id=block_id,
            actor_id=ctx.id,
            payload={"page_id": page_id, "remaining": len(remaining)},
        )

    return page_id
