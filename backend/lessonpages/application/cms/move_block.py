from lessonpages.models.block import Block
from lessonpages.domain.policy import AuthContext, BLOCK_MOVE, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action
from lessonpages.utils.order import swap_adjacent


def move_block(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    block_id: str,
    direction: str,
) -> Block:
    """
    Swap a block with its neighbour ("up" or "down").

    First-up and last-down are silent no-ops.
    """
    authorize(ctx, BLOCK_MOVE)

    block = repo.require_block(block_id)
    blocks = repo.list_blocks(block.page_id)

    with repo.transaction():
        swapped = swap_adjacent(blocks, block.id, direction)

        if swapped:
            log_action(
                action="block.move",
                entity_type="block",
                entity_id=block.id,
                actor_id=ctx.id,
                payload={
                    "page_id": block.page_id,
                    "direction": direction,
                    "position": block.position,
                },
            )

    return block
