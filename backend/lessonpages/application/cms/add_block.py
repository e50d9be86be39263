from lessonpages.models.block import Block
from lessonpages.domain.blocks import default_payload, encode_payload
from lessonpages.domain.invariants.block import assert_block_positions
from lessonpages.domain.policy import AuthContext, BLOCK_CREATE, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action
from lessonpages.utils.order import next_position


def add_block(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    page_id: str,
    block_type: str,
) -> Block:
    """Append a block seeded with the default payload for its type."""
    authorize(ctx, BLOCK_CREATE)

    page = repo.require_page(page_id)
    payload = default_payload(block_type)  # rejects unknown types

    block = Block()
    block.page_id = page.id
    block.type = block_type
    block.data_json = encode_payload(payload)
    block.position = next_position(repo.count_blocks(page.id))  # append at the end

    with repo.transaction():
        repo.add(block)
        repo.flush()

        assert_block_positions(repo.list_blocks(page.id))

        log_action(
            action="block.create",
            entity_type="block",
            entity_id=block.id,
            actor_id=ctx.id,
            payload={
                "page_id": page.id,
                "type": block.type,
                "position": block.position,
            },
        )

    return block
