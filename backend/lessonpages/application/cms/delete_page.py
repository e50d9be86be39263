from lessonpages.domain.policy import AuthContext, PAGE_DELETE, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action


def delete_page(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    page_id: str,
) -> None:
    """
    Hard-delete a page and all its blocks in one transaction.

    Admin only. The ORM cascade removes the blocks; the foreign key's
    ON DELETE CASCADE covers rows the session never loaded.
    """
    authorize(ctx, PAGE_DELETE)

    page = repo.require_page(page_id)
    block_count = len(page.blocks)

    with repo.transaction():
        repo.delete(page)

        log_action(
            action="page.delete",
            entity_type="page",
            entity_id=page_id,
            actor_id=ctx.id,
            payload={
                "blocks": block_count,
            },
        )
