from typing import List, Optional, Tuple
from lessonpages.models.block import Block
from lessonpages.models.page import Page
from lessonpages.domain.exceptions import NotFoundError
from lessonpages.domain.policy import AuthContext, ADMIN_VIEW, authorize
from lessonpages.repository import CMSRepository


def list_published_pages(*, repo: CMSRepository) -> List[Page]:
    return repo.list_pages(status="published")


def list_all_pages(*, repo: CMSRepository, ctx: AuthContext, status: Optional[str] = None) -> List[Page]:
    authorize(ctx, ADMIN_VIEW)
    return repo.list_pages(status=status)


def get_public_page(*, repo: CMSRepository, slug: str) -> Tuple[Page, List[Block]]:
    """A published page and its blocks in display order. Drafts are not found."""
    page = repo.get_page_by_slug(slug, published_only=True)
    if not page:
        raise NotFoundError("Page not found")
    return page, repo.list_blocks(page.id)


def get_page_for_editing(*, repo: CMSRepository, ctx: AuthContext, page_id: str) -> Tuple[Page, List[Block]]:
    authorize(ctx, ADMIN_VIEW)
    page = repo.require_page(page_id)
    return page, repo.list_blocks(page.id)
