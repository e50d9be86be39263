# lessonpages/repository.py
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError

from lessonpages.domain.exceptions import NotFoundError, StorageFault
from lessonpages.models import Block, Media, Page, User
from lessonpages.utils.transaction import transactional


class CMSRepository:
    """
    Persistence contract for pages, blocks, media and users.

    Wraps an explicit SQLAlchemy session. Services receive the repository
    as an argument; nothing here reaches for request or module globals.
    """

    def __init__(self, session):
        self.session = session

    # -------------------------------------------------
    # Unit of work
    # -------------------------------------------------
    def transaction(self, *, conflict_message: str = "Resource already exists."):
        return transactional(self.session, conflict_message=conflict_message)

    def add(self, entity):
        self.session.add(entity)
        return entity

    def delete(self, entity):
        self.session.delete(entity)

    def flush(self):
        self.session.flush()

    def _scalars(self, stmt) -> list:
        try:
            return list(self.session.execute(stmt).scalars())
        except DBAPIError as exc:
            raise StorageFault("Storage is unavailable.") from exc

    def _scalar(self, stmt):
        try:
            return self.session.execute(stmt).scalar_one_or_none()
        except DBAPIError as exc:
            raise StorageFault("Storage is unavailable.") from exc

    # -------------------------------------------------
    # Pages
    # -------------------------------------------------
    def get_page(self, page_id: str) -> Optional[Page]:
        return self._scalar(select(Page).where(Page.id == page_id))

    def require_page(self, page_id: str) -> Page:
        page = self.get_page(page_id)
        if not page:
            raise NotFoundError("Page not found")
        return page

    def get_page_by_slug(self, slug: str, *, published_only: bool = False) -> Optional[Page]:
        stmt = select(Page).where(Page.slug == slug)
        if published_only:
            stmt = stmt.where(Page.status == "published")
        return self._scalar(stmt)

    def list_pages(self, *, status: Optional[str] = None) -> List[Page]:
        """Most recently updated first. `status=None` lists everything (admin)."""
        stmt = select(Page)
        if status:
            stmt = stmt.where(Page.status == status)
        return self._scalars(stmt.order_by(Page.updated_at.desc(), Page.created_at.desc()))

    def slug_taken(self, slug: str, *, exclude_id: Optional[str] = None) -> bool:
        stmt = select(Page.id).where(Page.slug == slug)
        if exclude_id:
            stmt = stmt.where(Page.id != exclude_id)
        return bool(self._scalars(stmt.limit(1)))

    # -------------------------------------------------
    # Blocks
    # -------------------------------------------------
    def list_blocks(self, page_id: str) -> List[Block]:
        return self._scalars(
            select(Block)
            .where(Block.page_id == page_id)
            .order_by(Block.position.asc(), Block.id.asc())
        )

    def count_blocks(self, page_id: str) -> int:
        stmt = select(func.count(Block.id)).where(Block.page_id == page_id)
        return self._scalar(stmt) or 0

    def get_block(self, block_id: str) -> Optional[Block]:
        return self._scalar(select(Block).where(Block.id == block_id))

    def require_block(self, block_id: str) -> Block:
        block = self.get_block(block_id)
        if not block:
            raise NotFoundError("Block not found")
        return block

    # -------------------------------------------------
    # Media
    # -------------------------------------------------
    def list_media(self) -> List[Media]:
        return self._scalars(select(Media).order_by(Media.created_at.desc()))

    def get_media(self, media_id: str) -> Optional[Media]:
        return self._scalar(select(Media).where(Media.id == media_id))

    def require_media(self, media_id: str) -> Media:
        media = self.get_media(media_id)
        if not media:
            raise NotFoundError("Media not found")
        return media

    # -------------------------------------------------
    # Users
    # -------------------------------------------------
    def list_users(self) -> List[User]:
        return self._scalars(select(User).order_by(User.created_at.desc()))

    def get_user(self, user_id: str) -> Optional[User]:
        return self._scalar(select(User).where(User.id == str(user_id)))

    def require_user(self, user_id: str) -> User:
        user = self.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self._scalar(select(User).where(User.username == username))

    def username_taken(self, username: str) -> bool:
        return self.get_user_by_username(username) is not None
