from lessonpages.extensions import db
from .base import BaseModel, TimestampMixin


class Block(BaseModel, TimestampMixin):
    __tablename__ = "blocks"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("pages.id", ondelete="CASCADE"),
        nullable=False,
    )
    type = db.Column(db.String(20), nullable=False)  # text, image, video, callout, quiz
    data_json = db.Column(db.Text, nullable=False, default="{}")  # opaque, see domain.blocks
    position = db.Column(db.Integer, nullable=False)

    # Relationship to parent Page
    page = db.relationship("Page", back_populates="blocks")

    # No unique (page_id, position): adjacent swaps pass through a duplicate
    __table_args__ = (
        db.CheckConstraint(
            "type IN ('text', 'image', 'video', 'callout', 'quiz')",
            name="ck_block_type",
        ),
        db.Index("idx_block_page_position", "page_id", "position"),
    )
