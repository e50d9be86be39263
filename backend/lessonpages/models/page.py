from lessonpages.extensions import db
from .base import BaseModel, TimestampMixin


class Page(BaseModel, TimestampMixin):
    __tablename__ = 'pages'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    audience = db.Column(db.String(20), nullable=False, default='general')
    status = db.Column(db.String(20), nullable=False, default='draft', index=True)

    __table_args__ = (
        db.CheckConstraint("audience IN ('junior', 'undergrad', 'general')", name="ck_page_audience"),
        db.CheckConstraint("status IN ('draft', 'published')", name="ck_page_status"),
    )

    # Relationship to Blocks (ordered, cascade deletes)
    blocks = db.relationship(
        "Block",
        back_populates="page",
        order_by="Block.position",
        cascade="all, delete-orphan",
    )
