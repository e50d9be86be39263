from lessonpages.extensions import db
from .base import BaseModel


class Media(BaseModel):
    __tablename__ = "media"

    filename = db.Column(db.String(255), nullable=False, unique=True)  # stored name
    original_name = db.Column(db.String(255), nullable=False)
    mimetype = db.Column(db.String(120), nullable=False)
    size = db.Column(db.Integer, nullable=False)
    url = db.Column(db.String(512), nullable=False)
