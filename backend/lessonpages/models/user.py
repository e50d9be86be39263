from werkzeug.security import generate_password_hash, check_password_hash
from lessonpages.extensions import db
from .base import BaseModel


class User(BaseModel):
    __tablename__ = 'users'

    username = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)

    role = db.Column(db.String(20), nullable=False, default='editor')

    __table_args__ = (
        db.CheckConstraint("role IN ('admin', 'editor')", name="ck_user_role"),
    )

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
