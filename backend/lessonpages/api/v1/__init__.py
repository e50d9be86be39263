from flask import Blueprint, request
from lessonpages.extensions import db
from lessonpages.repository import CMSRepository

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)


def repository() -> CMSRepository:
    """Repository bound to this request's session."""
    return CMSRepository(db.session)


def submitted_data() -> dict:
    """Form posts and JSON bodies are both accepted."""
    if request.form:
        return request.form.to_dict()
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import public
from . import cms
from . import media
from . import users
