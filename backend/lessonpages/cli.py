import os
import click
from flask import current_app
from lessonpages.extensions import db
from lessonpages.repository import CMSRepository
from lessonpages.application.users.seed_admin import seed_admin


def init_database():
    """
    Create tables, the upload folder and the bootstrap admin.

    Any failure here is fatal: it is logged and re-raised so the process
    does not start against a store it cannot use.
    """
    try:
        db.create_all()
        os.makedirs(current_app.config["UPLOAD_FOLDER"], exist_ok=True)
        seed_admin(
            repo=CMSRepository(db.session),
            username=current_app.config["SEED_ADMIN_USERNAME"],
            password=current_app.config["SEED_ADMIN_PASSWORD"],
        )
    except Exception:
        current_app.logger.critical("Could not initialise the database", exc_info=True)
        raise


def register_cli(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Create tables and seed the admin account."""
        init_database()
        click.echo("Database initialised.")
