import os
from flask import Flask, send_file, send_from_directory, current_app
from sqlalchemy import event
from sqlalchemy.engine import Engine
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .errors import register_error_handlers, register_jwt_handlers
from .cli import register_cli, init_database
from flask_swagger_ui import get_swaggerui_blueprint


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # ON DELETE CASCADE on blocks.page_id is only enforced with this pragma
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_app(config_name: str = "development", overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)
    register_jwt_handlers(jwt)
    register_cli(app)

    # -------------------------------------------------
    # Uploaded media (public)
    # -------------------------------------------------
    upload_prefix = app.config["UPLOAD_URL_PREFIX"].rstrip("/")

    @app.route(f"{upload_prefix}/<path:filename>", methods=["GET"], endpoint="uploaded_file")
    def uploaded_file(filename):
        return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC)
    # -------------------------------------------------
    @app.route("/openapi/cms.yaml", methods=["GET"], endpoint="openapi_cms")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "cms_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("cms_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/cms.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Lessonpages CMS API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    # -------------------------------------------------
    # Bootstrap (schema + seeded admin); failure aborts startup
    # -------------------------------------------------
    if app.config.get("AUTO_INIT_DB"):
        with app.app_context():
            init_database()

    return app
