from flask import current_app, jsonify, redirect, url_for
from sqlalchemy.exc import SQLAlchemyError
from lessonpages.domain.exceptions import AuthenticationRequired, CMSError, StorageFault

LOGIN_ENDPOINT = "v1.login_form"


def login_redirect():
    return redirect(url_for(LOGIN_ENDPOINT))


def error_response(error: CMSError, status_code=None):
    body = {
        "error": type(error).__name__,
        "message": error.message,
    }
    if error.context.get("data") is not None:
        body["data"] = error.context["data"]

    response = jsonify(body)
    response.status_code = status_code or error.status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(AuthenticationRequired)
    def handle_authentication_required(error):
        return login_redirect()

    @app.errorhandler(StorageFault)
    def handle_storage_fault(error):
        current_app.logger.error("Storage fault: %s", error.__cause__ or error)
        return error_response(StorageFault("Something went wrong. Please try again later."))

    @app.errorhandler(CMSError)
    def handle_cms_error(error):
        return error_response(error)

    @app.errorhandler(SQLAlchemyError)
    def handle_sqlalchemy_error(error):
        current_app.logger.exception("Unhandled database error")
        return error_response(StorageFault("Something went wrong. Please try again later."))


def register_jwt_handlers(jwt):
    """Missing, malformed or expired tokens all send the caller to the login entry point."""

    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return login_redirect()

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return login_redirect()

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return login_redirect()
