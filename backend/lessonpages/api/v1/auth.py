from flask import jsonify, url_for
from flask_jwt_extended import (
    create_access_token,
    set_access_cookies,
    unset_jwt_cookies,
)
from lessonpages.application.users.authenticate import authenticate
from lessonpages.utils.decorators import authenticated
from lessonpages.utils.form import text_field
from . import v1_bp, repository, submitted_data


@v1_bp.route("/auth/login", methods=["GET"])
def login_form():
    # Entry point unauthenticated requests are redirected to
    return jsonify({
        "message": "Login required",
        "login_url": url_for("v1.login"),
        "fields": ["username", "password"],
    }), 200


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = submitted_data()

    ctx = authenticate(
        repo=repository(),
        username=text_field(data, "username").strip(),
        password=text_field(data, "password"),
    )

    access_token = create_access_token(
        identity=ctx.id,
        additional_claims=ctx.additional_claims(),
    )

    response = jsonify({
        "access_token": access_token,
        "user": {"id": ctx.id, "username": ctx.username, "role": ctx.role},
    })
    set_access_cookies(response, access_token)
    return response, 200


@v1_bp.route("/auth/logout", methods=["POST"])
def logout():
    # Unconditional: works with or without a valid session
    response = jsonify({"message": "Logged out"})
    unset_jwt_cookies(response)
    return response, 200


@v1_bp.route("/auth/me", methods=["GET"])
@authenticated
def me(ctx):
    return jsonify({"id": ctx.id, "username": ctx.username, "role": ctx.role}), 200
