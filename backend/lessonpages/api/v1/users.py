from flask import jsonify
from lessonpages.application.users.create_user import create_user
from lessonpages.application.users.delete_user import delete_user
from lessonpages.application.users.list_users import list_users
from lessonpages.normalizers.user import normalize_user
from lessonpages.utils.decorators import authenticated
from . import v1_bp, repository, submitted_data


@v1_bp.route("/admin/users", methods=["GET"])
@authenticated
def admin_list_users(ctx):
    users = list_users(repo=repository(), ctx=ctx)
    return jsonify([normalize_user(user) for user in users]), 200


@v1_bp.route("/admin/users", methods=["POST"])
@authenticated
def admin_create_user(ctx):
    user = create_user(repo=repository(), ctx=ctx, data=submitted_data())
    return jsonify(normalize_user(user)), 201


@v1_bp.route("/admin/users/<user_id>", methods=["DELETE"])
@authenticated
def admin_delete_user(ctx, user_id):
    delete_user(repo=repository(), ctx=ctx, user_id=user_id)
    return jsonify({"message": "User deleted"}), 200
