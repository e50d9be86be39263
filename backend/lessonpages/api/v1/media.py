from flask import request, jsonify
from lessonpages.application.media.delete_media import delete_media
from lessonpages.application.media.upload_media import upload_media
from lessonpages.domain.policy import ADMIN_VIEW, authorize
from lessonpages.normalizers.media import normalize_media
from lessonpages.utils.decorators import authenticated
from . import v1_bp, repository


@v1_bp.route("/admin/media", methods=["GET"])
@authenticated
def admin_list_media(ctx):
    authorize(ctx, ADMIN_VIEW)
    items = repository().list_media()
    return jsonify({"items": [normalize_media(m) for m in items]}), 200


@v1_bp.route("/admin/media", methods=["POST"])
@authenticated
def admin_upload_media(ctx):
    media = upload_media(repo=repository(), ctx=ctx, file=request.files.get("file"))
    return jsonify(normalize_media(media)), 201


@v1_bp.route("/admin/media/<media_id>", methods=["DELETE"])
@authenticated
def admin_delete_media(ctx, media_id):
    delete_media(repo=repository(), ctx=ctx, media_id=media_id)
    return jsonify({"message": "Media deleted"}), 200
