# lessonpages/api/v1/cms.py
from flask import request, jsonify
from lessonpages.application.cms.add_block import add_block
from lessonpages.application.cms.create_page import create_page
from lessonpages.application.cms.delete_block import delete_block
from lessonpages.application.cms.delete_page import delete_page
from lessonpages.application.cms.list_pages import get_page_for_editing, list_all_pages
from lessonpages.application.cms.move_block import move_block
from lessonpages.application.cms.update_block import update_block
from lessonpages.application.cms.update_page import update_page
from lessonpages.domain.policy import ADMIN_VIEW, authorize
from lessonpages.normalizers.block import normalize_block
from lessonpages.normalizers.page import normalize_page
from lessonpages.utils.decorators import authenticated
from lessonpages.utils.form import text_field
from . import v1_bp, repository, submitted_data


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/admin/pages", methods=["GET"])
@authenticated
def admin_list_pages(ctx):
    status = request.args.get("status")  # draft | published | None
    pages = list_all_pages(repo=repository(), ctx=ctx, status=status)

    return jsonify({
        "items": [normalize_page(p, admin=True) for p in pages],
    }), 200


@v1_bp.route("/admin/pages", methods=["POST"])
@authenticated
def admin_create_page(ctx):
    page = create_page(repo=repository(), ctx=ctx, data=submitted_data())

    return jsonify({
        "id": page.id,
        "slug": page.slug,
        "message": "Page created successfully"
    }), 201


@v1_bp.route("/admin/pages/<page_id>", methods=["GET"])
@authenticated
def admin_get_page(ctx, page_id):
    page, blocks = get_page_for_editing(repo=repository(), ctx=ctx, page_id=page_id)
    return jsonify(normalize_page(page, blocks=blocks, admin=True)), 200


@v1_bp.route("/admin/pages/<page_id>", methods=["PUT"])
@authenticated
def admin_update_page(ctx, page_id):
    page = update_page(
        repo=repository(),
        ctx=ctx,
        page_id=page_id,
        data=submitted_data(),
        if_unmodified_since=request.headers.get("If-Unmodified-Since"),
    )

    return jsonify({
        "id": page.id,
        "slug": page.slug,
        "message": "Page updated successfully"
    }), 200


@v1_bp.route("/admin/pages/<page_id>", methods=["DELETE"])
@authenticated
def admin_delete_page(ctx, page_id):
    delete_page(repo=repository(), ctx=ctx, page_id=page_id)
    return jsonify({"message": "Page deleted successfully"}), 200


# ------------------------
# Blocks
# ------------------------

@v1_bp.route("/admin/pages/<page_id>/blocks", methods=["GET"])
@authenticated
def admin_list_blocks(ctx, page_id):
    page, blocks = get_page_for_editing(repo=repository(), ctx=ctx, page_id=page_id)

    return jsonify({
        "page": normalize_page(page, admin=True),
        "items": [normalize_block(b, admin=True) for b in blocks],
    }), 200


@v1_bp.route("/admin/pages/<page_id>/blocks", methods=["POST"])
@authenticated
def admin_add_block(ctx, page_id):
    data = submitted_data()

    block = add_block(
        repo=repository(),
        ctx=ctx,
        page_id=page_id,
        block_type=text_field(data, "type"),
    )

    return jsonify({
        "id": block.id,
        "position": block.position,
        "message": "Block created successfully"
    }), 201


@v1_bp.route("/admin/blocks/<block_id>", methods=["GET"])
@authenticated
def admin_get_block(ctx, block_id):
    authorize(ctx, ADMIN_VIEW)
    block = repository().require_block(block_id)
    return jsonify(normalize_block(block, admin=True)), 200


@v1_bp.route("/admin/blocks/<block_id>", methods=["PUT"])
@authenticated
def admin_update_block(ctx, block_id):
    block = update_block(
        repo=repository(),
        ctx=ctx,
        block_id=block_id,
        data=submitted_data(),
        if_unmodified_since=request.headers.get("If-Unmodified-Since"),
    )

    return jsonify(normalize_block(block, admin=True)), 200


@v1_bp.route("/admin/blocks/<block_id>", methods=["DELETE"])
@authenticated
def admin_delete_block(ctx, block_id):
    page_id = delete_block(repo=repository(), ctx=ctx, block_id=block_id)

    return jsonify({
        "page_id": page_id,
        "message": "Block deleted and positions re-compacted"
    }), 200


@v1_bp.route("/admin/blocks/<block_id>/move", methods=["POST"])
@authenticated
def admin_move_block(ctx, block_id):
    data = submitted_data()
    direction = text_field(data, "dir") or text_field(data, "direction")

    block = move_block(repo=repository(), ctx=ctx, block_id=block_id, direction=direction)

    return jsonify({
        "id": block.id,
        "position": block.position,
    }), 200
