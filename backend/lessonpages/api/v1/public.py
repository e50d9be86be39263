from flask import jsonify
from lessonpages.application.cms.list_pages import get_public_page, list_published_pages
from lessonpages.normalizers.page import normalize_page
from . import v1_bp, repository


@v1_bp.route("/pages", methods=["GET"])
def list_public_pages():
    pages = list_published_pages(repo=repository())
    return jsonify({"items": [normalize_page(p) for p in pages]}), 200


@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_page(slug):
    page, blocks = get_public_page(repo=repository(), slug=slug)
    return jsonify(normalize_page(page, blocks=blocks)), 200
