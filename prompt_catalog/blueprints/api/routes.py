from flask import current_app, jsonify, request

from ...errors import NotFoundError
from ...schemas import parse_category_filter, parse_id, validate_prompt_create
from ...serializers import (
    category_detail_to_dict,
    category_to_dict,
    component_to_dict,
    prompt_to_dict,
    prompt_view_to_dict,
)
from ...storage import get_storage
from . import api_bp


# ---- components ----
@api_bp.route("/components", methods=["GET"])
def list_components():
    components = get_storage().list_components()
    return jsonify([component_to_dict(c) for c in components]), 200


# ---- categories ----
@api_bp.route("/categories", methods=["GET"])
def list_categories():
    categories = get_storage().list_categories()
    return jsonify([category_to_dict(c) for c in categories]), 200


@api_bp.route("/categories/<category_id>", methods=["GET"])
def get_category(category_id: str):
    key = parse_id(category_id)
    detail = get_storage().get_category(key) if key is not None else None
    if detail is None:
        raise NotFoundError("Category not found")
    return jsonify(category_detail_to_dict(detail)), 200


@api_bp.route("/categories/slug/<slug>", methods=["GET"])
def get_category_by_slug(slug: str):
    category = get_storage().get_category_by_slug(slug)
    if category is None:
        raise NotFoundError("Category not found")
    return jsonify(category_to_dict(category)), 200


# ---- prompts ----
@api_bp.route("/prompts", methods=["GET"])
def list_prompts():
    search = request.args.get("search") or None
    raw_category_id = request.args.get("categoryId")
    category_id = parse_category_filter(raw_category_id)
    if raw_category_id and category_id is None:
        current_app.logger.debug(
            "api.list_prompts: ignoring malformed categoryId=%r", raw_category_id
        )

    prompts = get_storage().list_prompts(search=search, category_id=category_id)
    return jsonify([prompt_view_to_dict(p) for p in prompts]), 200


@api_bp.route("/prompts/<prompt_id>", methods=["GET"])
def get_prompt(prompt_id: str):
    key = parse_id(prompt_id)
    view = get_storage().get_prompt(key) if key is not None else None
    if view is None:
        raise NotFoundError("Prompt not found")
    return jsonify(prompt_view_to_dict(view)), 200


@api_bp.route("/prompts", methods=["POST"])
def create_prompt():
    payload = request.get_json(silent=True)
    data, issue = validate_prompt_create(payload)
    if issue is not None:
        current_app.logger.debug(
            "api.create_prompt: rejected field=%s message=%s", issue.field, issue.message
        )
        return jsonify(issue.to_dict()), 400

    prompt = get_storage().create_prompt(data)
    current_app.logger.info(
        "api.create_prompt: created prompt id=%s category_id=%s",
        prompt.id,
        prompt.category_id,
    )
    return jsonify(prompt_to_dict(prompt)), 201


@api_bp.route("/prompts/<prompt_id>/copy", methods=["POST"])
def record_copy(prompt_id: str):
    # Acknowledge only; copy counts are not persisted yet.
    current_app.logger.info("api.record_copy: prompt_id=%s", prompt_id)
    return jsonify({"success": True}), 200
