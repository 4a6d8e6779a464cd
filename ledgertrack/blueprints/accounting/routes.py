from flask import current_app, jsonify
from flask_login import current_user, login_required

from ...errors import NotFound
from . import accounting_bp
from .helpers import entry_query, entry_service, entry_store, request_filter, request_json


@accounting_bp.route("", methods=["GET"])
@login_required
def list_entries():
    entries = entry_query().find(request_filter())
    return jsonify([e.to_dict() for e in entries])


@accounting_bp.route("/<entry_id>", methods=["GET"])
@login_required
def detail(entry_id):
    entry = entry_store().get_entry(entry_id)
    if entry is None:
        raise NotFound()
    return entry.to_dict()


@accounting_bp.route("", methods=["POST"])
@login_required
def create_entry():
    entry = entry_service().create(request_json(), actor_id=current_user.id)
    current_app.logger.info(f"POST /api/accounting -> {entry.id}")
    return entry.to_dict(), 201


@accounting_bp.route("/<entry_id>", methods=["PUT"])
@login_required
def update_entry(entry_id):
    entry = entry_service().update(entry_id, request_json())
    return entry.to_dict()


@accounting_bp.route("/<entry_id>", methods=["DELETE"])
@login_required
def delete_entry(entry_id):
    entry_service().remove(entry_id)
    return {"success": True}
