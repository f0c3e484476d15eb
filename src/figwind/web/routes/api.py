from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from figwind.errors import DictionaryError
from figwind.pipeline import convert

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, DELETE, OPTIONS"
    return response


@api_bp.route("/convert", methods=["OPTIONS"])
@api_bp.route("/vars", methods=["OPTIONS"])
@api_bp.route("/vars/<path:name>", methods=["OPTIONS"])
def preflight(name: str | None = None):
    """Handle CORS preflight requests."""
    return "", 204


def _dictionary():
    return current_app.extensions["dictionary"]


@api_bp.route("/convert", methods=["POST"])
def convert_css():
    """Convert CSS declarations to Tailwind classes."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("css"), str):
        return jsonify({"error": "css required"}), 400

    result = convert(
        data["css"],
        _dictionary(),
        prefixes=str(data.get("prefixes") or ""),
        existing=str(data.get("existing") or ""),
    )
    return jsonify({"output": result.output, "classes": result.merged})


@api_bp.route("/vars")
def list_vars():
    """Return the whole variable dictionary."""
    return jsonify(_dictionary().all())


@api_bp.route("/vars", methods=["POST"])
def add_var():
    """Add or replace a dictionary entry."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "name and value required"}), 400
    name = data.get("name")
    value = data.get("value")
    if not isinstance(name, str) or not isinstance(value, str):
        return jsonify({"error": "name and value required"}), 400
    try:
        _dictionary().set(name, value)
    except DictionaryError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify({"name": name.strip(), "value": value.strip()}), 201


@api_bp.route("/vars/<path:name>", methods=["DELETE"])
def remove_var(name: str):
    """Remove a dictionary entry."""
    if not _dictionary().remove(name):
        return jsonify({"error": "not found"}), 404
    return "", 204
