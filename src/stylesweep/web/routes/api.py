from __future__ import annotations

from flask import Blueprint, Response, current_app, jsonify, request

from stylesweep.errors import UnknownDialectError
from stylesweep.extraction import dialect_class_attributes, extract_class_names
from stylesweep.model.dialect import DIALECTS, Dialect, resolve_dialect
from stylesweep.stylesheet import optimize_report
from stylesweep.validation import validate

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.errorhandler(UnknownDialectError)
def unknown_dialect(exc: UnknownDialectError):
    return jsonify({"error": str(exc)}), 400


@api_bp.route("/validate", methods=["OPTIONS"])
@api_bp.route("/classes", methods=["OPTIONS"])
@api_bp.route("/optimize", methods=["OPTIONS"])
@api_bp.route("/optimize/download", methods=["OPTIONS"])
def preflight():
    """Handle CORS preflight for the POST endpoints."""
    return "", 204


def _json_body() -> dict:
    """The request's JSON object; anything else (absent, malformed, an array) is empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _request_dialect(data: dict) -> Dialect:
    config = current_app.extensions["config"]
    return resolve_dialect(data.get("dialect") or config.default_dialect)


def _used_classes(data: dict) -> set[str] | None:
    """Classes from the request's markup, or None when there is none to filter by."""
    markup = data.get("markup")
    if not isinstance(markup, str) or not markup.strip():
        return None
    return extract_class_names(markup, dialect_class_attributes(_request_dialect(data)))


@api_bp.route("/dialects")
def list_dialects():
    """Return the dialect registry."""
    return jsonify([
        {
            "id": config.id.value,
            "long_id": config.id.long_id,
            "name": config.display_name,
            "attributes": list(config.attributes),
        }
        for config in DIALECTS.values()
    ])


@api_bp.route("/validate", methods=["POST"])
def validate_source():
    """Validate source text: ``{"source": ..., "dialect": ...}``."""
    data = _json_body()
    if not data or not isinstance(data.get("source"), str):
        return jsonify({"error": "source required"}), 400

    result = validate(data["source"], _request_dialect(data))
    return jsonify(result.to_dict())


@api_bp.route("/classes", methods=["POST"])
def used_classes():
    """List class names referenced by ``{"markup": ...}``."""
    data = _json_body()
    if not data or not isinstance(data.get("markup"), str):
        return jsonify({"error": "markup required"}), 400

    found = extract_class_names(
        data["markup"], dialect_class_attributes(_request_dialect(data))
    )
    return jsonify({"classes": sorted(found), "count": len(found)})


@api_bp.route("/optimize", methods=["POST"])
def optimize_css():
    """Optimize ``{"css": ..., "markup": ...}``; markup enables class filtering."""
    data = _json_body()
    if not data or "css" not in data:
        return jsonify({"error": "css required"}), 400

    report = optimize_report(data["css"], _used_classes(data))
    return jsonify(report.to_dict())


@api_bp.route("/optimize/download", methods=["POST"])
def download_css():
    """Same as /optimize but returns the CSS as a file attachment."""
    data = _json_body()
    if not data or "css" not in data:
        return jsonify({"error": "css required"}), 400

    report = optimize_report(data["css"], _used_classes(data))
    filename = current_app.extensions["config"].download_name
    return Response(
        report.output,
        mimetype="text/css",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
