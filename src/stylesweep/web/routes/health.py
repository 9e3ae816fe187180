from __future__ import annotations

from flask import Blueprint, jsonify

from stylesweep import __version__

health_bp = Blueprint("health", __name__)


@health_bp.route("/health")
def health():
    """Liveness check."""
    return jsonify({"status": "ok", "version": __version__})
