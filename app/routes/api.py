"""
JSON endpoints for the login demo.

Routes:
    GET    /api/health        - Health check
"""

from flask import Blueprint, Response, jsonify

api_bp = Blueprint("api", __name__)


@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint used by the live-server readiness poll."""
    return jsonify({"status": "healthy", "service": "login-demo"}), 200
