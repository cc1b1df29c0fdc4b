from flask import Blueprint, current_app, jsonify

from utils.time_utils import _utcnow

api_health_bp = Blueprint("api_health", __name__)


@api_health_bp.route("/health")
def health():
    return jsonify({
        "ok": True,
        "service": current_app.config.get("SERVICE_NAME"),
        "timestamp": _utcnow().isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }), 200
