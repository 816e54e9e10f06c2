"""
Gardening Community API: Flask application entry point.
Serves the gardener and tip endpoints. The module-level ``app`` is the WSGI
handler exported to serverless hosts; ``python app.py`` serves it locally.
"""
import logging
import sys
from datetime import datetime, timezone

from flask import Flask, request, jsonify, json
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import (
    FLASK_HOST, FLASK_PORT, FLASK_DEBUG,
    CORS_ORIGINS, LOG_LEVEL, SERVERLESS,
)
from errors import (
    ApiError, ConfigurationError, NotFoundError, ValidationError,
)
from processing.validation import (
    build_gardener, build_tip, build_tip_update, parse_object_id,
)
from storage import gardeners, tips
from storage.mongo_client import ensure_connected, is_connected

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app, origins=CORS_ORIGINS, supports_credentials=True)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Health endpoints
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@app.route("/")
def index():
    return "API is running..."


@app.route("/health")
def health():
    return jsonify({
        "status": "ok",
        "mongo_connected": is_connected(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Gardener endpoints
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@app.route("/gardener", methods=["GET"])
def list_gardeners():
    return jsonify(gardeners.list_gardeners())


@app.route("/gardener", methods=["POST"])
def create_gardener():
    """Accepts JSON: {"name": "...", "email": "...", ...any extra fields}."""
    gardener = build_gardener(request.get_json(silent=True))
    return jsonify(gardeners.create_gardener(gardener)), 201


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Tip endpoints
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@app.route("/tips", methods=["GET"])
def list_tips():
    """Return all tips, optionally filtered with ?author_email=."""
    author_email = request.args.get("author_email", "")
    return jsonify(tips.list_tips(author_email or None))


@app.route("/tips", methods=["POST"])
def create_tip():
    """
    Accepts JSON: {"title", "description", "author_email", "author_name"?,
    "plant_type_or_topic"?, "difficulty"?, "images"?, "category"?, "availability"?}.
    likes always starts at 0.
    """
    tip = build_tip(request.get_json(silent=True))
    return jsonify(tips.create_tip(tip)), 201


@app.route("/tips/<tip_id>", methods=["PUT"])
def update_tip(tip_id):
    # id format is checked before touching the store
    object_id = parse_object_id(tip_id)
    fields = build_tip_update(request.get_json(silent=True))
    return jsonify(tips.update_tip(object_id, fields))


@app.route("/tips/<tip_id>", methods=["DELETE"])
def delete_tip(tip_id):
    object_id = parse_object_id(tip_id)
    return jsonify(tips.delete_tip(object_id))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Error handlers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@app.errorhandler(ApiError)
def handle_api_error(exc: ApiError):
    if isinstance(exc, ValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.path, exc.message)
    elif isinstance(exc, NotFoundError):
        logger.info("%s %s: %s", request.method, request.path, exc.message)
    elif isinstance(exc, ConfigurationError):
        logger.critical("%s %s failed: %s", request.method, request.path, exc.message)
    else:
        logger.error("%s %s failed: %s", request.method, request.path, exc.message)
    return jsonify(exc.to_response()), exc.http_status


@app.errorhandler(HTTPException)
def handle_http_error(exc: HTTPException):
    """Unknown routes, wrong methods, etc. still answer with JSON."""
    response = exc.get_response()
    response.data = json.dumps({"message": exc.description})
    response.content_type = "application/json"
    return response


@app.errorhandler(Exception)
def handle_unexpected_error(exc: Exception):
    logger.error("Unhandled exception on %s: %s", request.path, exc, exc_info=True)
    return jsonify({"message": "An unexpected error occurred"}), 500


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def main():
    if SERVERLESS:
        logger.info("SERVERLESS is set: export app.app to the host instead of serving locally")
        return
    try:
        ensure_connected()
    except ApiError as exc:
        logger.critical("Startup aborted: %s", exc.message)
        sys.exit(1)
    print(f"🌱 Gardening Community API starting on port {FLASK_PORT} …")
    app.run(host=FLASK_HOST, port=FLASK_PORT, debug=FLASK_DEBUG)


if __name__ == "__main__":
    main()
