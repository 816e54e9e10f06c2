"""
Central configuration for the Gardening Community API.
Values are read from environment variables (a local .env file is loaded first).
"""
import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ── MongoDB ────────────────────────────────────────────────────────
MONGODB_URI = os.getenv("MONGODB_URI", "").strip()
MONGO_SERVER_SELECTION_TIMEOUT_MS = int(
    os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
)

# Database / collection names
GARDENERS_DB_NAME = "gardenersDB"
COLLECTION_GARDENERS = "gardener"
TIPS_DB_NAME = "gardenersTipsDB"
COLLECTION_TIPS = "tips"

# ── CORS ───────────────────────────────────────────────────────────
CORS_ORIGINS = [
    "http://localhost:5173",
    "https://gardening-community-client.netlify.app",
]

# ── Logging ────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Flask ──────────────────────────────────────────────────────────
FLASK_HOST = os.getenv("HOST", "0.0.0.0")
FLASK_PORT = int(os.getenv("PORT", "5000"))
FLASK_DEBUG = _env_flag("FLASK_DEBUG")

# When set, the module-level Flask app is exported to a host-managed runtime
# and the store is connected lazily on the first request.
SERVERLESS = _env_flag("SERVERLESS")
