"""
MongoDB connection helper.
Lazily opens a single MongoClient per process and hands out the gardener and
tip collection handles used by the storage modules.
"""
import logging
import threading

from pymongo import MongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from config import (
    MONGODB_URI, MONGO_SERVER_SELECTION_TIMEOUT_MS,
    GARDENERS_DB_NAME, COLLECTION_GARDENERS,
    TIPS_DB_NAME, COLLECTION_TIPS,
)
from errors import ConfigurationError, StoreConnectionError

logger = logging.getLogger(__name__)

# Replaced in tests with a factory returning an in-memory client.
_client_factory = MongoClient

_lock = threading.Lock()
_connected = False
_client = None
_gardeners = None
_tips = None


def ensure_connected() -> None:
    """
    Connect to MongoDB on the first call; every later call is a no-op.
    Concurrent first callers are serialised so at most one client is opened.
    """
    global _connected, _client, _gardeners, _tips
    if _connected:
        return
    with _lock:
        if _connected:
            return
        if not MONGODB_URI:
            logger.critical("MONGODB_URI is missing in environment variables")
            raise ConfigurationError("MONGODB_URI is not set")

        client = None
        try:
            # URI parsing and mongodb+srv DNS lookups happen at construction
            client = _client_factory(
                MONGODB_URI,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
                serverSelectionTimeoutMS=MONGO_SERVER_SELECTION_TIMEOUT_MS,
            )
            client.admin.command("ping")
        except (PyMongoError, ValueError) as exc:
            if client is not None:
                client.close()
            logger.error("MongoDB connection error: %s", exc)
            raise StoreConnectionError("Failed to connect to database") from exc

        _client = client
        _gardeners = client[GARDENERS_DB_NAME][COLLECTION_GARDENERS]
        _tips = client[TIPS_DB_NAME][COLLECTION_TIPS]
        _connected = True
        logger.info("MongoDB connected")


def gardeners_collection():
    """Return the gardener collection handle, connecting if needed."""
    ensure_connected()
    return _gardeners


def tips_collection():
    """Return the tips collection handle, connecting if needed."""
    ensure_connected()
    return _tips


def is_connected() -> bool:
    """
    Quick connectivity check (used by the health endpoint).
    Reports False until a request has connected; never opens a connection itself.
    """
    client = _client
    if not _connected or client is None:
        return False
    try:
        client.admin.command("ping")
        return True
    except Exception:
        return False


def close_connection() -> None:
    """Close the client and forget the cached handles. Safe when not connected."""
    global _connected, _client, _gardeners, _tips
    with _lock:
        if _client is not None:
            _client.close()
            logger.info("MongoDB connection closed")
        _connected = False
        _client = None
        _gardeners = None
        _tips = None
