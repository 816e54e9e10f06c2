"""
Gardener profile persistence.
Profiles are stored as given; only name and email are enforced upstream.
"""
import logging

from pymongo.errors import PyMongoError

from errors import StoreOperationError
from storage.documents import insertion_result, serialize_doc
from storage.mongo_client import gardeners_collection

logger = logging.getLogger(__name__)


def list_gardeners() -> list:
    """Return every gardener document."""
    collection = gardeners_collection()
    try:
        return [serialize_doc(doc) for doc in collection.find()]
    except PyMongoError as exc:
        logger.error("Failed to fetch gardeners: %s", exc, exc_info=True)
        raise StoreOperationError("Failed to fetch gardeners") from exc


def create_gardener(gardener: dict) -> dict:
    """Insert one gardener and return the insertion result."""
    collection = gardeners_collection()
    try:
        result = collection.insert_one(gardener)
    except PyMongoError as exc:
        logger.error("Failed to create gardener: %s", exc, exc_info=True)
        raise StoreOperationError("Failed to create gardener") from exc
    logger.info("Gardener created: %s", result.inserted_id)
    return insertion_result(result)
