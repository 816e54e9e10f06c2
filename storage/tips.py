"""
Tip post persistence.
Each function performs exactly one MongoDB operation on the tips collection.
"""
import logging

from bson import ObjectId
from pymongo.errors import PyMongoError

from errors import NotFoundError, StoreOperationError
from storage.documents import insertion_result, serialize_doc
from storage.mongo_client import tips_collection

logger = logging.getLogger(__name__)


def list_tips(author_email: str | None = None) -> list:
    """Return all tips, or only those whose author_email matches exactly."""
    query = {"author_email": author_email} if author_email else {}
    collection = tips_collection()
    try:
        return [serialize_doc(doc) for doc in collection.find(query)]
    except PyMongoError as exc:
        logger.error("Failed to fetch tips: %s", exc, exc_info=True)
        raise StoreOperationError("Failed to fetch tips") from exc


def create_tip(tip: dict) -> dict:
    """Insert one tip and return the insertion result."""
    collection = tips_collection()
    try:
        result = collection.insert_one(tip)
    except PyMongoError as exc:
        logger.error("Failed to create tip: %s", exc, exc_info=True)
        raise StoreOperationError("Failed to create tip") from exc
    logger.info("Tip created: %s", result.inserted_id)
    return insertion_result(result)


def update_tip(tip_id: ObjectId, fields: dict) -> dict:
    """
    Replace the mutable fields of the tip with *tip_id*.
    Raises NotFoundError when no document matches.
    """
    collection = tips_collection()
    try:
        result = collection.update_one({"_id": tip_id}, {"$set": fields})
    except PyMongoError as exc:
        logger.error("Failed to update tip %s: %s", tip_id, exc, exc_info=True)
        raise StoreOperationError("Failed to update tip") from exc

    if result.matched_count == 0:
        raise NotFoundError("Tip not found")
    return {
        "message": "Tip updated successfully",
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
    }


def delete_tip(tip_id: ObjectId) -> dict:
    """Remove the tip with *tip_id*. Raises NotFoundError when nothing was deleted."""
    collection = tips_collection()
    try:
        result = collection.delete_one({"_id": tip_id})
    except PyMongoError as exc:
        logger.error("Failed to delete tip %s: %s", tip_id, exc, exc_info=True)
        raise StoreOperationError("Failed to delete tip") from exc

    if result.deleted_count == 0:
        raise NotFoundError("Tip not found")
    logger.info("Tip deleted: %s", tip_id)
    return {
        "message": "Tip deleted successfully",
        "deletedCount": result.deleted_count,
    }
