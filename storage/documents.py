"""
Helpers shared by the storage modules: making MongoDB results JSON-friendly.
"""
from pymongo.results import InsertOneResult


def serialize_doc(doc: dict) -> dict:
    """Render the ObjectId under ``_id`` as its hex string."""
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def insertion_result(result: InsertOneResult) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": str(result.inserted_id),
    }
