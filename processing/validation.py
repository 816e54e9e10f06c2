"""
Request-body validation for the gardener and tip endpoints.
Checks required fields and identifiers before anything reaches MongoDB,
and builds the documents the storage layer writes.
"""
from bson import ObjectId

from errors import ValidationError

TIP_OPTIONAL_FIELDS = (
    "plant_type_or_topic",
    "difficulty",
    "category",
    "availability",
    "author_name",
)

# Fields a PUT replaces; the identifier and likes are never touched.
TIP_MUTABLE_FIELDS = (
    "title",
    "plant_type_or_topic",
    "difficulty",
    "description",
    "images",
    "category",
    "availability",
)


# ── Field checks ──────────────────────────────────────────────────

def require_object(body) -> dict:
    """Return *body* if it is a JSON object, otherwise raise ValidationError."""
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def require_fields(data: dict, *names: str) -> None:
    """Raise ValidationError unless every field in *names* is present and non-empty."""
    if any(not data.get(name) for name in names):
        listed = ", ".join(names[:-1]) + " and " + names[-1] if len(names) > 1 else names[0]
        raise ValidationError(f"{listed} are required")


def parse_object_id(value: str) -> ObjectId:
    """Convert a path identifier to an ObjectId, rejecting malformed values."""
    if not ObjectId.is_valid(value):
        raise ValidationError("Invalid tip id")
    return ObjectId(value)


# ── Document builders ─────────────────────────────────────────────

def build_gardener(data) -> dict:
    """Validate a gardener payload; extra fields pass through untouched."""
    data = require_object(data)
    require_fields(data, "name", "email")
    return {k: v for k, v in data.items() if k != "_id"}


def build_tip(data) -> dict:
    """Validate a tip payload and return the document to insert."""
    data = require_object(data)
    require_fields(data, "title", "description", "author_email")
    tip = {
        "title": data["title"],
        "description": data["description"],
        "author_email": data["author_email"],
        "images": data.get("images") or [],
        "likes": 0,
    }
    for name in TIP_OPTIONAL_FIELDS:
        tip[name] = data.get(name)
    return tip


def build_tip_update(data) -> dict:
    """
    Return the $set payload for a tip update.
    Every mutable field is replaced; absent ones become None (images → []).
    """
    if data is None:
        data = {}
    data = require_object(data)
    fields = {name: data.get(name) for name in TIP_MUTABLE_FIELDS}
    fields["images"] = fields["images"] or []
    return fields
