# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId


def id_filter(value: str) -> Dict[str, Any]:
    """
    Build a lookup filter for an ID that may be a MongoDB ObjectId string
    or a custom "id" field value
    """
    try:
        return {"_id": ObjectId(value)}
    except (InvalidId, ValueError, TypeError):
        return {"id": value}


def document_id(document: Dict[str, Any]) -> Optional[str]:
    """Prefer the custom "id" field over MongoDB's "_id"."""
    if "id" in document:
        return document["id"]
    if "_id" in document:
        return str(document["_id"])
    return None
