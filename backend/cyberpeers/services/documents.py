"""
Helpers for turning driver documents and results into JSON-ready dicts.
"""
from typing import Any, Optional

from bson import ObjectId
from pymongo.results import InsertOneResult, UpdateResult


def serialize_document(doc: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Copy a document with its ObjectId rendered as a string."""
    if doc is None:
        return None
    doc = dict(doc)
    if isinstance(doc.get("_id"), ObjectId):
        doc["_id"] = str(doc["_id"])
    return doc


def insert_result_to_dict(result: InsertOneResult) -> dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": str(result.inserted_id),
    }


def update_result_to_dict(result: UpdateResult) -> dict[str, Any]:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 0 if upserted_id is None else 1,
        "upsertedId": None if upserted_id is None else str(upserted_id),
    }
