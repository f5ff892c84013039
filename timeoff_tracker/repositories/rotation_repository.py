# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: On-call rotation storage.
A key-value collection: each document's _id is a well-known rotation key
and its rotationData field holds the caller's payload untouched.
"""

from typing import Any, Optional

from pymongo.collection import Collection


class RotationRepository:
    """MongoDB-backed key-value store for rotation payloads."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    # ── Read ──

    def get(self, key: str) -> Optional[dict[str, Any]]:
        """Return the stored payload, or None if the key was never written."""
        doc = self._collection.find_one({"_id": key})
        if doc is None:
            return None
        return doc.get("rotationData") or {}

    # ── Write ──

    def put(self, key: str, rotation_data: dict[str, Any]) -> None:
        """Create the record if absent, else replace its payload wholesale."""
        self._collection.update_one(
            {"_id": key},
            {"$set": {"rotationData": rotation_data}},
            upsert=True,
        )
