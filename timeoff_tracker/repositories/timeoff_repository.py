# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Time-off entry data access.
"""

from typing import Any

from pymongo import DESCENDING
from pymongo.collection import Collection

from timeoff_tracker.repositories.sequence import next_sequential_id

_PROJECTION = {"_id": 0}


class TimeOffRepository:
    """MongoDB-backed time-off entry storage."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    # ── Read ──

    def get_all(self) -> list[dict[str, Any]]:
        """Newest first. Dates are compared as raw strings."""
        return list(self._collection.find({}, _PROJECTION).sort("startDate", DESCENDING))

    def count(self) -> int:
        return self._collection.count_documents({})

    def next_id(self) -> int:
        return next_sequential_id(self._collection)

    # ── Write ──

    def insert(self, entry: dict[str, Any]) -> None:
        self._collection.insert_one(dict(entry))

    def delete(self, entry_id: int) -> int:
        return self._collection.delete_one({"id": entry_id}).deleted_count

    def delete_by_member(self, member_id: int) -> int:
        return self._collection.delete_many({"memberId": member_id}).deleted_count
