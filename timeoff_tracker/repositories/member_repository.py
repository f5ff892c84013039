# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Team member data access.
Encapsulates all read/write operations on the team members collection.
NO business rules here, pure CRUD.
"""

from typing import Any

from pymongo import ASCENDING
from pymongo.collection import Collection

from timeoff_tracker.repositories.sequence import next_sequential_id

# Mongo's ObjectId never leaves the repository.
_PROJECTION = {"_id": 0}


class MemberRepository:
    """MongoDB-backed team member storage."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    # ── Read ──

    def get_all(self) -> list[dict[str, Any]]:
        return list(self._collection.find({}, _PROJECTION).sort("name", ASCENDING))

    def count(self) -> int:
        return self._collection.count_documents({})

    def next_id(self) -> int:
        return next_sequential_id(self._collection)

    # ── Write ──

    def insert(self, member: dict[str, Any]) -> None:
        # insert_one stamps _id onto the dict it is given
        self._collection.insert_one(dict(member))

    def delete(self, member_id: int) -> int:
        return self._collection.delete_one({"id": member_id}).deleted_count
