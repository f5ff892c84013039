# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Incrementing integer ids for document collections.
"""

from pymongo import DESCENDING
from pymongo.collection import Collection


def next_sequential_id(collection: Collection) -> int:
    """
    Return the highest ``id`` in the collection plus one, or 1 when empty.

    Computed with a read followed by a separate insert, so two writers that
    both read before either inserts are handed the same id.
    """
    last = list(collection.find({}, {"id": 1}).sort("id", DESCENDING).limit(1))
    if not last:
        return 1
    return (last[0].get("id") or 0) + 1
