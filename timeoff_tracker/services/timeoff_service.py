# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Time-off entries.
No referential or date-range checks; entries are stored as submitted.
"""

from typing import Any

from timeoff_tracker.core.logging import get_logger
from timeoff_tracker.metrics.prometheus import ENTRIES_CREATED, ENTRIES_DELETED
from timeoff_tracker.repositories.timeoff_repository import TimeOffRepository

logger = get_logger(__name__)


class TimeOffService:
    """Business logic for time-off entries."""

    def __init__(self, timeoff_repo: TimeOffRepository) -> None:
        self._entries = timeoff_repo

    def list_entries(self) -> list[dict[str, Any]]:
        return self._entries.get_all()

    def create_entry(
        self,
        memberId: Any = None,
        type: Any = None,
        startDate: Any = None,
        endDate: Any = None,
        notes: Any = None,
    ) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "id": self._entries.next_id(),
            "memberId": memberId,
            "type": type,
            "startDate": startDate,
            "endDate": endDate,
            "notes": notes,
        }
        self._entries.insert(entry)

        ENTRIES_CREATED.inc()
        logger.info(
            "Time off created: id=%d, member=%s, %s..%s",
            entry["id"], memberId, startDate, endDate,
        )
        return entry

    def delete_entry(self, entry_id: int) -> dict[str, str]:
        if self._entries.delete(entry_id):
            ENTRIES_DELETED.labels(reason="direct").inc()
        logger.info("Time off deleted: id=%d", entry_id)
        return {"message": "Time off entry deleted"}
