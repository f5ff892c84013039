# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Team member management, business logic for CRUD operations.
Coordinates repository writes with metrics, logging, and validation.
"""

from typing import Any

from timeoff_tracker.core.logging import get_logger
from timeoff_tracker.metrics.prometheus import MEMBERS_CREATED, MEMBERS_DELETED, ENTRIES_DELETED
from timeoff_tracker.repositories.member_repository import MemberRepository
from timeoff_tracker.repositories.timeoff_repository import TimeOffRepository

logger = get_logger(__name__)


class MemberService:
    """Business logic for team members and their cascading time off."""

    def __init__(
        self,
        member_repo: MemberRepository,
        timeoff_repo: TimeOffRepository,
    ) -> None:
        self._members = member_repo
        self._timeoff = timeoff_repo

    # ── Queries ──

    def list_members(self) -> list[dict[str, Any]]:
        return self._members.get_all()

    # ── Commands ──

    def create_member(self, name: Any) -> dict[str, Any]:
        """Create a member with the next sequential id. Raises ValueError on a missing name."""
        if not name:
            raise ValueError("Name is required")

        member: dict[str, Any] = {"id": self._members.next_id(), "name": name}
        self._members.insert(member)

        MEMBERS_CREATED.inc()
        logger.info("Member created: id=%d, name=%s", member["id"], name)
        return member

    def delete_member(self, member_id: int) -> dict[str, str]:
        """
        Delete a member and every time-off entry that references it.
        Deleting an unknown id is not an error.
        """
        deleted = self._members.delete(member_id)
        removed_entries = self._timeoff.delete_by_member(member_id)

        if deleted:
            MEMBERS_DELETED.inc()
        if removed_entries:
            ENTRIES_DELETED.labels(reason="cascade").inc(removed_entries)
        logger.info(
            "Member deleted: id=%d, found=%s, entries_removed=%d",
            member_id, bool(deleted), removed_entries,
        )
        return {"message": "Member and their entries deleted"}
