# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: On-call rotation document.
The payload is opaque: stored and returned exactly as the caller sent it.
"""

from typing import Any

from timeoff_tracker.core.logging import get_logger
from timeoff_tracker.metrics.prometheus import ROTATION_SAVES
from timeoff_tracker.repositories.rotation_repository import RotationRepository

logger = get_logger(__name__)


class RotationService:
    """Reads and replaces the single on-call rotation record."""

    def __init__(self, rotation_repo: RotationRepository, rotation_key: str) -> None:
        self._rotations = rotation_repo
        self._key = rotation_key

    def get_rotation(self) -> dict[str, Any]:
        """Return the saved payload, or {} if nothing was ever saved."""
        rotation = self._rotations.get(self._key)
        return rotation if rotation is not None else {}

    def save_rotation(self, rotation_data: dict[str, Any]) -> dict[str, str]:
        """Replace the payload wholesale. Last writer wins."""
        self._rotations.put(self._key, rotation_data)
        ROTATION_SAVES.inc()
        logger.info("On-call rotation saved: key=%s, fields=%d", self._key, len(rotation_data))
        return {"message": "On-call rotation saved"}
