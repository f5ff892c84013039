# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: On-call rotation endpoints.
Thin HTTP layer, delegates ALL logic to RotationService.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from timeoff_tracker.schemas.scheduling import MessageResponse
from timeoff_tracker.services.rotation_service import RotationService
from timeoff_tracker.core.dependencies import get_rotation_service

router = APIRouter(prefix="/api", tags=["On-Call"])


@router.get("/oncall")
def get_rotation(
    service: RotationService = Depends(get_rotation_service),
) -> dict[str, Any]:
    """Return the saved rotation payload, or {} if none was saved yet."""
    return service.get_rotation()


@router.post("/oncall", response_model=MessageResponse)
def save_rotation(
    rotation_data: dict[str, Any] = Body(...),
    service: RotationService = Depends(get_rotation_service),
):
    """Replace the rotation payload with the request body."""
    return service.save_rotation(rotation_data)
