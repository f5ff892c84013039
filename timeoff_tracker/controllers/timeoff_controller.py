# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Time-off entry endpoints.
"""

from fastapi import APIRouter, Depends

from timeoff_tracker.models.domain import TimeOffEntry
from timeoff_tracker.schemas.scheduling import TimeOffCreateRequest, MessageResponse
from timeoff_tracker.services.timeoff_service import TimeOffService
from timeoff_tracker.core.dependencies import get_timeoff_service

router = APIRouter(prefix="/api", tags=["Time Off"])


@router.get("/timeoff", response_model=list[TimeOffEntry])
def list_timeoff(
    service: TimeOffService = Depends(get_timeoff_service),
):
    """List all time-off entries, most recent start date first."""
    return service.list_entries()


@router.post("/timeoff", status_code=201, response_model=TimeOffEntry)
def create_timeoff(
    payload: TimeOffCreateRequest,
    service: TimeOffService = Depends(get_timeoff_service),
):
    return service.create_entry(**payload.model_dump())


@router.delete("/timeoff/{entry_id}", response_model=MessageResponse)
def delete_timeoff(
    entry_id: int,
    service: TimeOffService = Depends(get_timeoff_service),
):
    return service.delete_entry(entry_id)
