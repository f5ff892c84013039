# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Team member endpoints.
Thin HTTP layer, delegates ALL logic to MemberService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from timeoff_tracker.models.domain import TeamMember
from timeoff_tracker.schemas.scheduling import MemberCreateRequest, MessageResponse
from timeoff_tracker.services.member_service import MemberService
from timeoff_tracker.core.dependencies import get_member_service

router = APIRouter(prefix="/api", tags=["Members"])


@router.get("/members", response_model=list[TeamMember])
def list_members(
    service: MemberService = Depends(get_member_service),
):
    """List all team members, sorted by name."""
    return service.list_members()


@router.post("/members", status_code=201, response_model=TeamMember)
def create_member(
    payload: Optional[MemberCreateRequest] = None,
    service: MemberService = Depends(get_member_service),
):
    """Add a team member. A missing body is treated like a missing name."""
    name = payload.name if payload is not None else None
    try:
        return service.create_member(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/members/{member_id}", response_model=MessageResponse)
def delete_member(
    member_id: int,
    service: MemberService = Depends(get_member_service),
):
    """Delete a team member and all of their time-off entries."""
    return service.delete_member(member_id)
