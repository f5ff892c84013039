# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas: API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
Field values are accepted as sent; only presence is ever checked.
"""

from typing import Any, Optional

from pydantic import BaseModel, field_validator


def coerce_member_id(value: Any) -> Any:
    """Turn numeric strings into ints so the delete cascade matches them."""
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return value


# ── Member Schemas ──

class MemberCreateRequest(BaseModel):
    # Presence is checked by the service so a missing name is a 400, not a 422.
    name: Any = None


# ── Time-Off Schemas ──

class TimeOffCreateRequest(BaseModel):
    """Every field is optional; absent values are stored as null."""
    memberId: Any = None
    type: Any = None
    startDate: Any = None
    endDate: Any = None
    notes: Any = None

    @field_validator("memberId", mode="before")
    @classmethod
    def numeric_member_id(cls, v: Any) -> Any:
        return coerce_member_id(v)


# ── Shared ──

class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: Optional[str] = None
    detail: Optional[str] = None
    request_id: Optional[str] = None
