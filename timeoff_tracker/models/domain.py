# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: plain data, NO FastAPI dependency.
Field names match the stored documents (camelCase) one to one. Documents
are returned as stored, so no field is type-checked and unknown fields
pass through.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TeamMember(BaseModel):
    """A person whose time off is tracked."""
    model_config = ConfigDict(extra="allow")

    id: Any = Field(default=None, description="Sequential member id")
    name: Any = Field(default=None, description="Display name")


class TimeOffEntry(BaseModel):
    """A block of leave. Dates are expected as ISO-8601 strings but never checked."""
    model_config = ConfigDict(extra="allow")

    id: Any = Field(default=None, description="Sequential entry id")
    memberId: Any = Field(default=None, description="Owning member id (unchecked)")
    type: Any = None
    startDate: Any = None
    endDate: Any = None
    notes: Any = None
