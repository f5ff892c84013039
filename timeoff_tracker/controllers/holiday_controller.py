# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Public holiday lookup (proxied from the external holiday API).
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from timeoff_tracker.services.holiday_client import HolidayClient, HolidayLookupError
from timeoff_tracker.core.dependencies import get_holiday_client

router = APIRouter(prefix="/api", tags=["Holidays"])


@router.get("/holidays/{year}")
async def get_holidays(
    year: str,
    client: HolidayClient = Depends(get_holiday_client),
) -> list[Any]:
    """Holidays for ``year`` across all configured countries, in one list."""
    try:
        return await client.get_holidays(year)
    except HolidayLookupError:
        raise HTTPException(status_code=500, detail="Failed to fetch holidays")
