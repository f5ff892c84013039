# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: wire repositories and services.

Everything is built per application from an injected database handle and
kept on ``app.state``; the provider functions below read it back from the
request. Tests pass an in-memory database to the same wiring.
"""

from typing import Optional

from fastapi import FastAPI, Request
from pymongo.database import Database

from timeoff_tracker.core.config import settings
from timeoff_tracker.repositories.member_repository import MemberRepository
from timeoff_tracker.repositories.timeoff_repository import TimeOffRepository
from timeoff_tracker.repositories.rotation_repository import RotationRepository
from timeoff_tracker.services.member_service import MemberService
from timeoff_tracker.services.timeoff_service import TimeOffService
from timeoff_tracker.services.rotation_service import RotationService
from timeoff_tracker.services.holiday_client import HolidayClient


def wire(
    app: FastAPI,
    database: Database,
    holiday_client: Optional[HolidayClient] = None,
) -> None:
    """Build repositories and services for ``database`` and attach them to ``app``."""
    member_repo = MemberRepository(database[settings.MEMBERS_COLLECTION])
    timeoff_repo = TimeOffRepository(database[settings.TIMEOFF_COLLECTION])
    rotation_repo = RotationRepository(database[settings.ONCALL_COLLECTION])

    app.state.database = database
    app.state.member_repo = member_repo
    app.state.timeoff_repo = timeoff_repo
    app.state.member_service = MemberService(member_repo, timeoff_repo)
    app.state.timeoff_service = TimeOffService(timeoff_repo)
    app.state.rotation_service = RotationService(rotation_repo, settings.ONCALL_ROTATION_KEY)
    app.state.holiday_client = holiday_client or HolidayClient()


# ── FastAPI dependency functions ──
def get_database(request: Request) -> Database:
    return request.app.state.database


def get_member_repo(request: Request) -> MemberRepository:
    return request.app.state.member_repo


def get_timeoff_repo(request: Request) -> TimeOffRepository:
    return request.app.state.timeoff_repo


def get_member_service(request: Request) -> MemberService:
    return request.app.state.member_service


def get_timeoff_service(request: Request) -> TimeOffService:
    return request.app.state.timeoff_service


def get_rotation_service(request: Request) -> RotationService:
    return request.app.state.rotation_service


def get_holiday_client(request: Request) -> HolidayClient:
    return request.app.state.holiday_client
