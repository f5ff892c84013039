# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration, all env-driven.
Single source of truth for every tunable parameter.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env for local dev
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "timeoff-tracker")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Required. The entrypoint refuses to start without it.
    MONGO_URI: str = os.getenv("MONGO_URI", "")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "timeOffDB")
    MONGO_CONNECT_TIMEOUT_MS: int = int(os.getenv("MONGO_CONNECT_TIMEOUT_MS", "5000"))

    MEMBERS_COLLECTION: str = os.getenv("MEMBERS_COLLECTION", "teamMembers")
    TIMEOFF_COLLECTION: str = os.getenv("TIMEOFF_COLLECTION", "timeOffEntries")
    ONCALL_COLLECTION: str = os.getenv("ONCALL_COLLECTION", "onCallRotation")
    ONCALL_ROTATION_KEY: str = os.getenv("ONCALL_ROTATION_KEY", "main_rotation")

    HOLIDAY_API_URL: str = os.getenv(
        "HOLIDAY_API_URL", "https://date.nager.at/api/v3/PublicHolidays"
    )
    HOLIDAY_COUNTRIES: list[str] = [
        c.strip().upper()
        for c in os.getenv("HOLIDAY_COUNTRIES", "US,GB,CA").split(",")
        if c.strip()
    ]
    HOLIDAY_TIMEOUT: float = float(os.getenv("HOLIDAY_TIMEOUT", "10.0"))

    STATIC_DIR: str = os.getenv("STATIC_DIR", str(PACKAGE_DIR / "public"))
    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
