# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""MongoDB connection factory."""

from pymongo import MongoClient
from pymongo.database import Database

from timeoff_tracker.core.config import settings
from timeoff_tracker.core.logging import get_logger

logger = get_logger(__name__)


def connect(uri: str, db_name: str | None = None) -> tuple[MongoClient, Database]:
    """
    Open a client and verify the server answers a ping.
    Raises pymongo.errors.PyMongoError when the server is unreachable.
    """
    client = MongoClient(uri, serverSelectionTimeoutMS=settings.MONGO_CONNECT_TIMEOUT_MS)
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    database = client[db_name or settings.MONGO_DB_NAME]
    logger.info("Successfully connected to MongoDB: db=%s", database.name)
    return client, database
