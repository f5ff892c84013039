# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Process entrypoint: ``python -m timeoff_tracker`` or ``timeoff-tracker``.
Refuses to listen until the database is reachable.
"""

import sys

import uvicorn
from pymongo.errors import PyMongoError

from timeoff_tracker.core import database
from timeoff_tracker.core.config import settings
from timeoff_tracker.core.logging import configure_server_logging, get_logger
from timeoff_tracker.main import create_app

logger = get_logger(__name__)


def main() -> None:
    if not settings.MONGO_URI:
        logger.error("FATAL ERROR: MONGO_URI is not defined. Set it in the environment or a .env file.")
        sys.exit(1)

    try:
        client, db = database.connect(settings.MONGO_URI, settings.MONGO_DB_NAME)
    except PyMongoError as exc:
        logger.error("Failed to connect to MongoDB: %s", exc)
        sys.exit(1)

    app = create_app(db, mongo_client=client)
    logger.info("Server running at http://localhost:%d", settings.PORT)
    configure_server_logging()
    # log_config=None keeps uvicorn from reinstalling its own handlers.
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
