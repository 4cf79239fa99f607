from __future__ import annotations

"""
MongoDB connection helpers.
"""

import logging
from typing import Dict

from pymongo import MongoClient
from pymongo.database import Database

from apiquery.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFECT_DB = "defect"

_client: MongoClient | None = None


def get_client() -> MongoClient:
    global _client
    if _client is None:
        # Import settings lazily to ensure env vars are loaded
        from apiquery.config import settings

        if not settings.MONGODB_URI:
            raise ConfigurationError("MONGODB_URI is not configured")

        logger.info("Initializing MongoClient")
        _client = MongoClient(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            socketTimeoutMS=settings.MONGODB_SOCKET_TIMEOUT_MS,
        )
    return _client


def _database_names() -> Dict[str, str]:
    from apiquery.config import settings

    return {DEFECT_DB: settings.DEFECT_MONGODB_DB_NAME}


def get_database(name: str = DEFECT_DB) -> Database:
    """
    Resolve a logical database name to a handle on the shared client.

    Raises:
        ConfigurationError: If the logical name is unknown or has no
            database configured.
    """
    db_name = _database_names().get(name)
    if not db_name:
        raise ConfigurationError(f"No MongoDB database configured for '{name}'")

    client = get_client()
    return client[db_name]


def get_defect_database() -> Database:
    return get_database(DEFECT_DB)
