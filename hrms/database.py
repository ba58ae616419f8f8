# hrms/database.py
import asyncio
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from hrms.config import Settings
from hrms.exceptions import StorageUnavailable

logger = logging.getLogger(__name__)

class Database:
    """The process-wide MongoDB client and the database handle it serves."""

    def __init__(self, client: AsyncIOMotorClient, db: AsyncIOMotorDatabase):
        self.client = client
        self.db = db

    def collection(self, name: str) -> AsyncIOMotorCollection:
        return self.db[name]

async def connect_to_mongo(settings: Settings) -> Database:
    timeout = settings.OPERATION_TIMEOUT
    try:
        client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=int(timeout * 1000),
            # Client side operation timeout, enforced by the driver itself
            timeoutMS=int(timeout * 1000),
        )
    except PyMongoError as e:
        logger.error("Could not create MongoDB client for %s: %s", settings.MONGODB_URI, e)
        raise StorageUnavailable("error connecting to mongodb") from e

    try:
        await asyncio.wait_for(client.admin.command("ping"), timeout=timeout)
    except (PyMongoError, asyncio.TimeoutError) as e:
        client.close()
        logger.error("Could not ping MongoDB at %s: %s", settings.MONGODB_URI, e)
        raise StorageUnavailable("error pinging mongodb") from e

    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)
    return Database(client, client[settings.MONGODB_DB_NAME])

async def close_mongo_connection(database: Database):
    if database and database.client:
        database.client.close()
        logger.info("Closed MongoDB connection")

async def get_database(request: Request) -> Database:
    return request.app.state.database
