import logging
import asyncio
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from recruit_ai.models.application import Application, JobPosting
from recruit_ai.services.config import Settings, settings as default_settings

logger = logging.getLogger("uvicorn.error")

_db_initialized = False
_client = None
_db_lock = asyncio.Lock()


async def init_db(settings: Optional[Settings] = None):
    global _db_initialized, _client

    if _db_initialized:
        logger.debug("Database already initialized")
        return

    settings = settings or default_settings
    if not settings.MONGO_URI or not settings.DB_NAME:
        raise ValueError("Missing MONGO_URI or DB_NAME in environment variables")

    logger.info("Connecting to MongoDB...")
    _client = AsyncIOMotorClient(settings.MONGO_URI)
    db = _client[settings.DB_NAME]

    logger.info("Initializing Beanie with models...")
    await init_beanie(database=db, document_models=[Application, JobPosting])

    _db_initialized = True
    logger.info("Database initialized successfully.")


async def ensure_db_initialized(settings: Optional[Settings] = None):
    async with _db_lock:
        if not _db_initialized:
            logger.info("Beanie not initialized. Initializing now...")
            await init_db(settings)
        else:
            logger.debug("Beanie already initialized")
