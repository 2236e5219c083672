import asyncio
import logging
from typing import Optional

from recruit_ai.services.applications import (
    find_pending_applications,
    get_job_requirements,
    score_pending,
    structure_pending,
)
from recruit_ai.services.config import Settings, settings as default_settings
from recruit_ai.services.structurer import ResumeStructurer
from recruit_ai.utils.db import init_db

logger = logging.getLogger("uvicorn.error")


async def run_daily_scoring(settings: Optional[Settings] = None) -> int:
    """Structure and score applications that have no ``ai_status`` yet."""
    settings = settings or default_settings
    await init_db(settings)

    pending = await find_pending_applications(settings.SCORING_BATCH_LIMIT)
    logger.info("Found %d pending applications", len(pending))

    structurer = ResumeStructurer.from_settings(settings)
    structured = await structure_pending(pending, structurer)
    scored = await score_pending(pending, get_job_requirements)

    logger.info("Daily scoring finished: %d structured, %d scored", structured, scored)
    return scored


# Local run entrypoint: python -m recruit_ai.cron.daily
if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if default_settings.DEBUG else logging.INFO)
    asyncio.run(run_daily_scoring())
