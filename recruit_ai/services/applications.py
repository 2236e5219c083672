"""
Screening of stored applications.

The batch job and the on-demand route share these helpers. Records are
handled one at a time; anything already carrying an ``ai_status`` is left
alone, so re-running a pass only touches what is still pending.
"""
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Iterable, Optional

from beanie import PydanticObjectId
from beanie.operators import Set
from fastapi.concurrency import run_in_threadpool

from recruit_ai.models.application import Application, JobPosting
from recruit_ai.models.resume import JobRequirements, ScoringResult, StructuredResume
from recruit_ai.services.scoring import score_candidate
from recruit_ai.services.structurer import ResumeStructurer, StructuringOutcome

logger = logging.getLogger("uvicorn.error")

JobLoader = Callable[[PydanticObjectId], Awaitable[Optional[JobRequirements]]]


class AlreadyScoredError(Exception):
    pass


async def get_application(application_id: PydanticObjectId) -> Optional[Application]:
    return await Application.get(application_id)


async def get_job_requirements(job_posting_id: PydanticObjectId) -> Optional[JobRequirements]:
    job = await JobPosting.get(job_posting_id)
    return job.requirements() if job else None


async def find_pending_applications(limit: int) -> list:
    return await Application.find(Application.ai_status == None).limit(limit).to_list()  # noqa: E711


async def record_parsed_resume(application_id, resume: StructuredResume, updated_at: datetime) -> bool:
    """Store a structured resume unless one was stored since the record was loaded."""
    update = await Application.find_one(
        Application.id == application_id,
        Application.parsed_resume == None,  # noqa: E711
    ).update(Set({
        Application.parsed_resume: resume.model_dump(),
        Application.updated_at: updated_at,
    }))
    return bool(update and update.matched_count)


async def record_score(application_id, result: ScoringResult, updated_at: datetime) -> bool:
    """Write a score only while the stored record is still unscored."""
    update = await Application.find_one(
        Application.id == application_id,
        Application.ai_status == None,  # noqa: E711
    ).update(Set({
        Application.ai_score: result.score,
        Application.ai_status: result.status.value,
        Application.reasoning: result.reasoning,
        Application.updated_at: updated_at,
    }))
    return bool(update and update.matched_count)


async def structure_application(application, structurer: ResumeStructurer) -> Optional[StructuringOutcome]:
    if application.parsed_resume is not None:
        return None

    # the model call blocks, keep it off the event loop
    outcome = await run_in_threadpool(structurer.structure_detailed, application.resume_text or "")
    now = datetime.now(timezone.utc)
    if not await record_parsed_resume(application.id, outcome.resume, now):
        logger.info("Application %s was structured elsewhere; keeping the stored resume", application.id)
        return None

    application.parsed_resume = outcome.resume
    application.updated_at = now
    logger.info("Structured application %s (%s)", application.id, outcome.kind.value)
    return outcome


async def score_application(application, job: JobRequirements) -> ScoringResult:
    if application.ai_status is not None:
        raise AlreadyScoredError(f"Application {application.id} is already scored")

    result = score_candidate(application.parsed_resume, job)
    now = datetime.now(timezone.utc)
    if not await record_score(application.id, result, now):
        raise AlreadyScoredError(f"Application {application.id} was scored after it was loaded")

    application.ai_score = result.score
    application.ai_status = result.status
    application.reasoning = result.reasoning
    application.updated_at = now
    logger.info("Scored application %s: %d (%s)", application.id, result.score, result.status.value)
    return result


async def structure_pending(applications: Iterable, structurer: ResumeStructurer) -> int:
    structured = 0
    for application in applications:
        if application.ai_status is not None:
            continue
        if await structure_application(application, structurer) is not None:
            structured += 1
    return structured


async def score_pending(applications: Iterable, load_job: JobLoader = get_job_requirements) -> int:
    scored = 0
    for application in applications:
        if application.ai_status is not None:
            continue
        job = await load_job(application.job_posting_id)
        if job is None:
            logger.warning("Job posting %s not found for application %s; skipping",
                           application.job_posting_id, application.id)
            continue
        try:
            await score_application(application, job)
        except AlreadyScoredError:
            logger.info("Application %s was scored by another run; skipping", application.id)
            continue
        scored += 1
    return scored
