from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from beanie import PydanticObjectId
import logging

from recruit_ai.models.resume import JobRequirements, ScoringResult, StructuredResume
from recruit_ai.services import applications as application_service
from recruit_ai.services.applications import AlreadyScoredError
from recruit_ai.services.scoring import score_candidate
from recruit_ai.utils.db import ensure_db_initialized

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["Candidate Screening"])


class ScoreRequest(BaseModel):
    resume: StructuredResume = Field(default_factory=StructuredResume)
    job: JobRequirements


# POST: score a structured resume against job requirements
@router.post("/screening/score", response_model=ScoringResult)
def score(payload: ScoreRequest):
    return score_candidate(payload.resume, payload.job)


# POST: score a stored application against its job posting
@router.post("/applications/{application_id}/score", response_model=ScoringResult)
async def score_stored_application(application_id: PydanticObjectId):
    try:
        await ensure_db_initialized()
    except ValueError as e:
        logger.error(f"Database unavailable: {repr(e)}")
        raise HTTPException(status_code=500, detail="Database is not configured")

    application = await application_service.get_application(application_id)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    if application.ai_status is not None:
        raise HTTPException(status_code=409, detail="Already scored")

    job = await application_service.get_job_requirements(application.job_posting_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")

    try:
        return await application_service.score_application(application, job)
    except AlreadyScoredError:
        raise HTTPException(status_code=409, detail="Already scored")
