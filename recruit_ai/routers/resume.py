from fastapi import APIRouter, Depends, HTTPException, File, UploadFile, Form, Request
from typing import Optional
import logging

from recruit_ai.services.config import settings
from recruit_ai.services.extractor import extract_links, extract_skills, extract_text
from recruit_ai.services.limiter import limiter
from recruit_ai.services.structurer import ResumeStructurer

logger = logging.getLogger("uvicorn.error")

router = APIRouter(
    prefix="/resume",
    tags=["Resume Parsing"]
)


def get_structurer() -> ResumeStructurer:
    return ResumeStructurer.from_settings(settings)


# POST: extract text from an uploaded resume and structure it
@router.post("/parse", response_model=dict)
@limiter.limit(settings.RATE_LIMIT)
def parse_resume(
    request: Request,
    resume: UploadFile = File(...),
    skills: Optional[str] = Form(None),
    structurer: ResumeStructurer = Depends(get_structurer),
):
    resume_bytes = resume.file.read()
    logger.info(f"Resume file read: {len(resume_bytes)} bytes, content_type={resume.content_type}, filename={resume.filename}")

    try:
        resume_text = extract_text(resume_bytes, resume.content_type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from the resume.")

    document = extract_links(resume_text)
    outcome = structurer.structure_detailed(resume_text)
    logger.info("Resume structuring finished: %s", outcome.kind.value)

    required = [s.strip() for s in skills.split(",") if s.strip()] if skills else []

    return {
        "resume": outcome.resume.model_dump(exclude_none=True),
        "links": document.model_dump(exclude={"text_content"}),
        "matched_skills": extract_skills(resume_text, required),
        "structuring": outcome.kind.value,
    }
