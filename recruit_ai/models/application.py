from beanie import Document, PydanticObjectId
from pydantic import Field
from typing import List, Optional
from datetime import datetime, timezone

from recruit_ai.models.resume import ApplicationStatus, JobRequirements, StructuredResume


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ---------- Job Posting ----------
class JobPosting(Document):
    job_title: str
    job_description: str = ""
    responsibilities: str = ""
    skills_required: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_now)

    class Settings:
        name = "job_postings"

    def requirements(self) -> JobRequirements:
        return JobRequirements(
            job_title=self.job_title,
            description=self.job_description,
            responsibilities=self.responsibilities,
            skills=self.skills_required or [],
        )


# ---------- Application ----------
class Application(Document):
    job_posting_id: PydanticObjectId
    candidate_name: Optional[str] = None
    email: Optional[str] = None
    resume_text: Optional[str] = None
    parsed_resume: Optional[StructuredResume] = None
    ai_score: Optional[int] = None
    ai_status: Optional[ApplicationStatus] = None
    reasoning: Optional[str] = None
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    class Settings:
        name = "applications"
