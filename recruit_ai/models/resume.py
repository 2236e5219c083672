from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, List, Optional, get_args, get_origin


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def _clean_field(annotation: Any, value: Any) -> Any:
    if annotation == Optional[str]:
        return value if _is_scalar(value) else None
    if annotation == Optional[List[str]]:
        if _is_scalar(value):
            value = [value]
        if not isinstance(value, list):
            return None
        return [item if isinstance(item, str) else str(item) for item in value if _is_scalar(item)]

    inner = get_args(annotation)[0]
    if get_origin(inner) is list:
        return [item for item in value if isinstance(item, (dict, BaseModel))] if isinstance(value, list) else None
    return value if isinstance(value, (dict, BaseModel)) else None


# ---------- Resume sections ----------
class _Entry(BaseModel):
    # model output sometimes carries numbers (e.g. "year": 2019)
    model_config = ConfigDict(coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def drop_mistyped_fields(cls, data: Any) -> Any:
        """Keep what fits the schema; a mistyped field becomes None, bad list items are dropped."""
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for name, field in cls.model_fields.items():
            if cleaned.get(name) is not None:
                cleaned[name] = _clean_field(field.annotation, cleaned[name])
        return cleaned


class PersonalInfo(_Entry):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class EducationEntry(_Entry):
    school: Optional[str] = None
    degree: Optional[str] = None
    year: Optional[str] = None


class ExperienceEntry(_Entry):
    company: Optional[str] = None
    role: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    summary: Optional[str] = None


class Links(_Entry):
    github: Optional[str] = None
    linkedin: Optional[str] = None
    portfolio: Optional[List[str]] = None


class ProjectEntry(_Entry):
    name: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None


# ---------- Structured Resume ----------
class StructuredResume(_Entry):
    personal: Optional[PersonalInfo] = None
    education: Optional[List[EducationEntry]] = None
    experience: Optional[List[ExperienceEntry]] = None
    skills: Optional[List[str]] = None
    links: Optional[Links] = None
    awards: Optional[List[str]] = None
    projects: Optional[List[ProjectEntry]] = None

    @classmethod
    def empty(cls) -> "StructuredResume":
        """Every field present but empty; returned whenever structuring is unavailable."""
        return cls(
            personal=PersonalInfo(),
            education=[],
            experience=[],
            skills=[],
            links=Links(),
            awards=[],
            projects=[],
        )


# ---------- Job Requirements ----------
class JobRequirements(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_title: str = Field(default="", alias="jobTitle")
    description: str = ""
    responsibilities: str = ""
    skills: List[str] = Field(default_factory=list)


# ---------- Scoring Result ----------
class ApplicationStatus(str, Enum):
    SHORTLIST = "SHORTLIST"
    FLAG = "FLAG"
    REJECT = "REJECT"


class ScoringResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    status: ApplicationStatus
    reasoning: str
