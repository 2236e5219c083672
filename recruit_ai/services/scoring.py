import math
from fractions import Fraction
from typing import List, Optional

from recruit_ai.models.resume import ApplicationStatus, JobRequirements, ScoringResult, StructuredResume

SKILL_WEIGHT_PERCENT = 80
EXPERIENCE_WEIGHT_PERCENT = 20
SHORTLIST_THRESHOLD = 80
FLAG_THRESHOLD = 50


def _normalize(skills: Optional[List[str]]) -> List[str]:
    return [s.lower() for s in (skills or []) if isinstance(s, str)]


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def status_for_score(score: int) -> ApplicationStatus:
    if score >= SHORTLIST_THRESHOLD:
        return ApplicationStatus.SHORTLIST
    if score >= FLAG_THRESHOLD:
        return ApplicationStatus.FLAG
    return ApplicationStatus.REJECT


def score_candidate(resume: Optional[StructuredResume], job: JobRequirements) -> ScoringResult:
    """Heuristic match of a structured resume against a job's required skills.

    Required skills count as matched on exact, case-insensitive membership in
    the resume's skill list. A job that lists no required skills gets zero
    coverage, so only the experience bonus can contribute.
    """
    resume = resume or StructuredResume()
    resume_skills = set(_normalize(resume.skills))
    required = _normalize(job.skills)

    matches = sum(1 for skill in required if skill in resume_skills)
    # exact arithmetic so .5 boundaries round up (15/32 with experience is 57.5)
    skill_coverage = Fraction(matches, len(required)) if required else Fraction(0)

    experience_percent = EXPERIENCE_WEIGHT_PERCENT if resume.experience else 0
    score = _round_half_up(skill_coverage * SKILL_WEIGHT_PERCENT + experience_percent)
    score = max(0, min(100, score))

    reasoning = (
        f"Matched {matches}/{len(required)} required skills. "
        f"Experience weight {experience_percent}%."
    )
    return ScoringResult(score=score, status=status_for_score(score), reasoning=reasoning)
