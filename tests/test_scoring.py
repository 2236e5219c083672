"""Tests for the heuristic candidate scorer."""

from __future__ import annotations

import itertools

import pytest

from recruit_ai.models.resume import (
    ApplicationStatus,
    ExperienceEntry,
    JobRequirements,
    StructuredResume,
)
from recruit_ai.services.scoring import score_candidate, status_for_score


def _resume(skills, with_experience: bool) -> StructuredResume:
    experience = [ExperienceEntry(company="Acme", role="Engineer")] if with_experience else []
    return StructuredResume(skills=skills, experience=experience)


def _job(skills) -> JobRequirements:
    return JobRequirements(job_title="Backend Engineer", skills=skills)


def test_full_coverage_with_experience_is_shortlisted() -> None:
    result = score_candidate(_resume(["python", "sql", "react"], True), _job(["python", "sql"]))
    assert result.score == 100
    assert result.status is ApplicationStatus.SHORTLIST
    assert result.reasoning == "Matched 2/2 required skills. Experience weight 20%."


def test_partial_coverage_without_experience_is_rejected() -> None:
    result = score_candidate(_resume(["python"], False), _job(["python", "sql", "react"]))
    assert result.score == 27
    assert result.status is ApplicationStatus.REJECT
    assert result.reasoning == "Matched 1/3 required skills. Experience weight 0%."


def test_job_without_required_skills_only_gets_experience_bonus() -> None:
    # Nothing required counts as zero coverage, not as a full match.
    result = score_candidate(_resume(["python", "go"], True), _job([]))
    assert result.score == 20
    assert result.status is ApplicationStatus.REJECT
    assert result.reasoning == "Matched 0/0 required skills. Experience weight 20%."


def test_job_without_required_skills_and_no_experience_scores_zero() -> None:
    result = score_candidate(_resume(["python"], False), _job([]))
    assert result.score == 0
    assert result.status is ApplicationStatus.REJECT


def test_skill_match_is_case_insensitive() -> None:
    result = score_candidate(_resume(["Python"], False), _job(["python"]))
    assert result.score == 80
    assert result.status is ApplicationStatus.SHORTLIST


def test_skill_match_is_exact_not_substring() -> None:
    result = score_candidate(_resume(["javascript", " sql"], False), _job(["java", "sql"]))
    assert result.reasoning.startswith("Matched 0/2")
    assert result.score == 0


def test_half_coverage_with_experience_is_flagged() -> None:
    result = score_candidate(_resume(["python"], True), _job(["python", "sql"]))
    assert result.score == 60
    assert result.status is ApplicationStatus.FLAG


def test_half_point_scores_round_up() -> None:
    required = [f"skill{i}" for i in range(32)]
    result = score_candidate(_resume(required[:15], True), _job(required))
    assert result.reasoning.startswith("Matched 15/32")
    assert result.score == 58
    assert result.status is ApplicationStatus.FLAG

    result = score_candidate(_resume(["a"], False), _job(["a", "b", "c", "d", "e", "f", "g", "h"]))
    assert result.score == 10


def test_missing_fields_are_treated_as_empty() -> None:
    result = score_candidate(StructuredResume(), _job(["python"]))
    assert result.score == 0
    assert result.reasoning == "Matched 0/1 required skills. Experience weight 0%."

    assert score_candidate(None, _job(["python"])).score == 0


def test_job_requirements_accept_camel_case_title() -> None:
    job = JobRequirements.model_validate({"jobTitle": "Data Engineer", "skills": ["SQL"]})
    assert job.job_title == "Data Engineer"
    assert job.skills == ["SQL"]


@pytest.mark.parametrize(
    "score,expected",
    [
        (100, ApplicationStatus.SHORTLIST),
        (80, ApplicationStatus.SHORTLIST),
        (79, ApplicationStatus.FLAG),
        (50, ApplicationStatus.FLAG),
        (49, ApplicationStatus.REJECT),
        (0, ApplicationStatus.REJECT),
    ],
)
def test_status_thresholds(score: int, expected: ApplicationStatus) -> None:
    assert status_for_score(score) is expected


def test_score_bounds_and_status_consistency() -> None:
    pool = ["python", "sql", "react", "go", "aws"]
    for n_required, n_known, experienced in itertools.product(range(0, 6), range(0, 6), (True, False)):
        result = score_candidate(_resume(pool[:n_known], experienced), _job(pool[:n_required]))
        assert 0 <= result.score <= 100
        assert isinstance(result.score, int)
        assert result.status is status_for_score(result.score)


def test_result_is_immutable() -> None:
    result = score_candidate(_resume([], False), _job([]))
    with pytest.raises(Exception):
        result.score = 99  # type: ignore[misc]
