"""Shared fixtures for the screening tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Dict, List, Optional, Set

import pytest

from recruit_ai.services import applications
from recruit_ai.services.structurer import TextStructurer


class FakeStructurer(TextStructurer):
    """Returns a canned model reply (or raises) and records every call."""

    def __init__(self, reply: str = "{}", error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[tuple] = []

    def complete(self, system_prompt: str, user_content: str) -> str:
        self.calls.append((system_prompt, user_content))
        if self.error is not None:
            raise self.error
        return self.reply


class FakeApplication(SimpleNamespace):
    """Stand-in for the Beanie ``Application`` document."""

    def __init__(self, **kwargs) -> None:
        defaults = dict(
            id="app-1",
            job_posting_id="job-1",
            resume_text="",
            parsed_resume=None,
            ai_score=None,
            ai_status=None,
            reasoning=None,
            updated_at=None,
        )
        defaults.update(kwargs)
        super().__init__(**defaults)


class FakeStore:
    """In-memory stand-in for the conditional writes on the applications collection.

    Ids in ``scored_elsewhere`` / ``structured_elsewhere`` behave like records
    another worker has written since they were loaded.
    """

    def __init__(self) -> None:
        self.scores: Dict[str, object] = {}
        self.resumes: Dict[str, object] = {}
        self.scored_elsewhere: Set[str] = set()
        self.structured_elsewhere: Set[str] = set()

    async def record_score(self, application_id, result, updated_at) -> bool:
        if application_id in self.scored_elsewhere or application_id in self.scores:
            return False
        self.scores[application_id] = result
        return True

    async def record_parsed_resume(self, application_id, resume, updated_at) -> bool:
        if application_id in self.structured_elsewhere or application_id in self.resumes:
            return False
        self.resumes[application_id] = resume
        return True


@pytest.fixture(autouse=True)
def store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    fake = FakeStore()
    monkeypatch.setattr(applications, "record_score", fake.record_score)
    monkeypatch.setattr(applications, "record_parsed_resume", fake.record_parsed_resume)
    return fake


@pytest.fixture
def sample_reply() -> str:
    return (
        '{"personal": {"name": "Jane Doe", "email": "jane@example.com", "phone": "555-0100"},'
        ' "education": [{"school": "MIT", "degree": "BS", "year": 2018}],'
        ' "experience": [{"company": "Acme", "role": "Engineer", "start": "2019", "end": "2023",'
        ' "summary": "Built things"}],'
        ' "skills": ["Python", "SQL"],'
        ' "links": {"github": "https://github.com/jane", "linkedin": "", "portfolio": []},'
        ' "awards": [], "projects": [{"name": "Tool", "description": "CLI", "link": ""}]}'
    )
