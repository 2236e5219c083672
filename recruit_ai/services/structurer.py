import json
import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

import google.generativeai as genai
from pydantic import ValidationError

from recruit_ai.models.resume import StructuredResume
from recruit_ai.services.config import Settings
from recruit_ai.services.prompts import RESUME_STRUCTURE_PROMPT, RESUME_USER_TEMPLATE, json_structure

logger = logging.getLogger("uvicorn.error")

_LEADING_FENCE = re.compile(r"^\s*```[\w-]*")
_TRAILING_FENCE = re.compile(r"```\s*$")


class TextStructurer(ABC):
    """Something that turns a system instruction plus user text into a JSON string."""

    @abstractmethod
    def complete(self, system_prompt: str, user_content: str) -> str:
        raise NotImplementedError


class GeminiTextStructurer(TextStructurer):

    def __init__(self, api_key: str, model_name: str = "gemini-2.5-flash-lite", temperature: float = 0.3):
        if not api_key:
            raise ValueError("GEMINI_API_KEY is required for GeminiTextStructurer.")
        self.api_key = api_key
        self.model_name = model_name
        self.temperature = temperature

    def _get_llm(self):
        genai.configure(api_key=self.api_key)
        return genai

    def complete(self, system_prompt: str, user_content: str) -> str:
        client = self._get_llm()
        model = client.GenerativeModel(
            self.model_name,
            system_instruction=system_prompt,
            generation_config={
                "temperature": self.temperature,
                "response_mime_type": "application/json",
            },
        )
        response = model.generate_content(contents=user_content)
        return response.text


class OutcomeKind(str, Enum):
    STRUCTURED = "structured"
    DISABLED = "disabled"
    TRANSIENT_FAILURE = "transient_failure"
    PARSE_FAILURE = "parse_failure"


class StructuringOutcome:
    """Result of one structuring attempt.

    ``resume`` is always usable: on every non-STRUCTURED kind it is the empty
    structure. ``cause`` is set for transient failures and ``raw_response``
    for parse failures.
    """

    def __init__(self, kind: OutcomeKind, resume: StructuredResume,
                 cause: Optional[BaseException] = None, raw_response: Optional[str] = None):
        self.kind = kind
        self.resume = resume
        self.cause = cause
        self.raw_response = raw_response

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.STRUCTURED

    def __repr__(self) -> str:
        return f"StructuringOutcome(kind={self.kind.value!r})"


class ResumeParseError(ValueError):
    pass


def strip_code_fence(llm_response: str) -> str:
    """Remove a single wrapping ``` / ```json fence if the model added one."""
    text = llm_response.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


class ResumeStructurer:

    def __init__(self, capability: Optional[TextStructurer] = None):
        self.capability = capability

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResumeStructurer":
        if not settings.GEMINI_API_KEY:
            return cls(None)
        return cls(GeminiTextStructurer(settings.GEMINI_API_KEY, settings.GEMINI_MODEL))

    @property
    def enabled(self) -> bool:
        return self.capability is not None

    @staticmethod
    def generate_prompt() -> str:
        return RESUME_STRUCTURE_PROMPT.replace("${ResumeFormat}", json_structure)

    @staticmethod
    def generate_user_content(resume_text: str) -> str:
        return RESUME_USER_TEMPLATE.replace("${resumeText}", resume_text)

    @staticmethod
    def parse_llm_response(llm_response: str) -> StructuredResume:
        json_string = strip_code_fence(llm_response)
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ResumeParseError(f"LLM response is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ResumeParseError(f"LLM response is a JSON {type(data).__name__}, not an object")
        try:
            return StructuredResume.model_validate(data)
        except ValidationError as e:
            raise ResumeParseError(f"LLM response does not match the resume schema: {e}") from e

    def structure_detailed(self, resume_text: str) -> StructuringOutcome:
        if not self.enabled:
            logger.info("Resume structuring disabled: no GEMINI_API_KEY configured")
            return StructuringOutcome(OutcomeKind.DISABLED, StructuredResume.empty())

        try:
            llm_response = self.capability.complete(
                self.generate_prompt(), self.generate_user_content(resume_text)
            )
        except Exception as e:
            logger.exception("Error calling resume structuring model")
            return StructuringOutcome(OutcomeKind.TRANSIENT_FAILURE, StructuredResume.empty(), cause=e)

        logger.info("Received LLM response (first 200 chars): %s", (llm_response or "")[:200].replace("\n", " "))

        try:
            resume = self.parse_llm_response(llm_response or "")
        except ResumeParseError as e:
            logger.error("%s. Raw start: %s", e, (llm_response or "")[:100].replace("\n", " "))
            return StructuringOutcome(OutcomeKind.PARSE_FAILURE, StructuredResume.empty(), raw_response=llm_response)

        return StructuringOutcome(OutcomeKind.STRUCTURED, resume)

    def structure(self, resume_text: str) -> StructuredResume:
        return self.structure_detailed(resume_text).resume
