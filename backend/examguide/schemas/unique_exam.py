"""Unique Exam Schemas: bulk registration payload and registry/guide responses.

Invariants:
    - exams is a list of 1..MAX_REGISTRATION_BATCH plain names or {exam_name, exam_code} objects
    - Names are capped at MAX_EXAM_NAME_LENGTH in both shapes
    - added_by is required and non-blank after stripping
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from examguide.core.domain_types import (
    MAX_EXAM_CODE_LENGTH, MAX_EXAM_NAME_LENGTH, MAX_REGISTRATION_BATCH,
)

ExamNameIn = Annotated[str, Field(max_length=MAX_EXAM_NAME_LENGTH)]


class ExamEntryIn(BaseModel):
    """Registry item for callers that also supply an exam code."""
    exam_name: ExamNameIn
    exam_code: str | None = Field(None, max_length=MAX_EXAM_CODE_LENGTH)


class UniqueExamBatch(BaseModel):
    """Body of POST /api/exams/unique."""
    exams: list[ExamNameIn | ExamEntryIn] = Field(
        min_length=1, max_length=MAX_REGISTRATION_BATCH,
    )
    added_by: str = Field(min_length=1, max_length=255)

    @field_validator("added_by")
    @classmethod
    def strip_added_by(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("added_by cannot be empty or whitespace")
        return v

    def raw_entries(self) -> list[str | dict]:
        return [
            e if isinstance(e, str) else e.model_dump() for e in self.exams
        ]


class UniqueExamOut(BaseModel):
    exam_name: str
    exam_code: str
    added_by: str
    added_at: datetime


class BulkRegistrationOut(BaseModel):
    message: str
    processed_count: int
    inserted_count: int


class GuideEntryOut(BaseModel):
    exam_name: str
    exam_code: str | None = None
    tube: str
    instructions: str = ""
