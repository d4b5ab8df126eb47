"""Classification Schemas: request/response contracts for the tube classification endpoints.

Invariants:
    - exam_name and tube are required and non-blank after stripping
    - instructions defaults to "" (None is accepted and coerced)
"""

from pydantic import BaseModel, Field, field_validator


class ClassificationUpsert(BaseModel):
    """Body of POST /api/classification."""
    exam_name: str = Field(min_length=1, max_length=255)
    tube: str = Field(min_length=1, max_length=255)
    instructions: str | None = Field(None, max_length=5000)

    @field_validator("exam_name", "tube")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v

    @field_validator("instructions")
    @classmethod
    def default_instructions(cls, v: str | None) -> str:
        return v or ""


class ClassificationOut(BaseModel):
    exam_name: str
    tube: str
    instructions: str = ""


class ClassificationAck(BaseModel):
    message: str
    exam_name: str
    created: bool
