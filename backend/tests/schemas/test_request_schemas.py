"""Request schemas: required fields, stripping, and accepted registry shapes."""

import pytest
from pydantic import ValidationError

from examguide.schemas.classification import ClassificationUpsert
from examguide.schemas.unique_exam import ExamEntryIn, UniqueExamBatch


def test_classification_defaults_instructions_to_empty():
    body = ClassificationUpsert(exam_name="Glucosa", tube="Tapa Roja")
    assert body.instructions == ""


def test_classification_null_instructions_become_empty():
    body = ClassificationUpsert(exam_name="Glucosa", tube="Tapa Roja", instructions=None)
    assert body.instructions == ""


def test_classification_requires_tube():
    with pytest.raises(ValidationError):
        ClassificationUpsert(exam_name="Glucosa")


def test_classification_rejects_whitespace_tube():
    with pytest.raises(ValidationError):
        ClassificationUpsert(exam_name="Glucosa", tube="  ")


def test_batch_accepts_names_and_entries():
    batch = UniqueExamBatch(
        exams=["Urea", {"exam_name": "Glucosa", "exam_code": "GLU"}],
        added_by=" Ana ",
    )
    assert batch.added_by == "Ana"
    assert isinstance(batch.exams[1], ExamEntryIn)
    assert batch.raw_entries() == [
        "Urea", {"exam_name": "Glucosa", "exam_code": "GLU"},
    ]


def test_batch_rejects_empty_list():
    with pytest.raises(ValidationError):
        UniqueExamBatch(exams=[], added_by="Ana")


def test_batch_rejects_blank_added_by():
    with pytest.raises(ValidationError):
        UniqueExamBatch(exams=["Urea"], added_by="   ")
