"""Unique Exam Routes: master registry listing, bulk registration, and the exam guide.

Invariants:
    - GET /api/exams/all-unique is sorted by exam_name ascending
    - POST /api/exams/unique is one bulk insert-if-absent; existing rows untouched
    - GET /api/exams/guide is read-only; unclassified exams show the pending tube
"""

from fastapi import APIRouter, Depends

from examguide.core.registry_entries import unique_entries
from examguide.infrastructure.database import ExamStore, get_store
from examguide.schemas.unique_exam import (
    BulkRegistrationOut, GuideEntryOut, UniqueExamBatch, UniqueExamOut,
)
from examguide.services.guide_service import get_exam_guide
from examguide.services.unique_exam_service import UniqueExamService

router = APIRouter(prefix="/api/exams", tags=["exams"])


@router.get("/all-unique", response_model=list[UniqueExamOut])
async def get_all_unique_exams(store: ExamStore = Depends(get_store)):
    return await UniqueExamService(store).get_all_unique_exams()


@router.post("/unique", response_model=BulkRegistrationOut)
async def register_unique_exams(
    body: UniqueExamBatch, store: ExamStore = Depends(get_store),
):
    """Register every exam not yet in the master list."""
    entries = unique_entries(body.raw_entries())
    result = await UniqueExamService(store).register_exams(
        entries, added_by=body.added_by, submitted=len(body.exams),
    )
    return BulkRegistrationOut(
        message="Unique exams processed",
        **result.to_dict(),
    )


@router.get("/guide", response_model=list[GuideEntryOut])
async def get_guide(store: ExamStore = Depends(get_store)):
    return await get_exam_guide(store)
