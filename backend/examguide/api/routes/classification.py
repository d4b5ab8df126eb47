"""Classification Routes: list, read, and upsert exam tube classifications.

Invariants:
    - GET /api/classification returns a mapping keyed by exam_name ({} when empty)
    - POST /api/classification requires exam_name and tube; instructions defaults to ""
    - GET /api/exams/classify/{exam_name} is 404 when the exam has no classification
"""

from fastapi import APIRouter, Depends

from examguide.infrastructure.database import ExamStore, get_store
from examguide.schemas.classification import (
    ClassificationAck, ClassificationOut, ClassificationUpsert,
)
from examguide.services.classification_service import ClassificationService

router = APIRouter(prefix="/api", tags=["classification"])


@router.get("/classification")
async def get_all_classifications(
    store: ExamStore = Depends(get_store),
) -> dict[str, dict[str, str]]:
    return await ClassificationService(store).get_all_classifications()


@router.post("/classification", response_model=ClassificationAck)
async def upsert_classification(
    body: ClassificationUpsert, store: ExamStore = Depends(get_store),
):
    """Create the classification or replace its tube/instructions."""
    created = await ClassificationService(store).upsert_classification(
        body.exam_name, body.tube, body.instructions,
    )
    return ClassificationAck(
        message=(
            "Classification created" if created else "Classification updated"
        ),
        exam_name=body.exam_name,
        created=created,
    )


@router.get(
    "/exams/classify/{exam_name:path}", response_model=ClassificationOut,
)
async def get_classification(
    exam_name: str, store: ExamStore = Depends(get_store),
):
    return await ClassificationService(store).get_classification(
        exam_name.strip(),
    )
