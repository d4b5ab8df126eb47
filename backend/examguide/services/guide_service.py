"""Guide Service: read both stores and compose the exam guide.

Invariants:
    - Read-only: two SELECTs in one session, no writes
    - Ordering follows the registry listing (exam_name ascending)
"""

from sqlalchemy import select

from examguide.core.exam_guide import build_exam_guide
from examguide.infrastructure.database import ExamStore
from examguide.models.classification import ExamClassification
from examguide.models.unique_exam import UniqueExam


async def get_exam_guide(store: ExamStore) -> list[dict]:
    async with store.session() as db:
        registry = await db.execute(
            select(UniqueExam).order_by(UniqueExam.exam_name),
        )
        classifications = await db.execute(select(ExamClassification))
        return build_exam_guide(
            [e.to_dict() for e in registry.scalars().all()],
            [c.to_dict() for c in classifications.scalars().all()],
        )
