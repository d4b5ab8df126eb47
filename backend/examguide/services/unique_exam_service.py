"""Unique Exam Service: master registry listing and bulk registration.

Invariants:
    - register_exams issues ONE insert_if_absent statement per batch
    - Existing registry rows are never modified (exam_code/added_by/added_at write-once)
    - processed_count counts submitted entries; inserted_count counts rows created
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select

from examguide.core.domain_types import (
    BulkResult, ExamEntry, SYSTEM_USER, UNKNOWN_EXAM_CODE,
)
from examguide.infrastructure.database import ExamStore
from examguide.infrastructure.upserts import insert_if_absent
from examguide.models.unique_exam import UniqueExam

logger = logging.getLogger(__name__)


class UniqueExamService:
    """Operations on the unique_exams registry."""

    def __init__(self, store: ExamStore):
        self.store = store

    async def get_all_unique_exams(self) -> list[dict]:
        """Registry sorted by exam_name ascending."""
        async with self.store.session() as db:
            result = await db.execute(
                select(UniqueExam).order_by(UniqueExam.exam_name),
            )
            return [e.to_dict() for e in result.scalars().all()]

    async def register_exams(
        self,
        entries: list[ExamEntry],
        added_by: str = SYSTEM_USER,
        submitted: int | None = None,
    ) -> BulkResult:
        """Insert entries not yet registered.

        `entries` must already be de-duplicated by name; `submitted` is the
        size of the original payload when it differs from len(entries).
        """
        now = datetime.now(timezone.utc)
        rows = [
            {
                "exam_name": e.exam_name,
                "exam_code": e.exam_code or UNKNOWN_EXAM_CODE,
                "added_by": added_by,
                "added_at": now,
            }
            for e in entries
        ]
        async with self.store.session() as db:
            inserted = await insert_if_absent(db, UniqueExam, rows, key="exam_name")
            await db.commit()

        result = BulkResult(
            processed_count=submitted if submitted is not None else len(entries),
            inserted_count=len(inserted),
        )
        logger.info(
            "Registered unique exams",
            extra={
                "processed_count": result.processed_count,
                "inserted_count": result.inserted_count,
            },
        )
        return result
