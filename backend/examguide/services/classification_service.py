"""Classification Service: read and upsert tube classifications.

Invariants:
    - Each operation opens one store session and issues one statement (plus commit)
    - upsert_classification never touches created_at on an existing row
    - Store failures surface as StoreError (mapped by ExamStore.session)
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select

from examguide.core.errors import ErrorContext, ResourceNotFoundError
from examguide.infrastructure.database import ExamStore
from examguide.infrastructure.upserts import upsert
from examguide.models.classification import ExamClassification

logger = logging.getLogger(__name__)


def _same_instant(stored: datetime, written: datetime) -> bool:
    """Compare timestamps whether or not the dialect kept the tz offset."""
    if stored.tzinfo is not None:
        stored = stored.astimezone(timezone.utc)
    return stored.replace(tzinfo=None) == written.replace(tzinfo=None)


class ClassificationService:
    """Operations on the exam_classifications table."""

    def __init__(self, store: ExamStore):
        self.store = store

    async def list_classifications(self) -> list[dict]:
        async with self.store.session() as db:
            result = await db.execute(
                select(ExamClassification).order_by(ExamClassification.exam_name),
            )
            return [c.to_dict() for c in result.scalars().all()]

    async def get_all_classifications(self) -> dict:
        """All classifications keyed by exam_name."""
        return {
            c["exam_name"]: {
                "tube": c["tube"],
                "instructions": c["instructions"],
            }
            for c in await self.list_classifications()
        }

    async def get_classification(self, exam_name: str) -> dict:
        async with self.store.session() as db:
            result = await db.execute(
                select(ExamClassification)
                .where(ExamClassification.exam_name == exam_name),
            )
            record = result.scalar_one_or_none()
        if record is None:
            raise ResourceNotFoundError(
                "Classification", exam_name,
                ErrorContext(exam_name=exam_name),
            )
        return record.to_dict()

    async def upsert_classification(
        self, exam_name: str, tube: str, instructions: str = "",
    ) -> bool:
        """Create or replace tube/instructions. Returns True when the row is new."""
        now = datetime.now(timezone.utc)
        async with self.store.session() as db:
            created_at = await upsert(
                db,
                ExamClassification,
                {
                    "exam_name": exam_name,
                    "tube": tube,
                    "instructions": instructions or "",
                    "created_at": now,
                },
                key="exam_name",
                update_columns=["tube", "instructions"],
                returning="created_at",
            )
            await db.commit()
        created = _same_instant(created_at, now)
        logger.info(
            f"Classification {'created' if created else 'updated'}",
            extra={"exam_name": exam_name, "was_created": created},
        )
        return created
