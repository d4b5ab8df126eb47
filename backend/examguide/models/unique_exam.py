"""Unique Exam ORM: master catalog of exam names with first-registration audit data.

Invariants:
    - exam_name is the primary key: at most one registry entry per exam
    - exam_code, added_by, added_at are write-once (rows are only ever inserted)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from examguide.core.domain_types import SYSTEM_USER, UNKNOWN_EXAM_CODE
from examguide.db.base import Base


class UniqueExam(Base):
    """Registry entry: created by insert_if_absent, never updated."""
    __tablename__ = "unique_exams"

    exam_name: Mapped[str] = mapped_column(String(255), primary_key=True)
    exam_code: Mapped[str] = mapped_column(
        String(100), nullable=False, default=UNKNOWN_EXAM_CODE,
    )
    added_by: Mapped[str] = mapped_column(
        String(255), nullable=False, default=SYSTEM_USER,
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        added_at = self.added_at
        if added_at.tzinfo is None:
            # SQLite drops the offset; stored values are always UTC
            added_at = added_at.replace(tzinfo=timezone.utc)
        return {
            "exam_name": self.exam_name,
            "exam_code": self.exam_code,
            "added_by": self.added_by,
            "added_at": added_at.isoformat(),
        }
