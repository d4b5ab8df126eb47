"""Exam Classification ORM: which collection tube an exam needs and how to handle it.

Invariants:
    - exam_name is the primary key: at most one classification per exam
    - instructions is never NULL (empty string when absent)
    - created_at is written on first insertion only; upserts never touch it
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from examguide.db.base import Base


class ExamClassification(Base):
    __tablename__ = "exam_classifications"

    exam_name: Mapped[str] = mapped_column(String(255), primary_key=True)
    tube: Mapped[str] = mapped_column(String(255), nullable=False)
    instructions: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        return {
            "exam_name": self.exam_name,
            "tube": self.tube,
            "instructions": self.instructions or "",
        }
