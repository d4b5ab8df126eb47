"""Domain Types: shared names and sentinel values for exams, tubes and the registry.

Invariants:
    - Sentinel values are defined once here and nowhere else
    - ExamEntry is immutable; exam_code None means "not supplied"
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ExamName = NewType("ExamName", str)


# ─── Sentinels ───────────────────────────────────────────────────

UNKNOWN_EXAM_CODE = "unknown"
SYSTEM_USER = "system"
PENDING_TUBE = "Pendiente"


# ─── Limits ──────────────────────────────────────────────────────

MAX_EXAM_NAME_LENGTH = 255
MAX_EXAM_CODE_LENGTH = 100
# asyncpg caps one statement at 32767 bind parameters; a registry row uses 4
MAX_REGISTRATION_BATCH = 5000


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class ExamEntry:
    """One registry submission: a name plus an optional exam code."""
    exam_name: ExamName
    exam_code: str | None = None


@dataclass(frozen=True)
class BulkResult:
    """Outcome of one bulk registration."""
    processed_count: int
    inserted_count: int

    def to_dict(self) -> dict:
        return {
            "processed_count": self.processed_count,
            "inserted_count": self.inserted_count,
        }
