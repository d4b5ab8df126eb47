"""Registry Entries: normalize a bulk registration payload into unique ExamEntry values.

Invariants:
    - Names are stripped; blank or over-long names are rejected with InvalidInputError
    - First occurrence of a name wins; later duplicates in the same batch are dropped
    - Blank exam codes count as "not supplied"
"""

from examguide.core.domain_types import (
    ExamEntry, ExamName, MAX_EXAM_CODE_LENGTH, MAX_EXAM_NAME_LENGTH,
)
from examguide.core.errors import InvalidInputError


def normalize_entry(item: str | dict, index: int) -> ExamEntry:
    """Turn a plain name or an {exam_name, exam_code} mapping into an ExamEntry."""
    if isinstance(item, str):
        name, code = item, None
    else:
        name, code = item.get("exam_name"), item.get("exam_code")
    if not isinstance(name, str) or not name.strip():
        raise InvalidInputError(
            f"Entry {index} has an empty exam_name", f"exams.{index}",
        )
    name = name.strip()
    if len(name) > MAX_EXAM_NAME_LENGTH:
        raise InvalidInputError(
            f"Entry {index} exam_name exceeds {MAX_EXAM_NAME_LENGTH} characters",
            f"exams.{index}",
        )
    if isinstance(code, str):
        code = code.strip() or None
    if code is not None and len(code) > MAX_EXAM_CODE_LENGTH:
        raise InvalidInputError(
            f"Entry {index} exam_code exceeds {MAX_EXAM_CODE_LENGTH} characters",
            f"exams.{index}",
        )
    return ExamEntry(exam_name=ExamName(name), exam_code=code)


def unique_entries(items: list[str | dict]) -> list[ExamEntry]:
    """Normalize every item and collapse duplicate names (first one kept)."""
    seen: dict[str, ExamEntry] = {}
    for index, item in enumerate(items):
        entry = normalize_entry(item, index)
        seen.setdefault(entry.exam_name, entry)
    return list(seen.values())
