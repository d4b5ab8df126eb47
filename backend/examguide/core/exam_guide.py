"""Exam Guide: pure in-memory join of the registry with the classification store.

Invariants:
    - Output has exactly one row per registry entry, in registry order
    - Unclassified exams get tube=PENDING_TUBE and empty instructions
    - No IO: callers pass plain dicts already read from the stores
"""

from examguide.core.domain_types import PENDING_TUBE


def build_exam_guide(
    registry: list[dict], classifications: list[dict],
) -> list[dict]:
    """Attach tube/instructions to each registry entry by exam_name."""
    by_name = {c["exam_name"]: c for c in classifications}
    guide = []
    for entry in registry:
        match = by_name.get(entry["exam_name"])
        guide.append({
            "exam_name": entry["exam_name"],
            "exam_code": entry.get("exam_code"),
            "tube": match["tube"] if match else PENDING_TUBE,
            "instructions": (match.get("instructions") or "") if match else "",
        })
    return guide
