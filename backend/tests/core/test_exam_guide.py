"""Tests for build_exam_guide: pure join of registry and classifications, no IO."""

from examguide.core.domain_types import PENDING_TUBE
from examguide.core.exam_guide import build_exam_guide


def test_empty_registry_gives_empty_guide():
    assert build_exam_guide([], [{"exam_name": "TSH", "tube": "Tapa Roja"}]) == []


def test_classified_entry_gets_tube_and_instructions():
    guide = build_exam_guide(
        [{"exam_name": "Glucosa", "exam_code": "GLU"}],
        [{"exam_name": "Glucosa", "tube": "Tapa Gris", "instructions": "Ayuno"}],
    )
    assert guide == [{
        "exam_name": "Glucosa", "exam_code": "GLU",
        "tube": "Tapa Gris", "instructions": "Ayuno",
    }]


def test_unclassified_entry_gets_pending_placeholder():
    guide = build_exam_guide([{"exam_name": "Urea", "exam_code": "unknown"}], [])
    assert guide[0]["tube"] == PENDING_TUBE == "Pendiente"
    assert guide[0]["instructions"] == ""


def test_missing_instructions_become_empty_string():
    guide = build_exam_guide(
        [{"exam_name": "Urea"}],
        [{"exam_name": "Urea", "tube": "Tapa Roja", "instructions": None}],
    )
    assert guide[0]["instructions"] == ""
    assert guide[0]["exam_code"] is None


def test_preserves_registry_order():
    registry = [{"exam_name": n} for n in ("Urea", "Albumina", "Glucosa")]
    guide = build_exam_guide(registry, [])
    assert [g["exam_name"] for g in guide] == ["Urea", "Albumina", "Glucosa"]
