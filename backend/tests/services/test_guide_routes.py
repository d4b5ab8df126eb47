"""Exam Guide Route: registry joined with classifications, pending placeholder."""


async def test_guide_marks_unclassified_exams_pending(client):
    await client.post(
        "/api/exams/unique",
        json={
            "exams": [{"exam_name": "Glucosa", "exam_code": "GLU"}, "Urea"],
            "added_by": "Ana",
        },
    )
    await client.post(
        "/api/classification",
        json={"exam_name": "Glucosa", "tube": "Tapa Gris", "instructions": "Ayuno"},
    )

    res = await client.get("/api/exams/guide")
    assert res.status_code == 200
    assert res.json() == [
        {
            "exam_name": "Glucosa", "exam_code": "GLU",
            "tube": "Tapa Gris", "instructions": "Ayuno",
        },
        {
            "exam_name": "Urea", "exam_code": "unknown",
            "tube": "Pendiente", "instructions": "",
        },
    ]


async def test_guide_ignores_classifications_outside_registry(client):
    await client.post(
        "/api/classification", json={"exam_name": "TSH", "tube": "Tapa Roja"},
    )
    res = await client.get("/api/exams/guide")
    assert res.json() == []


async def test_guide_does_not_write(client):
    await client.post(
        "/api/exams/unique", json={"exams": ["Urea"], "added_by": "Ana"},
    )
    await client.get("/api/exams/guide")

    res = await client.get("/api/classification")
    assert res.json() == {}
