"""Error Envelope: every failing status answers with the same error shape.

Invariants:
    - Schema failures and registry-entry failures are both VALIDATION_ERROR 400
      with identical top-level keys
    - 404 and 503 share those keys; only validation errors carry details
"""

ENVELOPE_KEYS = {
    "code", "message", "category", "severity", "timestamp", "context", "details",
}


async def test_schema_and_entry_validation_share_shape(client):
    schema_failure = await client.post(
        "/api/exams/unique", json={"exams": ["Glucosa"]},
    )
    entry_failure = await client.post(
        "/api/exams/unique", json={"exams": ["  "], "added_by": "Ana"},
    )
    assert schema_failure.status_code == entry_failure.status_code == 400

    schema_error = schema_failure.json()["error"]
    entry_error = entry_failure.json()["error"]
    assert set(schema_error) == set(entry_error) == ENVELOPE_KEYS
    assert schema_error["code"] == entry_error["code"] == "VALIDATION_ERROR"
    assert schema_error["context"]["field"] == "body.added_by"
    assert entry_error["details"] == [{
        "field": "exams.0",
        "message": "Entry 0 has an empty exam_name",
        "type": "value_error",
    }]


async def test_not_found_uses_same_envelope(client):
    res = await client.get("/api/exams/classify/Inexistente")
    assert res.status_code == 404
    error = res.json()["error"]
    assert set(error) == ENVELOPE_KEYS
    assert error["details"] == []


async def test_unavailable_uses_same_envelope(unready_client):
    res = await unready_client.get("/api/exams/guide")
    assert res.status_code == 503
    assert set(res.json()["error"]) == ENVELOPE_KEYS
