import uuid

from sqlmodel import select

from app.db.schema import ModuleRequest, TrackingLog, LogisticsStatus, Notification


def _submit(client, payload):
    assert client.post("/api/logistics", json=payload).status_code == 201


def test_list_tracking_logs(client, module_request_payload):
    _submit(client, module_request_payload)

    response = client.get("/api/tracking")

    assert response.status_code == 200
    logs = response.json()
    assert len(logs) == 1
    assert logs[0]["status"] == "Pending"
    assert logs[0]["updatedBy"] == "Alice"
    assert "logId" in logs[0]


def test_update_tracking_status(client, session, module_request_payload):
    _submit(client, module_request_payload)
    request = session.exec(select(ModuleRequest)).one()
    before = session.exec(select(TrackingLog)).one().updated_at

    response = client.put(
        "/api/tracking", json={"logId": str(request.id), "status": "In Transit"})

    assert response.status_code == 200
    assert response.json() == {"message": "Tracking status updated successfully"}

    log = session.exec(select(TrackingLog)).one()
    session.refresh(log)
    assert log.status == LogisticsStatus.IN_TRANSIT
    assert log.updated_at >= before


def test_tracking_update_leaves_request_status_alone(client, session, module_request_payload):
    _submit(client, module_request_payload)
    request = session.exec(select(ModuleRequest)).one()

    client.put("/api/tracking", json={"logId": str(request.id), "status": "Completed"})

    session.refresh(request)
    assert request.status == LogisticsStatus.PENDING


def test_update_unknown_log_is_not_found(client, session):
    response = client.put(
        "/api/tracking", json={"logId": str(uuid.uuid4()), "status": "Completed"})

    assert response.status_code == 404
    assert response.json() == {"detail": "Tracking log not found"}
    assert session.exec(select(Notification)).first() is None


def test_update_requires_log_id_and_status(client):
    assert client.put("/api/tracking", json={"status": "Completed"}).status_code == 400
    assert client.put("/api/tracking", json={"logId": str(uuid.uuid4())}).status_code == 400


def test_update_rejects_unknown_status(client, session, module_request_payload):
    _submit(client, module_request_payload)
    request = session.exec(select(ModuleRequest)).one()

    response = client.put(
        "/api/tracking", json={"logId": str(request.id), "status": "Lost"})

    assert response.status_code == 400


def test_update_appends_notification(client, session, module_request_payload):
    _submit(client, module_request_payload)
    request = session.exec(select(ModuleRequest)).one()

    client.put("/api/tracking", json={"logId": str(request.id), "status": "In Transit"})

    messages = [n.message for n in session.exec(select(Notification)).all()]
    assert f"Tracking status updated: {request.id} to In Transit" in messages
