import uuid

import pytest
from sqlmodel import select

from app.core.exceptions import NotFoundError, ValidationError
from app.db.schema import ProductionRecord, Notification
from app.models.production import ProductionRecordCreate
from app.services.production import ProductionService


def test_on_time_fulfilled_record(client, session, production_payload):
    response = client.post("/api/production", json=production_payload)

    assert response.status_code == 201
    assert response.json() == {"message": "Production data added successfully"}

    record = session.exec(select(ProductionRecord)).one()
    assert record.order_fulfilled is True
    assert record.order_on_time is True


def test_late_unfulfilled_record(client, session, production_payload):
    payload = {
        **production_payload,
        "producedQty": 50,
        "dateRequested": "2023-10-01",
        "dateFulfilled": "2023-10-10",
    }
    client.post("/api/production", json=payload)

    record = session.exec(select(ProductionRecord)).one()
    assert record.order_fulfilled is False
    assert record.order_on_time is False


def test_client_supplied_derived_fields_are_ignored(client, production_payload):
    payload = {**production_payload, "producedQty": 10, "orderFulfilled": True}
    client.post("/api/production", json=payload)

    record = client.get("/api/production").json()[0]
    assert record["orderFulfilled"] is False
    assert record["workOrderID"] == "WO-1001"


@pytest.mark.parametrize(
    "field", ["workOrderID", "dateRequested", "fulfilledBy", "dateFulfilled", "producedQty"])
def test_missing_field_is_rejected(client, session, production_payload, field):
    payload = dict(production_payload)
    payload.pop(field)

    response = client.post("/api/production", json=payload)

    assert response.status_code == 400
    assert response.json() == {"detail": "All fields are required"}
    assert session.exec(select(ProductionRecord)).first() is None


def test_update_recomputes_derived_fields(client, session, production_payload):
    client.post("/api/production", json=production_payload)
    record = session.exec(select(ProductionRecord)).one()
    assert record.order_fulfilled and record.order_on_time

    response = client.put("/api/production", json={
        **production_payload,
        "id": str(record.id),
        "producedQty": 99,
        "dateFulfilled": "2023-10-06",
    })

    assert response.status_code == 200
    session.refresh(record)
    assert record.produced_qty == 99
    assert record.order_fulfilled is False
    assert record.order_on_time is False


def test_update_unknown_record_is_not_found(session, production_payload):
    service = ProductionService(session)
    data = ProductionRecordCreate.model_validate(production_payload)

    with pytest.raises(NotFoundError):
        service.update_production_record(uuid.uuid4(), data)


def test_update_unknown_record_returns_404(client, production_payload):
    response = client.put("/api/production", json={**production_payload, "id": str(uuid.uuid4())})
    assert response.status_code == 404


def test_update_requires_all_fields(client, session, production_payload):
    client.post("/api/production", json=production_payload)
    record = session.exec(select(ProductionRecord)).one()

    response = client.put("/api/production", json={"id": str(record.id), "producedQty": 10})

    assert response.status_code == 400


def test_zero_quantity_counts_as_missing(session, production_payload):
    service = ProductionService(session)
    data = ProductionRecordCreate.model_validate({**production_payload, "producedQty": 0})

    with pytest.raises(ValidationError):
        service.submit_production_record(data)


def test_delete_record(client, session, production_payload):
    client.post("/api/production", json=production_payload)
    record = session.exec(select(ProductionRecord)).one()

    response = client.request("DELETE", "/api/production", json={"id": str(record.id)})

    assert response.status_code == 200
    assert response.json() == {"message": "Production data deleted successfully"}
    assert session.exec(select(ProductionRecord)).first() is None


def test_delete_unknown_record_is_a_no_op(client, session):
    record_id = uuid.uuid4()

    response = client.request("DELETE", "/api/production", json={"id": str(record_id)})

    assert response.status_code == 200
    messages = [n.message for n in session.exec(select(Notification)).all()]
    assert messages == [f"Production data deleted: {record_id}"]


def test_delete_requires_id(client):
    response = client.request("DELETE", "/api/production", json={})
    assert response.status_code == 400
