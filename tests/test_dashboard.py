
import pytest
from sqlmodel import select

from app.core.exceptions import ValidationError
from app.db.schema import ModuleRequest, WorkOrder, LogisticsStatus
from app.services.dashboard import DashboardService
from app.utils.dates import to_timestamp


def _request(module="CAM-001", recipient="Factory A", request_date="2023-10-01", status=None):
    return ModuleRequest(
        module=module,
        requested_by="Alice",
        recipient=recipient,
        request_date=to_timestamp(request_date),
        quantity=10,
        status=status or LogisticsStatus.PENDING,
    )


@pytest.fixture
def seeded(session):
    rows = [
        _request("CAM-001", "Factory A", "2023-10-01"),
        _request("CAM-001", "Factory B", "2023-10-01", LogisticsStatus.COMPLETED),
        _request("BAT-210", "Factory A", "2023-10-09", LogisticsStatus.IN_TRANSIT),
        _request("CAM-001", "Factory A", "2023-11-02", LogisticsStatus.IN_TRANSIT),
        _request("SCR-550", "Factory C", "2023-11-02"),
        _request("BAT-210", "Factory A", "2023-11-03", LogisticsStatus.COMPLETED),
    ]
    for row in rows:
        session.add(row)
    session.commit()
    return rows


def test_logistics_summary_counts_per_recipient(client, seeded):
    response = client.get("/api/logistics-summary")

    assert response.status_code == 200
    counts = {point["name"]: point["value"] for point in response.json()}
    assert counts == {"Factory A": 4, "Factory B": 1, "Factory C": 1}


def test_module_chart_sorted_by_count(client, seeded):
    points = client.get("/api/module-chart").json()

    assert points[0] == {"name": "CAM-001", "value": 3}
    assert points[1] == {"name": "BAT-210", "value": 2}
    assert points[2] == {"name": "SCR-550", "value": 1}
    values = [p["value"] for p in points]
    assert values == sorted(values, reverse=True)


def test_fulfillment_rate_folds_in_transit_into_fulfilled(client, seeded):
    response = client.get("/api/fulfillment-rate")

    # 2 Pending, 2 Completed, 2 In Transit
    assert response.json() == [
        {"name": "Pending", "value": 2},
        {"name": "Fulfilled", "value": 4},
    ]


def test_fulfillment_rate_empty_store(client):
    assert client.get("/api/fulfillment-rate").json() == [
        {"name": "Pending", "value": 0},
        {"name": "Fulfilled", "value": 0},
    ]


def test_aggregates_reflect_new_submissions(client, module_request_payload):
    assert client.get("/api/module-chart").json() == []

    client.post("/api/logistics", json=module_request_payload)

    assert client.get("/api/module-chart").json() == [{"name": "CAM-001", "value": 1}]
    assert client.get("/api/logistics-summary").json() == [{"name": "Factory A", "value": 1}]


def test_aggregates_ignore_tracking_status(client, session, module_request_payload):
    client.post("/api/logistics", json=module_request_payload)
    request = session.exec(select(ModuleRequest)).one()

    client.put("/api/tracking", json={"logId": str(request.id), "status": "Completed"})

    assert client.get("/api/fulfillment-rate").json()[0] == {"name": "Pending", "value": 1}


@pytest.mark.parametrize("view,expected", [
    ("daily", [("2023-10-01", 2), ("2023-10-09", 1), ("2023-11-02", 2), ("2023-11-03", 1)]),
    ("weekly", [("2023-W39", 2), ("2023-W41", 1), ("2023-W44", 3)]),
    ("monthly", [("2023-10", 3), ("2023-11", 3)]),
])
def test_module_trend(client, seeded, view, expected):
    response = client.get("/api/module-trend", params={"view": view})

    assert response.status_code == 200
    assert [(p["name"], p["value"]) for p in response.json()] == expected


def test_module_trend_rejects_unknown_view(client, session):
    assert client.get("/api/module-trend", params={"view": "hourly"}).status_code == 400

    with pytest.raises(ValidationError):
        DashboardService(session).module_trend("hourly")


def test_late_work_orders(client, production_payload):
    client.post("/api/production", json=production_payload)
    client.post("/api/production", json={**production_payload, "dateFulfilled": "2023-10-20"})
    client.post("/api/production", json={**production_payload, "dateFulfilled": "2023-10-21"})

    response = client.get("/api/late-work-orders")

    assert response.status_code == 200
    assert response.json() == {"lateWorkOrders": 2}


def test_production_vs_ordered(client, session, work_order_payload, production_payload):
    client.post("/api/workorder", json=work_order_payload)
    order_ref = str(session.exec(select(WorkOrder)).one().id)

    client.post("/api/production", json={**production_payload, "workOrderID": order_ref})
    client.post("/api/production", json={
        **production_payload, "workOrderID": order_ref, "producedQty": 50})
    client.post("/api/production", json={**production_payload, "workOrderID": "WO-9999"})

    response = client.get("/api/production-vs-ordered")

    assert response.status_code == 200
    bars = {bar["workOrderId"]: bar for bar in response.json()}
    assert bars[order_ref] == {"workOrderId": order_ref, "producedQty": 200, "orderedQty": 500}
    assert bars["WO-9999"] == {"workOrderId": "WO-9999", "producedQty": 150, "orderedQty": 0}


def test_production_vs_ordered_empty_store(client):
    assert client.get("/api/production-vs-ordered").json() == []
