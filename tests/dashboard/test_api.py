import pytest

from school_dashboard.main import create_app


@pytest.fixture
def client(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(store=store)
    return app.test_client()


def _get(client, path, viewer_id=None, **params):
    if viewer_id:
        params["viewer_id"] = viewer_id
    return client.get(path, query_string=params)


def test_dashboard_requires_viewer(client):
    resp = _get(client, "/api/dashboard")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_unknown_viewer_is_404(client):
    assert _get(client, "/api/dashboard", "ghost").status_code == 404


def test_parent_dashboard_json(client):
    resp = _get(client, "/api/dashboard", "p_1", date="2024-03-15")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["role"] == "parent"
    assert data["weeklyAttendance"]["percentage"] == 60
    assert data["paymentSummary"]["totalDueAmount"] == 5000
    assert [e["eventId"] for e in data["nextEvents"]] == ["e_school", "e_s1", "e_far"]
    assert len(data["calendar"]["cells"]) == 42
    today = [c for c in data["calendar"]["cells"] if c["isToday"]]
    assert [c["key"] for c in today] == ["2024-03-15"]


def test_viewer_header_is_accepted(client):
    resp = client.get("/api/dashboard", query_string={"date": "2024-03-15"}, headers={"X-Viewer-Id": "admin_1"})

    assert resp.status_code == 200
    assert resp.get_json()["data"]["totalStudents"] == 4


def test_unknown_role_returns_empty_dashboard(client):
    data = _get(client, "/api/dashboard", "x_1", date="2024-03-15").get_json()["data"]

    assert data["isEmpty"] is True
    assert data["issues"][0]["type"] == "UnknownRoleError"


def test_bad_date_argument_is_400(client):
    assert _get(client, "/api/dashboard", "p_1", date="15/03/2024").status_code == 400
    assert _get(client, "/api/calendar", "p_1", month="March").status_code == 400


def test_calendar_endpoint(client):
    resp = _get(client, "/api/calendar", "t_1", month="2024-03", selected="2024-03-18", date="2024-03-15")

    body = resp.get_json()
    assert resp.status_code == 200
    (selected,) = [c for c in body["data"]["cells"] if c["isSelected"]]
    assert selected["key"] == "2024-03-18"
    assert [e["eventId"] for e in selected["events"]] == ["e_class1"]
    assert body["issues"] == []


def test_non_owner_cannot_mark_paid(client):
    resp = client.post("/api/payments/pay_1/mark-paid", query_string={"viewer_id": "p_1"}, json={"reference": "X"})

    assert resp.status_code == 403


def test_owner_marks_payment_paid(client, store):
    resp = client.post(
        "/api/payments/pay_1/mark-paid",
        query_string={"viewer_id": "admin_1"},
        json={"reference": "TXN-77", "paid_on": "2024-03-15"},
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"]["status"] == "paid"
    assert store.get_payment("pay_1").reference == "TXN-77"


def test_mark_paid_without_reference_is_400(client):
    resp = client.post("/api/payments/pay_1/mark-paid", query_string={"viewer_id": "admin_1"}, json={})

    assert resp.status_code == 400


def test_payment_status_change(client, store):
    resp = client.post("/api/payments/pay_4/status", query_string={"viewer_id": "admin_1"}, json={"status": "overdue"})

    assert resp.status_code == 200
    assert store.get_payment("pay_4").status.value == "overdue"


def test_event_create_update_delete(client, store):
    owner = {"viewer_id": "admin_1"}
    created = client.post(
        "/api/events",
        query_string=owner,
        json={
            "title": "Annual Day",
            "date": "2024-03-28",
            "time": "17:30",
            "type": "event",
            "audience": {"kind": "class", "id": "class_2"},
        },
    )

    assert created.status_code == 201
    event = created.get_json()["data"]
    assert event["date"] == "2024-03-28T17:30:00"
    assert event["createdBy"] == "admin_1"
    event_id = event["eventId"]
    assert store.get_event(event_id).class_id == "class_2"

    updated = client.put(f"/api/events/{event_id}", query_string=owner, json={"title": "Annual Day 2024"})
    assert updated.status_code == 200
    assert store.get_event(event_id).title == "Annual Day 2024"

    deleted = client.delete(f"/api/events/{event_id}", query_string=owner)
    assert deleted.status_code == 200
    assert store.get_event(event_id) is None


def test_event_create_validates(client):
    resp = client.post("/api/events", query_string={"viewer_id": "admin_1"}, json={"title": "", "date": "2024-03-28"})

    assert resp.status_code == 400


def test_teacher_cannot_create_events(client):
    resp = client.post("/api/events", query_string={"viewer_id": "t_1"}, json={"title": "Quiz", "date": "2024-03-28"})

    assert resp.status_code == 403


def test_delete_unknown_event_is_400(client):
    assert client.delete("/api/events/nope", query_string={"viewer_id": "admin_1"}).status_code == 400


@pytest.mark.parametrize("audience", ["school", ["class", "class_1"], 7])
def test_event_audience_must_be_an_object(client, audience):
    owner = {"viewer_id": "admin_1"}
    created = client.post("/api/events", query_string=owner, json={"title": "Quiz", "date": "2024-03-28", "audience": audience})
    updated = client.put("/api/events/e_school", query_string=owner, json={"audience": audience})

    assert created.status_code == 400
    assert updated.status_code == 400


def test_mark_paid_accepts_camel_case_paid_on(client, store):
    resp = client.post(
        "/api/payments/pay_4/mark-paid",
        query_string={"viewer_id": "admin_1"},
        json={"reference": "TXN-78", "paidOn": "2024-03-12"},
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"]["paidOn"] == "2024-03-12"
    assert store.get_payment("pay_4").paid_on == "2024-03-12"
