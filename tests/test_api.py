from __future__ import annotations

from datetime import datetime

import pytest

from school_attendance.common.datetime_utils import epoch_millis


@pytest.fixture()
def scan_at(monkeypatch):
    def _set(*args):
        monkeypatch.setattr("school_attendance.attendance.service.now_millis", lambda: epoch_millis(datetime(*args)))

    return _set


def add_student(client, name="S1", roll="1"):
    resp = client.post("/api/students", json={"name": name, "roll_number": roll, "grade": "Class 10", "section": "A"})
    assert resp.status_code == 201
    return resp.get_json()["student"]


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_seeded_defaults(client):
    classes = client.get("/api/classes").get_json()["classes"]
    school = client.get("/api/school").get_json()["school"]

    assert [(c["grade"], c["section"]) for c in classes] == [("10", "A"), ("11", "Science"), ("12", "Commerce")]
    assert school["start_time"] == "08:00"


def test_add_student_validation(client):
    resp = client.post("/api/students", json={"name": "", "roll_number": "1"})

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Name is required"}


def test_scan_flow(client, scan_at):
    student = add_student(client)

    scan_at(2026, 2, 2, 7, 58)
    first = client.post("/api/scan", json={"code": student["person_id"]})
    assert first.status_code == 200
    body = first.get_json()
    assert body["message"] == "Marked PRESENT: S1"
    assert body["toast"] == "success"
    assert body["event"]["date"] == "2026-02-02"
    assert body["event"]["time"] == "07:58:00"

    scan_at(2026, 2, 2, 9, 0)
    again = client.post("/api/scan", json={"qr_code": student["person_id"]})
    assert again.status_code == 409
    assert again.get_json()["reason"] == "ALREADY_RECORDED"
    assert again.get_json()["existing"] == body["event"]

    unknown = client.post("/api/scan", json={"code": "not-a-person"})
    assert unknown.status_code == 404
    assert unknown.get_json()["message"] == "Unknown ID Card"

    empty = client.post("/api/scan", json={"code": "  "})
    assert empty.status_code == 400


def test_late_scan_after_start_time_change(client, scan_at):
    student = add_student(client)
    resp = client.put("/api/school/start-time", json={"start_time": "07:30"})
    assert resp.get_json()["effective_start_time"] == "07:30"

    scan_at(2026, 2, 2, 7, 45)
    body = client.post("/api/scan", json={"code": student["person_id"]}).get_json()

    assert body["message"] == "Marked LATE: S1"
    assert body["toast"] == "warning"
    assert body["event"]["note"] == "Late by 15 min"


def test_reports(client, scan_at):
    s1 = add_student(client, "S1", "1")
    s2 = add_student(client, "S2", "2")
    scan_at(2026, 2, 2, 7, 0)
    client.post("/api/scan", json={"code": s1["person_id"]})

    day = client.get("/api/reports/day?date=2026-02-02&type=student").get_json()
    assert day["present"] == [s1["person_id"]]
    assert day["absent"] == [s2["person_id"]]
    assert day["counts"] == {"present": 1, "late": 0, "absent": 1}

    events = client.get("/api/attendance?date=2026-02-02&type=STUDENT").get_json()["events"]
    assert [e["person_id"] for e in events] == [s1["person_id"]]

    series = client.get("/api/reports/series?end=2026-02-02&days=2").get_json()["series"]
    assert series == [
        {"date": "2026-02-01", "weekday": "Sun", "present": 0, "late": 0, "absent": 2},
        {"date": "2026-02-02", "weekday": "Mon", "present": 1, "late": 0, "absent": 1},
    ]

    csv_resp = client.get("/api/reports/series.csv?end=2026-02-02&days=2")
    assert csv_resp.status_code == 200
    assert csv_resp.mimetype == "text/csv"
    assert csv_resp.data.startswith(b"\xef\xbb\xbfdate,weekday,present,late,absent")

    dash = client.get("/api/dashboard?date=2026-02-02").get_json()
    assert dash["present_today"] == 1
    assert dash["absent_today"] == 1


def test_report_errors(client):
    assert client.get("/api/reports/series?days=0").status_code == 400
    assert client.get("/api/reports/series?days=400").status_code == 400
    assert client.get("/api/reports/day?type=parent").status_code == 400
    assert client.get("/api/reports/day?date=yesterday").status_code == 400


def test_delete_person(client):
    student = add_student(client)

    assert client.delete(f"/api/people/{student['person_id']}").status_code == 200
    assert client.delete(f"/api/people/{student['person_id']}").status_code == 404


def test_card_endpoints(client):
    student = add_student(client)

    card = client.get(f"/api/people/{student['person_id']}/card").get_json()["card"]
    qr = client.get(f"/api/people/{student['person_id']}/qr.png")

    assert card["badge"] == "STUDENT"
    assert qr.mimetype == "image/png"
    assert qr.data.startswith(b"\x89PNG")
    assert client.get("/api/people/missing/card").status_code == 404


@pytest.mark.parametrize(
    "method, url, body",
    [
        ("put", "/api/school/start-time", {"start_time": 830}),
        ("put", "/api/school", {"name": 42}),
        ("post", "/api/students", {"name": 123, "roll_number": "1"}),
        ("post", "/api/students", {"name": "Ana", "roll_number": 7}),
        ("post", "/api/students", {"name": "Ana", "roll_number": "7", "grade": ["10"]}),
        ("post", "/api/teachers", {"name": "T1", "subject": {"x": 1}}),
        ("post", "/api/students/bulk", {"text": 5}),
        ("post", "/api/classes", {"grade": 10, "section": "A"}),
    ],
)
def test_non_text_fields_are_rejected(client, method, url, body):
    resp = getattr(client, method)(url, json=body)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert client.get("/api/students").get_json()["students"] == []
    assert client.get("/api/school").get_json()["school"]["start_time"] == "08:00"


def test_overlong_start_time_is_rejected(client):
    resp = client.put("/api/school/start-time", json={"start_time": "x" * 65})

    assert resp.status_code == 400
    assert client.get("/api/school").get_json()["school"]["start_time"] == "08:00"
