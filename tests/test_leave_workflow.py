from leave_tracker.models import Branch, PublicHoliday
from leave_tracker.models.leave_record import LeaveRecord
from datetime import date


def _add_holiday(db_session, day, name="Bank holiday", region="default"):
    db_session.add(PublicHoliday(date=day, name=name, region=region))
    db_session.commit()


def _create_leave(client, employee, start, end, leave_type="ANNUAL", comment=None):
    return client.post("/api/leaves", json={
        "employee_id": employee.id,
        "start_date": start,
        "end_date": end,
        "leave_type": leave_type,
        "comment": comment,
    })


def test_create_leave_computes_hours(client, employee):
    """A Monday-Friday week for a full-time employee is 40 hours."""
    resp = _create_leave(client, employee, "2024-01-01", "2024-01-05", comment=" Family trip ")
    assert resp.status_code == 201
    data = resp.json()
    assert data["hours"] == 40
    assert data["leave_type"] == "ANNUAL"
    assert data["branch_id"] == employee.branch_id
    assert data["comment"] == "Family trip"


def test_public_holiday_is_excluded(client, db_session, employee):
    _add_holiday(db_session, date(2024, 1, 1), "New Year's Day")
    resp = _create_leave(client, employee, "2024-01-01", "2024-01-05")
    assert resp.json()["hours"] == 32


def test_other_region_holidays_do_not_apply(client, db_session, employee):
    _add_holiday(db_session, date(2024, 1, 2), "2nd January", region="scotland")
    resp = _create_leave(client, employee, "2024-01-01", "2024-01-05")
    assert resp.json()["hours"] == 40


def test_branch_region_holidays_apply(client, db_session, employee_factory):
    scottish = Branch(name="Edinburgh", region="scotland")
    db_session.add(scottish)
    db_session.commit()
    staff = employee_factory(scottish, first_name="Iain")
    _add_holiday(db_session, date(2024, 1, 2), "2nd January", region="scotland")

    resp = _create_leave(client, staff, "2024-01-01", "2024-01-05")
    assert resp.json()["hours"] == 32


def test_reversed_dates_are_normalized(client, employee):
    resp = _create_leave(client, employee, "2024-01-05", "2024-01-01")
    assert resp.status_code == 201
    assert resp.json()["start_date"] == "2024-01-01"
    assert resp.json()["end_date"] == "2024-01-05"
    assert resp.json()["hours"] == 40


def test_display_spelling_of_type_is_accepted(client, employee):
    resp = _create_leave(client, employee, "2024-02-05", "2024-02-05", leave_type="Sick Leave")
    assert resp.json()["leave_type"] == "SICK"


def test_weekend_only_leave_is_rejected(client, db_session, employee):
    resp = _create_leave(client, employee, "2024-01-06", "2024-01-07")
    assert resp.status_code == 422
    assert resp.json()["errors"][0]["code"] == "NO_WORKING_HOURS"
    assert db_session.query(LeaveRecord).count() == 0


def test_leave_on_holiday_only_is_rejected(client, db_session, employee):
    _add_holiday(db_session, date(2024, 12, 25), "Christmas Day")
    resp = _create_leave(client, employee, "2024-12-25", "2024-12-25")
    assert resp.status_code == 422


def test_leave_for_unknown_employee(client):
    resp = client.post("/api/leaves", json={"employee_id": 999, "start_date": "2024-01-01", "end_date": "2024-01-02"})
    assert resp.status_code == 404


def test_preview_does_not_store(client, db_session, employee):
    _add_holiday(db_session, date(2024, 12, 25), "Christmas Day")
    _add_holiday(db_session, date(2024, 12, 26), "Boxing Day")
    resp = client.post("/api/leaves/preview", json={
        "employee_id": employee.id,
        "start_date": "2024-12-23",
        "end_date": "2024-12-27",
    })
    assert resp.status_code == 200
    assert resp.json()["hours"] == 24
    assert resp.json()["year"] == 2024
    assert db_session.query(LeaveRecord).count() == 0


def test_list_leaves_filters_by_year_and_employee(client, branch, employee, employee_factory):
    colleague = employee_factory(branch, first_name="Bob", last_name="Jones")
    _create_leave(client, employee, "2024-03-04", "2024-03-05")
    _create_leave(client, employee, "2025-03-03", "2025-03-03")
    _create_leave(client, colleague, "2024-06-03", "2024-06-03")

    all_2024 = client.get("/api/leaves", params={"branch_id": branch.id, "year": 2024}).json()
    assert len(all_2024) == 2

    alice_any_year = client.get("/api/leaves", params={"branch_id": branch.id, "employee_id": employee.id}).json()
    assert [l["start_date"] for l in alice_any_year] == ["2025-03-03", "2024-03-04"]


def test_delete_leave(client, employee):
    leave_id = _create_leave(client, employee, "2024-03-04", "2024-03-04").json()["id"]
    assert client.delete(f"/api/leaves/{leave_id}").status_code == 200
    assert client.delete(f"/api/leaves/{leave_id}").status_code == 404


def test_employee_balance(client, db_session, employee):
    _add_holiday(db_session, date(2024, 1, 1), "New Year's Day")
    _add_holiday(db_session, date(2024, 12, 25), "Christmas Day")
    _add_holiday(db_session, date(2025, 1, 1), "New Year's Day")

    _create_leave(client, employee, "2024-01-01", "2024-01-05")  # 32h
    _create_leave(client, employee, "2024-02-05", "2024-02-06", leave_type="SICK")  # 16h
    _create_leave(client, employee, "2024-03-01", "2024-03-01", leave_type="UNPAID")  # 8h

    resp = client.get(f"/api/employees/{employee.id}/balance", params={"year": 2024})
    assert resp.status_code == 200
    data = resp.json()
    assert data["employee_name"] == "Alice Smith"
    assert data["allowed_holiday"] == 224
    assert data["holiday_taken"] == 32
    assert data["sick_taken"] == 16
    assert data["unpaid_taken"] == 8
    assert data["total_taken"] == 56
    assert data["public_holiday_hours"] == 16
    # 224 - 32 - 16
    assert data["remaining_holiday"] == 176


def test_balance_is_clamped_at_zero(client, db_session, branch, employee_factory):
    staff = employee_factory(branch, first_name="Short", allowed=50)
    _create_leave(client, staff, "2024-04-01", "2024-04-12")  # 80h
    data = client.get(f"/api/employees/{staff.id}/balance", params={"year": 2024}).json()
    assert data["holiday_taken"] == 80
    assert data["remaining_holiday"] == 0


def test_stored_hours_survive_pattern_change(client, employee):
    """Changing the weekly pattern does not rewrite hours already recorded."""
    _create_leave(client, employee, "2024-01-01", "2024-01-05")
    client.put(f"/api/employees/{employee.id}", json={"weekly_hours": {"mon": 4, "tue": 4, "wed": 4, "thu": 4, "fri": 4}})

    data = client.get(f"/api/employees/{employee.id}/balance", params={"year": 2024}).json()
    assert data["holiday_taken"] == 40


def test_branch_balances(client, branch, employee, employee_factory):
    part_timer = employee_factory(branch, first_name="Pat", last_name="Young", weekly_hours={"mon": 4, "sat": 4})
    _create_leave(client, employee, "2024-01-01", "2024-01-01")
    _create_leave(client, part_timer, "2024-01-06", "2024-01-06")

    resp = client.get(f"/api/branches/{branch.id}/balances", params={"year": 2024})
    assert resp.status_code == 200
    by_name = {row["employee_name"]: row for row in resp.json()}
    assert by_name["Alice Smith"]["holiday_taken"] == 8
    assert by_name["Pat Young"]["holiday_taken"] == 4
    assert by_name["Pat Young"]["remaining_holiday"] == 220


def test_employee_calendar(client, db_session, employee):
    _add_holiday(db_session, date(2024, 12, 25), "Christmas Day")
    _create_leave(client, employee, "2024-01-01", "2024-01-05", comment="Skiing")

    resp = client.get(f"/api/employees/{employee.id}/calendar", params={"year": 2024})
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["days"]) == 366
    assert data["weekly_hours"]["mon"] == 8

    days = {day["date"]: day for day in data["days"]}
    assert days["2024-01-03"]["leave"] == {"leave_type": "ANNUAL", "hours": 8.0, "comment": "Skiing"}
    assert days["2024-12-25"]["is_public_holiday"] is True
    assert days["2024-12-25"]["holiday_name"] == "Christmas Day"
    assert days["2024-01-06"]["is_weekend"] is True


def test_calendar_for_year_9999(client, employee):
    resp = client.get(f"/api/employees/{employee.id}/calendar", params={"year": 9999})
    assert resp.status_code == 200
    assert resp.json()["days"][-1]["date"] == "9999-12-31"


def test_leave_across_new_year_shows_on_both_calendars(client, employee):
    _create_leave(client, employee, "2024-12-30", "2025-01-02")  # 32h, Mon-Thu

    days_2025 = {d["date"]: d for d in client.get(f"/api/employees/{employee.id}/calendar", params={"year": 2025}).json()["days"]}
    assert days_2025["2025-01-02"]["leave"]["hours"] == 8.0
    days_2024 = {d["date"]: d for d in client.get(f"/api/employees/{employee.id}/calendar", params={"year": 2024}).json()["days"]}
    assert days_2024["2024-12-30"]["leave"]["hours"] == 8.0

    # Balances still count the leave toward the year it starts in
    assert client.get(f"/api/employees/{employee.id}/balance", params={"year": 2024}).json()["holiday_taken"] == 32
    assert client.get(f"/api/employees/{employee.id}/balance", params={"year": 2025}).json()["holiday_taken"] == 0
