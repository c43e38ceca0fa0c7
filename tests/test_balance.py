import pytest

from leave_tracker.accrual import Balance, LeaveType, reconcile


def _leave(leave_type, hours):
    return {"type": leave_type, "hours": hours}


@pytest.mark.parametrize("value, expected", [
    ("ANNUAL", LeaveType.ANNUAL),
    ("Holiday", LeaveType.ANNUAL),
    ("annual_leave", LeaveType.ANNUAL),
    ("Vacation", LeaveType.ANNUAL),
    ("SICK", LeaveType.SICK),
    ("Sick Leave", LeaveType.SICK),
    ("unpaid", LeaveType.UNPAID),
    ("OTHER", LeaveType.OTHER),
    ("Compassionate", LeaveType.OTHER),
    (None, LeaveType.OTHER),
    (LeaveType.SICK, LeaveType.SICK),
])
def test_leave_type_parse(value, expected):
    assert LeaveType.parse(value) is expected


def test_leave_type_labels():
    assert LeaveType.ANNUAL.label == "Holiday"
    assert LeaveType.SICK.label == "Sick Leave"


def test_remaining_deducts_annual_and_public_holidays():
    balance = reconcile(224, [_leave("ANNUAL", 100)], 16)
    assert balance.remaining_holiday == 108
    assert balance.holiday_taken == 100
    assert balance.public_holiday_hours == 16


def test_remaining_is_clamped_at_zero():
    balance = reconcile(50, [_leave("ANNUAL", 60)], 0)
    assert balance.remaining_holiday == 0


def test_other_leave_types_do_not_reduce_holiday_balance():
    records = [
        _leave("ANNUAL", 16),
        _leave("SICK", 24),
        _leave("UNPAID", 8),
        _leave("OTHER", 4),
    ]
    balance = reconcile(224, records, 64)
    assert balance.remaining_holiday == 144
    assert balance.sick_taken == 24
    assert balance.unpaid_taken == 8
    assert balance.other_taken == 4
    assert balance.total_taken == 52


def test_mixed_type_spellings_are_consolidated():
    balance = reconcile(100, [_leave("Holiday", 8), _leave("ANNUAL", 8), _leave("annual", 7.5)], 0)
    assert balance.holiday_taken == 23.5
    assert balance.remaining_holiday == 76.5


def test_unknown_type_falls_into_other():
    balance = reconcile(100, [_leave("Jury Service", 7.5)], 0)
    assert balance.other_taken == 7.5
    assert balance.remaining_holiday == 100


def test_loose_hour_values_are_coerced():
    records = [_leave("ANNUAL", "7.5"), _leave("ANNUAL", None), _leave("SICK", "n/a"), _leave("ANNUAL", -8)]
    balance = reconcile("224", records, "16")
    assert balance.holiday_taken == 7.5
    assert balance.sick_taken == 0
    assert balance.remaining_holiday == 200.5


def test_accepts_objects_with_leave_type_attribute():
    class Record:
        def __init__(self, leave_type, hours):
            self.leave_type = leave_type
            self.hours = hours

    balance = reconcile(40, [Record("ANNUAL", 8), Record("SICK", 8)], 0)
    assert balance.holiday_taken == 8
    assert balance.sick_taken == 8
    assert balance.remaining_holiday == 32


def test_no_records():
    balance = reconcile(224, [], 0)
    assert balance.total_taken == 0
    assert balance.taken_by_type == {t: 0.0 for t in LeaveType}
    assert balance.remaining_holiday == 224


def test_sums_are_exact_for_fractional_hours():
    balance = reconcile(10, [_leave("ANNUAL", 0.1)] * 3, 0)
    assert balance.holiday_taken == 0.3
    assert balance.remaining_holiday == 9.7


def test_more_allowance_never_lowers_remaining():
    records = [_leave("ANNUAL", 40)]
    previous = -1
    for allowed in [0, 20, 40, 60, 224]:
        remaining = reconcile(allowed, records, 8).remaining_holiday
        assert remaining >= previous
        previous = remaining


def test_more_holiday_taken_never_raises_remaining_or_goes_negative():
    previous = None
    for taken in [0, 50, 100, 200, 300]:
        remaining = reconcile(224, [_leave("ANNUAL", taken)], 16).remaining_holiday
        assert remaining >= 0
        if previous is not None:
            assert remaining <= previous
        previous = remaining


def test_to_dict():
    data = reconcile(224, [_leave("SICK", 8)], 16).to_dict()
    assert data["taken_by_type"] == {"ANNUAL": 0.0, "SICK": 8.0, "UNPAID": 0.0, "OTHER": 0.0}
    assert data["remaining_holiday"] == 208
    assert data["sick_taken"] == 8


def test_balance_is_immutable():
    balance = reconcile(10, [], 0)
    assert isinstance(balance, Balance)
    with pytest.raises(AttributeError):
        balance.remaining_holiday = 5


def test_very_large_allowance_is_reported_not_rejected():
    balance = reconcile(1e30, [], 0)
    assert balance.allowed_holiday == 1e30
    assert balance.remaining_holiday == 1e30
