from src.daycare_dashboard.daycare_dashboard.attendance.discrepancy import has_service_discrepancy
from src.daycare_dashboard.daycare_dashboard.attendance.model import AttendanceUser, AttendanceVisit
from src.daycare_dashboard.daycare_dashboard.attendance.summary import build_attendance_summary
from src.daycare_dashboard.daycare_dashboard.core.enums import AttendanceStatus, Severity
from src.daycare_dashboard.daycare_dashboard.core.settings import EngineSettings


def _user(code: str, standard_minutes=480) -> AttendanceUser:
    return AttendanceUser(user_code=code, full_name=f"User {code}", standard_minutes=standard_minutes)


def _visit(code: str, status=AttendanceStatus.CHECKED_IN, provided_minutes=480, is_early_leave=False) -> AttendanceVisit:
    return AttendanceVisit(user_code=code, status=status, provided_minutes=provided_minutes, is_early_leave=is_early_leave)


def test_counts_checked_out_over_registered_users():
    users = [_user("001"), _user("002"), _user("003")]
    visits = {
        "001": _visit("001", AttendanceStatus.CHECKED_OUT),
        "002": _visit("002", AttendanceStatus.CHECKED_OUT),
        "003": _visit("003", AttendanceStatus.CHECKED_IN),
    }

    result = build_attendance_summary(users, visits)

    assert result.module.name == "attendance"
    assert result.module.total == 3
    assert result.module.done == 2
    assert result.module.rate == 67
    assert result.alerts == ()


def test_no_users_means_zero_rate_and_no_alerts():
    result = build_attendance_summary([], {})

    assert (result.module.total, result.module.done, result.module.rate) == (0, 0, 0)
    assert result.alerts == ()


def test_single_discrepancy_is_a_warning():
    users = [_user("001", standard_minutes=480)]
    visits = {"001": _visit("001", AttendanceStatus.CHECKED_OUT, provided_minutes=300)}

    result = build_attendance_summary(users, visits)

    alert = next(a for a in result.alerts if a.id == "attendance-discrepancies")
    assert alert.severity == Severity.WARNING
    assert "1" in alert.title
    assert alert.href == "/daily/attendance"


def test_more_than_three_discrepancies_is_an_error():
    users = [_user(f"00{i}") for i in range(1, 6)]
    visits = {u.user_code: _visit(u.user_code, AttendanceStatus.CHECKED_OUT, provided_minutes=300) for u in users}

    result = build_attendance_summary(users, visits)

    alerts = [a for a in result.alerts if a.id == "attendance-discrepancies"]
    assert len(alerts) == 1
    assert alerts[0].severity == Severity.ERROR
    assert "5" in alerts[0].title


def test_exactly_three_discrepancies_stays_warning():
    users = [_user(f"00{i}") for i in range(1, 4)]
    visits = {u.user_code: _visit(u.user_code, provided_minutes=100) for u in users}

    result = build_attendance_summary(users, visits)

    assert result.alerts[0].severity == Severity.WARNING


def test_provided_time_at_or_above_threshold_is_not_flagged():
    users = [_user("001", standard_minutes=480)]
    visits = {"001": _visit("001", provided_minutes=400)}

    result = build_attendance_summary(users, visits)

    assert all(a.id != "attendance-discrepancies" for a in result.alerts)


def test_unknown_user_or_missing_minutes_is_not_flagged():
    users = [_user("001", standard_minutes=None)]
    visits = {
        "001": _visit("001", provided_minutes=10),
        "999": _visit("999", provided_minutes=10),
        "002": _visit("002", provided_minutes=None),
    }

    result = build_attendance_summary(users, visits)

    assert result.alerts == ()


def test_early_leave_is_one_info_alert_with_count():
    users = [_user("001"), _user("002")]
    visits = {
        "001": _visit("001", is_early_leave=True),
        "002": _visit("002", is_early_leave=True),
    }

    result = build_attendance_summary(users, visits)

    alert = next(a for a in result.alerts if a.id == "attendance-early-leave")
    assert alert.severity == Severity.INFO
    assert "2" in alert.title


def test_custom_ratio_is_honoured():
    users = [_user("001", standard_minutes=100)]
    visits = {"001": _visit("001", provided_minutes=85)}

    result = build_attendance_summary(users, visits, settings=EngineSettings(discrepancy_ratio=0.9))

    assert [a.id for a in result.alerts] == ["attendance-discrepancies"]


def test_discrepancy_boundaries():
    assert has_service_discrepancy(150, 240) is True
    assert has_service_discrepancy(200, 240) is False
    assert has_service_discrepancy(192, 240) is False
    assert has_service_discrepancy(0, 240) is False
    assert has_service_discrepancy(None, 240) is False
    assert has_service_discrepancy(100, 0) is False
    assert has_service_discrepancy(100, None) is False


def test_same_input_gives_same_summary():
    users = [_user("001")]
    visits = {"001": _visit("001", AttendanceStatus.CHECKED_OUT, provided_minutes=100, is_early_leave=True)}

    assert build_attendance_summary(users, visits) == build_attendance_summary(users, visits)


def test_more_checked_out_visits_than_registered_users():
    users = [_user("001")]
    visits = {
        "001": _visit("001", AttendanceStatus.CHECKED_OUT),
        "002": _visit("002", AttendanceStatus.CHECKED_OUT),
    }

    result = build_attendance_summary(users, visits)

    assert (result.module.total, result.module.done, result.module.rate) == (1, 2, 200)
