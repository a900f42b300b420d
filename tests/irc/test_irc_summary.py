from src.daycare_dashboard.daycare_dashboard.core.enums import Severity
from src.daycare_dashboard.daycare_dashboard.core.settings import EngineSettings
from src.daycare_dashboard.daycare_dashboard.irc.model import ResourceEvent, ResourceWarning
from src.daycare_dashboard.daycare_dashboard.irc.summary import build_irc_summary


def _event(i: int, status=None) -> ResourceEvent:
    props = {"status": status, "resourceId": "resource-1"} if status is not None else {"resourceId": "resource-1"}
    return ResourceEvent(id=f"event-{i}", title="Event", extended_props=props)


def _warning(hours: float) -> ResourceWarning:
    return ResourceWarning(total_hours=hours, is_over=hours > 8)


def test_basic_completion_rate():
    events = [_event(1, "completed"), _event(2, "pending"), _event(3, "completed")]

    result = build_irc_summary(events, {})

    assert result.module.name == "irc"
    assert (result.module.total, result.module.done, result.module.rate) == (3, 2, 67)
    assert result.alerts == ()


def test_no_events_no_low_completion_alert():
    result = build_irc_summary([], {})

    assert (result.module.total, result.module.done, result.module.rate) == (0, 0, 0)
    assert result.alerts == ()


def test_events_without_status_count_as_not_completed():
    events = [
        ResourceEvent(id="event-1", title="No props"),
        _event(2),
        _event(3, "completed"),
        _event(4, "completed"),
    ]

    result = build_irc_summary(events, {})

    assert (result.module.total, result.module.done, result.module.rate) == (4, 2, 50)


def test_one_or_two_resources_over_is_warning():
    warnings = {"resource-1": _warning(8.5), "resource-2": _warning(9.2), "resource-3": _warning(7.5)}

    result = build_irc_summary([_event(1, "completed")], warnings)

    alert = next(a for a in result.alerts if a.id == "irc-over-capacity")
    assert alert.severity == Severity.WARNING
    assert alert.href == "/admin/integrated-resource-calendar"
    assert "resource-1(8.5h)" in alert.message
    assert "resource-2(9.2h)" in alert.message
    assert "resource-3" not in alert.message


def test_four_resources_over_is_error_naming_first_three():
    warnings = {
        "resource-1": _warning(8.5),
        "resource-2": _warning(9.2),
        "resource-3": _warning(10.1),
        "resource-4": _warning(8.8),
    }

    result = build_irc_summary([_event(1, "completed")], warnings)

    over = [a for a in result.alerts if a.id == "irc-over-capacity"]
    assert len(over) == 1
    assert over[0].severity == Severity.ERROR
    assert "4" in over[0].title
    assert "resource-3(10.1h)" in over[0].message
    assert "resource-4" not in over[0].message


def test_exactly_eight_hours_is_not_over():
    warnings = {"resource-1": ResourceWarning(total_hours=8.0, is_over=True)}

    result = build_irc_summary([_event(1, "completed")], warnings)

    assert result.alerts == ()


def test_low_completion_warning():
    events = [_event(1, "completed"), _event(2, "pending"), _event(3, "pending"), _event(4, "pending")]

    result = build_irc_summary(events, {})

    assert len(result.alerts) == 1
    alert = result.alerts[0]
    assert alert.id == "irc-low-completion"
    assert alert.severity == Severity.WARNING
    assert alert.title == "Event completion 25%"


def test_overload_and_low_completion_together():
    events = [_event(1, "completed"), _event(2, "pending"), _event(3, "pending")]

    result = build_irc_summary(events, {"resource-1": _warning(9.5)})

    assert [a.id for a in result.alerts] == ["irc-over-capacity", "irc-low-completion"]
    assert result.alerts[1].title == "Event completion 33%"


def test_over_capacity_hours_is_configurable():
    warnings = {"resource-1": ResourceWarning(total_hours=7.0, is_over=True)}

    result = build_irc_summary([_event(1, "completed")], warnings, settings=EngineSettings(irc_over_capacity_hours=6))

    assert [a.id for a in result.alerts] == ["irc-over-capacity"]
    assert "resource-1(7h)" in result.alerts[0].message
