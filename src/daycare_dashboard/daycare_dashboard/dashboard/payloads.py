"""JSON <-> domain mapping for the dashboard HTTP endpoints.

Wire keys are camelCase to match the dashboard client. Shape problems raise
``ValidationError``; the engine itself never sees malformed input.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional

from ..activity.model import PersonDaily, ProblemBehavior, SeizureRecord
from ..attendance.model import AttendanceUser, AttendanceVisit
from ..common.datetime_utils import coerce_date
from ..common.validators import (
    optional_bool,
    optional_float,
    optional_int,
    require_list,
    require_mapping,
    require_non_empty,
)
from ..core.enums import ActivityStatus, AttendanceStatus, IrcStatus, ProvisionStatus
from ..core.exceptions import ValidationError
from ..cross_module.model import ActivityFacts, AttendanceFacts, DailyUserSnapshotInput, IrcFacts
from ..irc.model import ResourceEvent, ResourceWarning
from ..provision.model import ProvisionAdditions, ServiceProvisionSummary
from .model import ActivitySummaryInput, AttendanceSummaryInput, IrcSummaryInput


def _enum(enum_cls: type[Enum], value: Any, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def _date(value: Any, field_name: str) -> date:
    parsed = coerce_date(value)
    if parsed is None:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
    return parsed


def _optional_date(value: Any, field_name: str) -> Optional[date]:
    if value is None:
        return None
    return _date(value, field_name)


# --- attendance -------------------------------------------------------------

def parse_attendance(body: Any) -> AttendanceSummaryInput:
    body = require_mapping(body, "attendance")
    users = []
    for i, raw in enumerate(require_list(body.get("users", []), "attendance.users")):
        raw = require_mapping(raw, f"attendance.users[{i}]")
        users.append(
            AttendanceUser(
                user_code=require_non_empty(raw.get("userCode"), f"attendance.users[{i}].userCode"),
                full_name=str(raw.get("fullName") or ""),
                standard_minutes=optional_int(raw.get("standardMinutes"), f"attendance.users[{i}].standardMinutes"),
            )
        )

    visits = {}
    for code, raw in require_mapping(body.get("visits", {}), "attendance.visits").items():
        raw = require_mapping(raw, f"attendance.visits.{code}")
        visits[code] = AttendanceVisit(
            user_code=str(raw.get("userCode") or code),
            status=_enum(AttendanceStatus, raw.get("status", "unconfirmed"), f"attendance.visits.{code}.status"),
            provided_minutes=optional_int(raw.get("providedMinutes"), f"attendance.visits.{code}.providedMinutes"),
            is_early_leave=bool(optional_bool(raw.get("isEarlyLeave"), f"attendance.visits.{code}.isEarlyLeave")),
        )
    return AttendanceSummaryInput(users=tuple(users), visits=visits)


# --- activity ---------------------------------------------------------------

def _parse_person_daily(raw: Any, where: str) -> PersonDaily:
    raw = require_mapping(raw, where)
    behavior = raw.get("problemBehavior")
    seizure = raw.get("seizureRecord")
    return PersonDaily(
        record_id=optional_int(raw.get("id"), f"{where}.id") or 0,
        person_id=require_non_empty(raw.get("personId"), f"{where}.personId"),
        person_name=str(raw.get("personName") or ""),
        date=_date(raw.get("date"), f"{where}.date"),
        status=_enum(ActivityStatus, raw.get("status", "not-created"), f"{where}.status"),
        meal_amount=raw.get("mealAmount"),
        problem_behavior=ProblemBehavior(
            self_harm=bool(behavior.get("selfHarm")),
            violence=bool(behavior.get("violence")),
            loud_voice=bool(behavior.get("loudVoice")),
            pica=bool(behavior.get("pica")),
            other=bool(behavior.get("other")),
            other_detail=str(behavior.get("otherDetail") or ""),
        )
        if isinstance(behavior, dict)
        else None,
        seizure_record=SeizureRecord(occurred=bool(seizure.get("occurred"))) if isinstance(seizure, dict) else None,
    )


def parse_activity(body: Any) -> ActivitySummaryInput:
    body = require_mapping(body, "activity")
    records = tuple(
        _parse_person_daily(raw, f"activity.records[{i}]")
        for i, raw in enumerate(require_list(body.get("records", []), "activity.records"))
    )
    return ActivitySummaryInput(
        records=records,
        expected_count=optional_int(body.get("expectedCount"), "activity.expectedCount") or 0,
        today=_optional_date(body.get("today"), "activity.today"),
    )


# --- irc --------------------------------------------------------------------

def parse_irc(body: Any) -> IrcSummaryInput:
    body = require_mapping(body, "irc")
    events = []
    for i, raw in enumerate(require_list(body.get("events", []), "irc.events")):
        raw = require_mapping(raw, f"irc.events[{i}]")
        props = raw.get("extendedProps")
        events.append(
            ResourceEvent(
                id=require_non_empty(raw.get("id"), f"irc.events[{i}].id"),
                title=str(raw.get("title") or ""),
                extended_props=dict(props) if isinstance(props, dict) else None,
            )
        )

    warnings = {}
    for resource_id, raw in require_mapping(body.get("resourceWarnings", {}), "irc.resourceWarnings").items():
        raw = require_mapping(raw, f"irc.resourceWarnings.{resource_id}")
        hours = optional_float(raw.get("totalHours"), f"irc.resourceWarnings.{resource_id}.totalHours") or 0.0
        is_over = optional_bool(raw.get("isOver"), f"irc.resourceWarnings.{resource_id}.isOver")
        warnings[resource_id] = ResourceWarning(total_hours=hours, is_over=bool(is_over))
    return IrcSummaryInput(events=tuple(events), resource_warnings=warnings)


# --- snapshots --------------------------------------------------------------

def _parse_provision(raw: Any, where: str) -> ServiceProvisionSummary:
    raw = require_mapping(raw, where)
    additions = raw.get("additions")
    status = raw.get("status")
    return ServiceProvisionSummary(
        has_record=bool(optional_bool(raw.get("hasRecord"), f"{where}.hasRecord")),
        status=_enum(ProvisionStatus, status, f"{where}.status") if status is not None else None,
        start_hhmm=optional_int(raw.get("startHHMM"), f"{where}.startHHMM"),
        end_hhmm=optional_int(raw.get("endHHMM"), f"{where}.endHHMM"),
        additions=ProvisionAdditions(
            transport=bool(additions.get("transport")),
            meal=bool(additions.get("meal")),
            bath=bool(additions.get("bath")),
            extended=bool(additions.get("extended")),
            absent_support=bool(additions.get("absentSupport")),
        )
        if isinstance(additions, dict)
        else None,
        note_preview=raw.get("notePreview"),
    )


def parse_snapshot_input(raw: Any, where: str = "snapshot") -> DailyUserSnapshotInput:
    raw = require_mapping(raw, where)

    attendance = None
    if raw.get("attendanceData") is not None:
        a = require_mapping(raw["attendanceData"], f"{where}.attendanceData")
        attendance = AttendanceFacts(
            status=_enum(AttendanceStatus, a.get("status"), f"{where}.attendanceData.status"),
            provided_minutes=optional_int(a.get("providedMinutes"), f"{where}.attendanceData.providedMinutes"),
            standard_minutes=optional_int(a.get("standardMinutes"), f"{where}.attendanceData.standardMinutes"),
            is_early_leave=optional_bool(a.get("isEarlyLeave"), f"{where}.attendanceData.isEarlyLeave"),
        )

    activity = None
    if raw.get("activityData") is not None:
        a = require_mapping(raw["activityData"], f"{where}.activityData")
        activity = ActivityFacts(
            status=_enum(ActivityStatus, a.get("status"), f"{where}.activityData.status"),
            has_problem_behavior=optional_bool(a.get("hasProblemBehavior"), f"{where}.activityData.hasProblemBehavior"),
            has_seizure_record=optional_bool(a.get("hasSeizureRecord"), f"{where}.activityData.hasSeizureRecord"),
            meal_amount=a.get("mealAmount"),
        )

    irc = None
    if raw.get("ircData") is not None:
        a = require_mapping(raw["ircData"], f"{where}.ircData")
        irc = IrcFacts(
            status=_enum(IrcStatus, a.get("status"), f"{where}.ircData.status"),
            has_individual_support=optional_bool(a.get("hasIndividualSupport"), f"{where}.ircData.hasIndividualSupport"),
            has_rehabilitation=optional_bool(a.get("hasRehabilitation"), f"{where}.ircData.hasRehabilitation"),
        )

    provision = None
    if raw.get("serviceProvisionData") is not None:
        provision = _parse_provision(raw["serviceProvisionData"], f"{where}.serviceProvisionData")

    return DailyUserSnapshotInput(
        user_id=require_non_empty(raw.get("userId"), f"{where}.userId"),
        user_name=str(raw.get("userName") or ""),
        date=_date(raw.get("date"), f"{where}.date"),
        attendance_data=attendance,
        activity_data=activity,
        irc_data=irc,
        service_provision_data=provision,
    )


def parse_snapshot_inputs(value: Any, field_name: str) -> list[DailyUserSnapshotInput]:
    return [
        parse_snapshot_input(raw, f"{field_name}[{i}]")
        for i, raw in enumerate(require_list(value, field_name))
    ]


# --- encoding ---------------------------------------------------------------

def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


_KEY_OVERRIDES = {"start_hhmm": "startHHMM", "end_hhmm": "endHHMM"}


def to_wire(value: Any) -> Any:
    """Dataclasses -> camelCase dicts, enums -> values, dates -> ISO strings."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        return {
            _KEY_OVERRIDES.get(f.name, _camel(f.name)): to_wire(getattr(value, f.name))
            for f in fields(value)
        }
    if isinstance(value, dict):
        return {str(k): to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value
