from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Union

from ..core.constants import NOTE_PREVIEW_LENGTH
from ..core.enums import ProvisionStatus


@dataclass(frozen=True)
class ServiceProvisionRecord:
    """Billing-side record of service actually provided to a user on a day."""

    record_id: int
    user_code: str
    record_date: date
    status: Union[ProvisionStatus, str]
    start_hhmm: Optional[int] = None
    end_hhmm: Optional[int] = None
    has_transport: bool = False
    has_meal: bool = False
    has_bath: bool = False
    has_extended: bool = False
    has_absent_support: bool = False
    note: Optional[str] = None


@dataclass(frozen=True)
class ProvisionAdditions:
    transport: bool = False
    meal: bool = False
    bath: bool = False
    extended: bool = False
    absent_support: bool = False


@dataclass(frozen=True)
class ServiceProvisionSummary:
    """The part of a provision record a daily snapshot needs."""

    has_record: bool
    status: Optional[Union[ProvisionStatus, str]] = None
    start_hhmm: Optional[int] = None
    end_hhmm: Optional[int] = None
    additions: Optional[ProvisionAdditions] = None
    note_preview: Optional[str] = None


EMPTY_PROVISION_SUMMARY = ServiceProvisionSummary(has_record=False)


def to_provision_summary(record: ServiceProvisionRecord) -> ServiceProvisionSummary:
    note = (record.note or "").strip()
    return ServiceProvisionSummary(
        has_record=True,
        status=record.status,
        start_hhmm=record.start_hhmm,
        end_hhmm=record.end_hhmm,
        additions=ProvisionAdditions(
            transport=record.has_transport,
            meal=record.has_meal,
            bath=record.has_bath,
            extended=record.has_extended,
            absent_support=record.has_absent_support,
        ),
        note_preview=note[:NOTE_PREVIEW_LENGTH] if note else None,
    )


def build_provision_summary_map(
    records: Iterable[ServiceProvisionRecord], record_date: date
) -> dict[str, ServiceProvisionSummary]:
    """user_code -> summary for records on ``record_date``. Later records win."""
    out: dict[str, ServiceProvisionSummary] = {}
    for r in records:
        if r.record_date != record_date:
            continue
        out[r.user_code] = to_provision_summary(r)
    return out
