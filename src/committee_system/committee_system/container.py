from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import make_clock
from .common.locks import KeyedLock
from .core.constants import (
    DEFAULT_CONVENER_BONUS,
    DEFAULT_MIN_CONTACT_LENGTH,
    DEFAULT_RATE_PER_MEETING,
    DEFAULT_SUBCOMMITTEE_ORDER,
)
from .core.enums import ConvenerConflictPolicy
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .meetings.mysql_meeting_repository import MySQLMeetingRepository
from .meetings.repository import MeetingRepository
from .meetings.service import MeetingService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .payments.calculator.standard_calculator import StandardPaymentCalculator
from .payments.service import PaymentReportService
from .subcommittees.factory import ConvenerRuleFactory
from .subcommittees.mysql_subcommittee_repository import MySQLSubcommitteeRepository
from .subcommittees.ordering import SubcommitteeOrder
from .subcommittees.repository import SubcommitteeRepository
from .subcommittees.service import SubcommitteeService


@dataclass(frozen=True)
class EngineSettings:
    """Business knobs read from the settings module."""

    rate_per_meeting: Any = DEFAULT_RATE_PER_MEETING
    convener_bonus: Any = DEFAULT_CONVENER_BONUS
    min_contact_length: int = DEFAULT_MIN_CONTACT_LENGTH
    subcommittee_order: Sequence[str] = field(default_factory=lambda: DEFAULT_SUBCOMMITTEE_ORDER)
    convener_policy: ConvenerConflictPolicy = ConvenerConflictPolicy.DEMOTE
    timezone: str = ""

    @classmethod
    def from_settings(cls, settings) -> "EngineSettings":
        return cls(
            rate_per_meeting=getattr(settings, "RATE_PER_MEETING", DEFAULT_RATE_PER_MEETING),
            convener_bonus=getattr(settings, "CONVENER_BONUS", DEFAULT_CONVENER_BONUS),
            min_contact_length=int(getattr(settings, "MIN_CONTACT_LENGTH", DEFAULT_MIN_CONTACT_LENGTH)),
            subcommittee_order=tuple(getattr(settings, "SUBCOMMITTEE_ORDER", DEFAULT_SUBCOMMITTEE_ORDER)),
            convener_policy=ConvenerConflictPolicy(getattr(settings, "CONVENER_CONFLICT_POLICY", "demote")),
            timezone=str(getattr(settings, "TIMEZONE", "") or ""),
        )


@dataclass(frozen=True)
class Container:
    members_repo: MemberRepository
    subcommittees_repo: SubcommitteeRepository
    attendance_repo: AttendanceRepository
    meetings_repo: MeetingRepository

    member_service: MemberService
    subcommittee_service: SubcommitteeService
    attendance_service: AttendanceService
    payment_report_service: PaymentReportService
    meeting_service: MeetingService
    dashboard_service: DashboardService

    settings: EngineSettings


def wire_container(
    *,
    members_repo: MemberRepository,
    subcommittees_repo: SubcommitteeRepository,
    attendance_repo: AttendanceRepository,
    meetings_repo: MeetingRepository,
    settings: EngineSettings | None = None,
) -> Container:
    settings = settings or EngineSettings()
    locks = KeyedLock()
    order = SubcommitteeOrder(settings.subcommittee_order)

    member_service = MemberService(members_repo, min_contact_length=settings.min_contact_length, locks=locks)
    subcommittee_service = SubcommitteeService(
        subcommittees_repo,
        members_repo,
        rule_factory=ConvenerRuleFactory(),
        policy=settings.convener_policy,
        order=order,
        locks=locks,
    )
    attendance_service = AttendanceService(
        attendance_repo,
        members_repo,
        subcommittees_repo,
        clock=make_clock(settings.timezone),
        locks=locks,
    )
    payment_report_service = PaymentReportService(
        attendance_repo,
        subcommittees_repo,
        members_repo,
        calculator=StandardPaymentCalculator(
            rate_per_meeting=settings.rate_per_meeting,
            convener_bonus=settings.convener_bonus,
        ),
        order=order,
    )

    return Container(
        members_repo=members_repo,
        subcommittees_repo=subcommittees_repo,
        attendance_repo=attendance_repo,
        meetings_repo=meetings_repo,
        member_service=member_service,
        subcommittee_service=subcommittee_service,
        attendance_service=attendance_service,
        payment_report_service=payment_report_service,
        meeting_service=MeetingService(meetings_repo),
        dashboard_service=DashboardService(members_repo, subcommittees_repo, attendance_repo),
        settings=settings,
    )


def build_container(*, db_config: dict, settings: EngineSettings | None = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        members_repo=MySQLMemberRepository(conn),
        subcommittees_repo=MySQLSubcommitteeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        meetings_repo=MySQLMeetingRepository(conn),
        settings=settings,
    )
