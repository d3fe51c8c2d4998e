from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import Clock, now_local
from ..common.locks import KeyedLock
from ..common.logging import get_logger
from ..common.validators import require_bool
from ..core.enums import ContextKind
from ..core.exceptions import DuplicateAttendanceError, NotFoundError, ValidationError
from ..members.repository import MemberRepository
from ..subcommittees.repository import SubcommitteeRepository
from .model import AttendanceRecord, MeetingContext
from .population import holds_convener_status, is_in_population
from .repository import AttendanceRepository

logger = get_logger("attendance")


class AttendanceService:
    """Use case: the three attendance ledgers (subcommittee, general, execo).

    Day boundaries come from one clock so every caller agrees on "today".
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        subcommittees: SubcommitteeRepository,
        *,
        clock: Optional[Clock] = None,
        locks: Optional[KeyedLock] = None,
    ):
        self._attendance = attendance
        self._members = members
        self._subcommittees = subcommittees
        self._clock = clock or now_local
        self._locks = locks or KeyedLock()

    def _check_context(self, context: MeetingContext) -> None:
        if context.kind == ContextKind.SUBCOMMITTEE and not self._subcommittees.get_by_id(context.subcommittee_id):
            raise NotFoundError("Subcommittee not found")

    def mark(
        self,
        context: MeetingContext,
        member_id: int,
        *,
        is_convener_mark: bool = False,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        is_convener_mark = require_bool(is_convener_mark, "Convener mark")
        now = now or self._clock()
        today = now.date()

        self._check_context(context)
        member = self._members.get_by_id(int(member_id))
        if not member:
            raise NotFoundError("Member not found")

        if not is_in_population(self._subcommittees, member_id=member.member_id, context=context):
            raise ValidationError(f"Member is not part of the {context.key} meeting")
        if is_convener_mark and not holds_convener_status(
            self._subcommittees, member_id=member.member_id, context=context
        ):
            raise ValidationError("Only the convener can be marked as convener")

        with self._locks.hold(("attendance", member.member_id, context.key, today)):
            existing = self._attendance.get_for_member_and_date(
                member_id=member.member_id, context=context, attended_on=today
            )
            if existing:
                logger.warning("duplicate attendance member id=%s context=%s day=%s", member.member_id, context.key, today)
                raise DuplicateAttendanceError("Attendance already marked for today")

            attendance_id = self._attendance.create_record(
                member_id=member.member_id,
                context=context,
                attended_on=today,
                marked_at=now,
                is_convener_mark=is_convener_mark,
            )

        logger.info("attendance marked member id=%s context=%s day=%s", member.member_id, context.key, today)
        return AttendanceRecord(
            attendance_id=attendance_id,
            member_id=member.member_id,
            context=context,
            attended_on=today,
            marked_at=now,
            is_convener_mark=is_convener_mark,
        )

    def is_marked_today(self, context: MeetingContext, member_id: int, *, now: Optional[datetime] = None) -> bool:
        today = (now or self._clock()).date()
        return (
            self._attendance.get_for_member_and_date(member_id=int(member_id), context=context, attended_on=today)
            is not None
        )

    def meetings_attended(self, member_id: int, context: MeetingContext) -> int:
        return self._attendance.count_for_member(member_id=int(member_id), context=context)

    def delete_all(self, context: MeetingContext) -> int:
        """Clear one ledger in a single statement. Callers confirm before calling."""
        self._check_context(context)
        count = self._attendance.delete_all(context=context)
        logger.warning("cleared %s attendance records for %s", count, context.key)
        return count
