from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Optional

from mysql.connector.errors import IntegrityError

from ..core.enums import ContextKind
from ..core.exceptions import DuplicateAttendanceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_integrity_error
from .model import AttendanceRecord, MeetingContext
from .repository import AttendanceRepository

_INDEX_ERRORS = {
    "uq_attendance_member_context_day": (DuplicateAttendanceError, "Attendance already marked for today"),
}


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_member_and_date(
        self, *, member_id: int, context: MeetingContext, attended_on: date
    ) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, member_id, context_key, attended_on, marked_at, is_convener_mark
                FROM attendance_records
                WHERE member_id=%s AND context_key=%s AND attended_on=%s
                """,
                (int(member_id), context.key, attended_on),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                attendance_id=int(r["attendance_id"]),
                member_id=int(r["member_id"]),
                context=MeetingContext.parse(r["context_key"]),
                attended_on=r["attended_on"],
                marked_at=r["marked_at"],
                is_convener_mark=bool(r["is_convener_mark"]),
            )

    def create_record(
        self,
        *,
        member_id: int,
        context: MeetingContext,
        attended_on: date,
        marked_at: datetime,
        is_convener_mark: bool = False,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(
                        member_id, context_key, context_kind, subcommittee_id, attended_on, marked_at, is_convener_mark
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        int(member_id),
                        context.key,
                        context.kind.value,
                        context.subcommittee_id,
                        attended_on,
                        marked_at,
                        int(bool(is_convener_mark)),
                    ),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            raise translate_integrity_error(e, _INDEX_ERRORS) from e

    def delete_all(self, *, context: MeetingContext) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE context_key=%s", (context.key,))
            return int(cur.rowcount)

    def count_for_member(self, *, member_id: int, context: MeetingContext) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS total FROM attendance_records WHERE member_id=%s AND context_key=%s",
                (int(member_id), context.key),
            )
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def counts_by_member(self, *, context: MeetingContext) -> Mapping[int, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT member_id, COUNT(*) AS total
                FROM attendance_records
                WHERE context_key=%s
                GROUP BY member_id
                """,
                (context.key,),
            )
            return {int(r["member_id"]): int(r["total"]) for r in fetchall(cur)}

    def count_by_kind(self) -> Mapping[ContextKind, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT context_kind, COUNT(*) AS total FROM attendance_records GROUP BY context_kind")
            counts = {k: 0 for k in ContextKind}
            for r in fetchall(cur):
                counts[ContextKind(r["context_kind"])] = int(r["total"])
            return counts
