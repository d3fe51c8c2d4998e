from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Meeting
from .repository import MeetingRepository

_COLUMNS = "meeting_id, title, meeting_date, minutes, created_by"

_UPDATABLE = {"title", "meeting_date", "minutes"}


def _row_to_meeting(r: dict) -> Meeting:
    return Meeting(
        meeting_id=int(r["meeting_id"]),
        title=r["title"],
        meeting_date=r["meeting_date"],
        minutes=r.get("minutes"),
        created_by=r.get("created_by"),
    )


class MySQLMeetingRepository(MeetingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, meeting_id: int) -> Optional[Meeting]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM meetings WHERE meeting_id=%s", (int(meeting_id),))
            r = fetchone(cur)
            return _row_to_meeting(r) if r else None

    def create_meeting(
        self, *, title: str, meeting_date: date, minutes: Optional[str], created_by: Optional[str]
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO meetings(title, meeting_date, minutes, created_by) VALUES(%s,%s,%s,%s)",
                (title, meeting_date, minutes, created_by),
            )
            return int(cur.lastrowid)

    def update_meeting(self, *, meeting_id: int, fields: Mapping[str, object]) -> bool:
        unknown = set(fields) - _UPDATABLE
        if unknown:
            raise ValueError(f"Unsupported meeting columns: {sorted(unknown)}")

        assignments = [f"{column}=%s" for column in fields]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT meeting_id FROM meetings WHERE meeting_id=%s FOR UPDATE", (int(meeting_id),))
            if not fetchone(cur):
                return False
            if assignments:
                cur.execute(
                    f"UPDATE meetings SET {', '.join(assignments)} WHERE meeting_id=%s",
                    tuple(fields.values()) + (int(meeting_id),),
                )
            return True

    def delete_meeting(self, meeting_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM meetings WHERE meeting_id=%s", (int(meeting_id),))
            return cur.rowcount > 0

    def list_recent(self, *, limit: int) -> Sequence[Meeting]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM meetings ORDER BY meeting_date DESC, meeting_id DESC LIMIT %s",
                (int(limit),),
            )
            return [_row_to_meeting(r) for r in fetchall(cur)]
