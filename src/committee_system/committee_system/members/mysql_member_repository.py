from __future__ import annotations

from typing import Mapping, Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import Gender, MemberType
from ..core.exceptions import DuplicateError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_integrity_error
from .model import Member
from .repository import MemberRepository

_COLUMNS = "member_id, member_type, name, electoral_area, contact, gender, is_convener"

_UPDATABLE = {"name", "electoral_area", "contact", "gender", "is_convener"}

_INDEX_ERRORS = {
    "uq_members_contact": (DuplicateError, "A member with this contact already exists"),
}


def _escape_like(value: str) -> str:
    """Make `%`, `_` and `\\` match literally in a LIKE pattern."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _row_to_member(r: dict) -> Member:
    return Member(
        member_id=int(r["member_id"]),
        member_type=MemberType(r["member_type"]),
        name=r["name"],
        electoral_area=r["electoral_area"],
        contact=r["contact"],
        gender=Gender(r["gender"]),
        is_convener=bool(r.get("is_convener", False)),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE member_id=%s", (int(member_id),))
            row = fetchone(cur)
            return _row_to_member(row) if row else None

    def get_by_contact(self, contact: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE contact=%s", (contact,))
            row = fetchone(cur)
            return _row_to_member(row) if row else None

    def create_member(
        self,
        *,
        member_type: MemberType,
        name: str,
        electoral_area: str,
        contact: str,
        gender: Gender,
        is_convener: bool,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO members(member_type, name, electoral_area, contact, gender, is_convener)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (member_type.value, name, electoral_area, contact, gender.value, int(bool(is_convener))),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            raise translate_integrity_error(e, _INDEX_ERRORS) from e

    def update_member(self, *, member_id: int, member_type: MemberType, fields: Mapping[str, object]) -> bool:
        unknown = set(fields) - _UPDATABLE
        if unknown:
            raise ValueError(f"Unsupported member columns: {sorted(unknown)}")

        assignments: list[str] = []
        params: list[object] = []
        for column, value in fields.items():
            if isinstance(value, (Gender, MemberType)):
                value = value.value
            elif isinstance(value, bool):
                value = int(value)
            assignments.append(f"{column}=%s")
            params.append(value)

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "SELECT member_id FROM members WHERE member_id=%s AND member_type=%s FOR UPDATE",
                    (int(member_id), member_type.value),
                )
                if not fetchone(cur):
                    return False
                if assignments:
                    cur.execute(
                        f"UPDATE members SET {', '.join(assignments)} WHERE member_id=%s AND member_type=%s",
                        tuple(params) + (int(member_id), member_type.value),
                    )
                return True
        except IntegrityError as e:
            raise translate_integrity_error(e, _INDEX_ERRORS) from e

    def delete_member(self, *, member_id: int, member_type: MemberType) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT member_id FROM members WHERE member_id=%s AND member_type=%s FOR UPDATE",
                (int(member_id), member_type.value),
            )
            if not fetchone(cur):
                return False
            cur.execute("DELETE FROM attendance_records WHERE member_id=%s", (int(member_id),))
            cur.execute("DELETE FROM memberships WHERE member_id=%s", (int(member_id),))
            cur.execute("DELETE FROM members WHERE member_id=%s", (int(member_id),))
            return cur.rowcount > 0

    def search(self, query: str, *, limit: int) -> Sequence[Member]:
        pattern = f"%{_escape_like(query)}%"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM members
                WHERE contact LIKE %s OR LOWER(name) LIKE LOWER(%s)
                ORDER BY name ASC, member_id ASC
                LIMIT %s
                """,
                (pattern, pattern, int(limit)),
            )
            return [_row_to_member(r) for r in fetchall(cur)]

    def list_members(self, *, member_type: Optional[MemberType] = None) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            if member_type is None:
                cur.execute(f"SELECT {_COLUMNS} FROM members ORDER BY name ASC, member_id ASC")
            else:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM members WHERE member_type=%s ORDER BY name ASC, member_id ASC",
                    (member_type.value,),
                )
            return [_row_to_member(r) for r in fetchall(cur)]

    def count_by_type(self) -> Mapping[MemberType, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT member_type, COUNT(*) AS total FROM members GROUP BY member_type")
            counts = {t: 0 for t in MemberType}
            for r in fetchall(cur):
                counts[MemberType(r["member_type"])] = int(r["total"])
            return counts
