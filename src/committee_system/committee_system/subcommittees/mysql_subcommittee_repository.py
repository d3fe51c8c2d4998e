from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import MemberType, SubcommitteeName
from ..core.exceptions import CapacityError, ConflictError, DuplicateError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_integrity_error
from .model import Membership, MembershipRow, Subcommittee
from .repository import SubcommitteeRepository

_MEMBERSHIP_COLUMNS = "membership_id, subcommittee_id, member_id, member_type, is_convener, slot"

_INDEX_ERRORS = {
    "uq_membership_member_subcommittee": (DuplicateError, "Member already belongs to this subcommittee"),
    "uq_membership_slot": (CapacityError, "Member can only be part of 2 subcommittees"),
    "uq_convener_per_subcommittee": (ConflictError, "Subcommittee already has a convener"),
    "uq_convener_per_member": (ConflictError, "Member is already convener of another subcommittee"),
}


def _row_to_membership(r: dict) -> Membership:
    return Membership(
        membership_id=int(r["membership_id"]),
        subcommittee_id=int(r["subcommittee_id"]),
        member_id=int(r["member_id"]),
        member_type=MemberType(r["member_type"]),
        is_convener=bool(r["is_convener"]),
        slot=int(r["slot"]),
    )


def _row_to_view(r: dict) -> MembershipRow:
    return MembershipRow(
        subcommittee_id=int(r["subcommittee_id"]),
        subcommittee_name=SubcommitteeName(r["subcommittee_name"]),
        member_id=int(r["member_id"]),
        member_type=MemberType(r["member_type"]),
        name=r["name"],
        contact=r["contact"],
        is_convener=bool(r["is_convener"]),
    )


_ROWS_SQL = """
    SELECT ms.subcommittee_id, sc.name AS subcommittee_name,
           ms.member_id, ms.member_type, ms.is_convener,
           m.name, m.contact
    FROM memberships ms
    JOIN subcommittees sc ON sc.subcommittee_id = ms.subcommittee_id
    JOIN members m ON m.member_id = ms.member_id
"""


class MySQLSubcommitteeRepository(SubcommitteeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_subcommittees(self) -> Sequence[Subcommittee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT subcommittee_id, name FROM subcommittees ORDER BY subcommittee_id ASC")
            return [
                Subcommittee(subcommittee_id=int(r["subcommittee_id"]), name=SubcommitteeName(r["name"]))
                for r in fetchall(cur)
            ]

    def get_by_name(self, name: SubcommitteeName) -> Optional[Subcommittee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT subcommittee_id, name FROM subcommittees WHERE name=%s", (SubcommitteeName(name).value,))
            r = fetchone(cur)
            if not r:
                return None
            return Subcommittee(subcommittee_id=int(r["subcommittee_id"]), name=SubcommitteeName(r["name"]))

    def get_by_id(self, subcommittee_id: int) -> Optional[Subcommittee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT subcommittee_id, name FROM subcommittees WHERE subcommittee_id=%s", (int(subcommittee_id),))
            r = fetchone(cur)
            if not r:
                return None
            return Subcommittee(subcommittee_id=int(r["subcommittee_id"]), name=SubcommitteeName(r["name"]))

    def list_for_member(self, member_id: int) -> Sequence[Membership]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_MEMBERSHIP_COLUMNS} FROM memberships WHERE member_id=%s ORDER BY slot ASC",
                (int(member_id),),
            )
            return [_row_to_membership(r) for r in fetchall(cur)]

    def get_membership(self, *, subcommittee_id: int, member_id: int) -> Optional[Membership]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_MEMBERSHIP_COLUMNS} FROM memberships WHERE subcommittee_id=%s AND member_id=%s",
                (int(subcommittee_id), int(member_id)),
            )
            r = fetchone(cur)
            return _row_to_membership(r) if r else None

    def get_convener(self, subcommittee_id: int) -> Optional[Membership]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_MEMBERSHIP_COLUMNS} FROM memberships WHERE subcommittee_id=%s AND is_convener=1",
                (int(subcommittee_id),),
            )
            r = fetchone(cur)
            return _row_to_membership(r) if r else None

    def create_membership(
        self,
        *,
        subcommittee_id: int,
        member_id: int,
        member_type: MemberType,
        is_convener: bool,
        slot: int,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO memberships(subcommittee_id, member_id, member_type, is_convener, slot)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (int(subcommittee_id), int(member_id), member_type.value, int(bool(is_convener)), int(slot)),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            raise translate_integrity_error(e, _INDEX_ERRORS) from e

    def delete_membership(self, *, subcommittee_id: int, member_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM memberships WHERE subcommittee_id=%s AND member_id=%s",
                (int(subcommittee_id), int(member_id)),
            )
            return cur.rowcount > 0

    def list_rows(self, *, subcommittee_id: Optional[int] = None) -> Sequence[MembershipRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            if subcommittee_id is None:
                cur.execute(_ROWS_SQL + " ORDER BY sc.name ASC, m.name ASC")
            else:
                cur.execute(
                    _ROWS_SQL + " WHERE ms.subcommittee_id=%s ORDER BY m.name ASC",
                    (int(subcommittee_id),),
                )
            return [_row_to_view(r) for r in fetchall(cur)]

    def list_conveners(self) -> Sequence[MembershipRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_ROWS_SQL + " WHERE ms.is_convener=1 ORDER BY m.name ASC")
            return [_row_to_view(r) for r in fetchall(cur)]
