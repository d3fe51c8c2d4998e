from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Mapping, Optional

import pytest

from committee_system.attendance.model import AttendanceRecord, MeetingContext
from committee_system.container import EngineSettings, wire_container
from committee_system.core.enums import Gender, MemberType, SubcommitteeName
from committee_system.core.exceptions import CapacityError, ConflictError, DuplicateAttendanceError, DuplicateError
from committee_system.meetings.model import Meeting
from committee_system.members.model import Member
from committee_system.subcommittees.model import Membership, MembershipRow, Subcommittee


@dataclass
class Store:
    """Shared tables for the in-memory repositories."""

    members: dict[int, Member] = field(default_factory=dict)
    subcommittees: dict[int, Subcommittee] = field(default_factory=dict)
    memberships: list[Membership] = field(default_factory=list)
    records: list[AttendanceRecord] = field(default_factory=list)
    meetings: dict[int, Meeting] = field(default_factory=dict)
    next_id: int = 0

    def new_id(self) -> int:
        self.next_id += 1
        return self.next_id


class InMemoryMembers:
    def __init__(self, store: Store):
        self._s = store

    def get_by_id(self, member_id: int) -> Optional[Member]:
        return self._s.members.get(member_id)

    def get_by_contact(self, contact: str) -> Optional[Member]:
        return next((m for m in self._s.members.values() if m.contact == contact), None)

    def create_member(self, *, member_type, name, electoral_area, contact, gender, is_convener) -> int:
        if self.get_by_contact(contact):
            raise DuplicateError("A member with this contact already exists")
        member_id = self._s.new_id()
        self._s.members[member_id] = Member(
            member_id=member_id,
            member_type=member_type,
            name=name,
            electoral_area=electoral_area,
            contact=contact,
            gender=gender,
            is_convener=is_convener,
        )
        return member_id

    def update_member(self, *, member_id: int, member_type: MemberType, fields: Mapping[str, object]) -> bool:
        current = self._s.members.get(member_id)
        if not current or current.member_type != member_type:
            return False
        self._s.members[member_id] = replace(current, **fields)
        return True

    def delete_member(self, *, member_id: int, member_type: MemberType) -> bool:
        current = self._s.members.get(member_id)
        if not current or current.member_type != member_type:
            return False
        del self._s.members[member_id]
        self._s.memberships[:] = [m for m in self._s.memberships if m.member_id != member_id]
        self._s.records[:] = [r for r in self._s.records if r.member_id != member_id]
        return True

    def search(self, query: str, *, limit: int):
        q = query.lower()
        hits = [m for m in self._s.members.values() if q in m.contact.lower() or q in m.name.lower()]
        return sorted(hits, key=lambda m: m.name.lower())[:limit]

    def list_members(self, *, member_type: Optional[MemberType] = None):
        return [m for _, m in sorted(self._s.members.items()) if member_type is None or m.member_type == member_type]

    def count_by_type(self):
        return Counter(m.member_type for m in self._s.members.values())


class InMemorySubcommittees:
    def __init__(self, store: Store):
        self._s = store

    def list_subcommittees(self):
        return list(self._s.subcommittees.values())

    def get_by_name(self, name: SubcommitteeName) -> Optional[Subcommittee]:
        return next((s for s in self._s.subcommittees.values() if s.name == name), None)

    def get_by_id(self, subcommittee_id: int) -> Optional[Subcommittee]:
        return self._s.subcommittees.get(subcommittee_id)

    def list_for_member(self, member_id: int):
        return [m for m in self._s.memberships if m.member_id == member_id]

    def get_membership(self, *, subcommittee_id: int, member_id: int) -> Optional[Membership]:
        return next(
            (m for m in self._s.memberships if m.subcommittee_id == subcommittee_id and m.member_id == member_id),
            None,
        )

    def get_convener(self, subcommittee_id: int) -> Optional[Membership]:
        return next((m for m in self._s.memberships if m.subcommittee_id == subcommittee_id and m.is_convener), None)

    def create_membership(self, *, subcommittee_id, member_id, member_type, is_convener, slot) -> int:
        # same unique keys as the MySQL schema
        mine = self.list_for_member(member_id)
        if any(m.subcommittee_id == subcommittee_id for m in mine):
            raise DuplicateError("Member already belongs to this subcommittee")
        if slot not in (1, 2) or any(m.slot == slot for m in mine):
            raise CapacityError("Member can only be part of 2 subcommittees")
        if is_convener and (self.get_convener(subcommittee_id) or any(m.is_convener for m in mine)):
            raise ConflictError("Convener seat already taken")
        membership = Membership(
            membership_id=self._s.new_id(),
            subcommittee_id=subcommittee_id,
            member_id=member_id,
            member_type=member_type,
            is_convener=is_convener,
            slot=slot,
        )
        self._s.memberships.append(membership)
        return membership.membership_id

    def delete_membership(self, *, subcommittee_id: int, member_id: int) -> bool:
        m = self.get_membership(subcommittee_id=subcommittee_id, member_id=member_id)
        if not m:
            return False
        self._s.memberships.remove(m)
        return True

    def _row(self, m: Membership) -> MembershipRow:
        member = self._s.members[m.member_id]
        return MembershipRow(
            subcommittee_id=m.subcommittee_id,
            subcommittee_name=self._s.subcommittees[m.subcommittee_id].name,
            member_id=m.member_id,
            member_type=m.member_type,
            name=member.name,
            contact=member.contact,
            is_convener=m.is_convener,
        )

    def list_rows(self, *, subcommittee_id: Optional[int] = None):
        return [
            self._row(m)
            for m in self._s.memberships
            if subcommittee_id is None or m.subcommittee_id == subcommittee_id
        ]

    def list_conveners(self):
        return [self._row(m) for m in self._s.memberships if m.is_convener]


class InMemoryAttendance:
    def __init__(self, store: Store):
        self._s = store

    def _for(self, context: MeetingContext):
        return [r for r in self._s.records if r.context.key == context.key]

    def get_for_member_and_date(self, *, member_id: int, context: MeetingContext, attended_on: date):
        return next(
            (r for r in self._for(context) if r.member_id == member_id and r.attended_on == attended_on),
            None,
        )

    def create_record(self, *, member_id, context, attended_on, marked_at, is_convener_mark=False) -> int:
        if self.get_for_member_and_date(member_id=member_id, context=context, attended_on=attended_on):
            raise DuplicateAttendanceError("Attendance already marked for today")
        record = AttendanceRecord(
            attendance_id=self._s.new_id(),
            member_id=member_id,
            context=context,
            attended_on=attended_on,
            marked_at=marked_at,
            is_convener_mark=is_convener_mark,
        )
        self._s.records.append(record)
        return record.attendance_id

    def delete_all(self, *, context: MeetingContext) -> int:
        before = len(self._s.records)
        self._s.records[:] = [r for r in self._s.records if r.context.key != context.key]
        return before - len(self._s.records)

    def count_for_member(self, *, member_id: int, context: MeetingContext) -> int:
        return sum(1 for r in self._for(context) if r.member_id == member_id)

    def counts_by_member(self, *, context: MeetingContext):
        return Counter(r.member_id for r in self._for(context))

    def count_by_kind(self):
        return Counter(r.context.kind for r in self._s.records)


class InMemoryMeetings:
    def __init__(self, store: Store):
        self._s = store

    def get_by_id(self, meeting_id: int) -> Optional[Meeting]:
        return self._s.meetings.get(meeting_id)

    def create_meeting(self, *, title, meeting_date, minutes, created_by) -> int:
        meeting_id = self._s.new_id()
        self._s.meetings[meeting_id] = Meeting(
            meeting_id=meeting_id, title=title, meeting_date=meeting_date, minutes=minutes, created_by=created_by
        )
        return meeting_id

    def update_meeting(self, *, meeting_id: int, fields) -> bool:
        current = self._s.meetings.get(meeting_id)
        if not current:
            return False
        self._s.meetings[meeting_id] = replace(current, **fields)
        return True

    def delete_meeting(self, meeting_id: int) -> bool:
        return self._s.meetings.pop(meeting_id, None) is not None

    def list_recent(self, *, limit: int):
        items = sorted(self._s.meetings.values(), key=lambda m: (m.meeting_date, m.meeting_id), reverse=True)
        return items[:limit]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 10, 9, 30)


@pytest.fixture
def store() -> Store:
    s = Store()
    for name in (SubcommitteeName.TRAVEL, SubcommitteeName.REVENUE, SubcommitteeName.TRANSPORT):
        sid = s.new_id()
        s.subcommittees[sid] = Subcommittee(subcommittee_id=sid, name=name)
    return s


@pytest.fixture
def engine_settings() -> EngineSettings:
    return EngineSettings()


@pytest.fixture
def container(store, engine_settings):
    return wire_container(
        members_repo=InMemoryMembers(store),
        subcommittees_repo=InMemorySubcommittees(store),
        attendance_repo=InMemoryAttendance(store),
        meetings_repo=InMemoryMeetings(store),
        settings=engine_settings,
    )


@pytest.fixture
def sub_ids(store) -> dict[str, int]:
    return {s.name.value: s.subcommittee_id for s in store.subcommittees.values()}


@pytest.fixture
def make_member(container):
    counter = iter(range(1, 10_000))

    def _make(name: str = "", *, member_type=MemberType.ASSEMBLY_MEMBER, candidate: bool = False, gender=Gender.MALE):
        n = next(counter)
        return container.member_service.register(
            member_type=member_type,
            name=name or f"Member {n}",
            electoral_area=f"Area {n}",
            contact=f"055{n:07d}",
            gender=gender,
            is_convener=candidate,
        )

    return _make


@pytest.fixture
def client(container, monkeypatch):
    from committee_system.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()
