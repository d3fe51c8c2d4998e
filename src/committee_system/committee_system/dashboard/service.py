from __future__ import annotations

from dataclasses import dataclass

from ..attendance.repository import AttendanceRepository
from ..core.enums import ContextKind, MemberType
from ..members.repository import MemberRepository
from ..subcommittees.repository import SubcommitteeRepository


@dataclass(frozen=True)
class DashboardSummary:
    total_assembly_members: int
    total_government_appointees: int
    total_members: int
    total_conveners: int
    general_attendance: int
    convener_attendance: int
    subcommittee_attendance: int


class DashboardService:
    """Headline counts for the dashboard cards."""

    def __init__(
        self,
        members: MemberRepository,
        subcommittees: SubcommitteeRepository,
        attendance: AttendanceRepository,
    ):
        self._members = members
        self._subcommittees = subcommittees
        self._attendance = attendance

    def summary(self) -> DashboardSummary:
        by_type = self._members.count_by_type()
        by_kind = self._attendance.count_by_kind()
        assembly = int(by_type.get(MemberType.ASSEMBLY_MEMBER, 0))
        appointees = int(by_type.get(MemberType.GOVERNMENT_APPOINTEE, 0))
        return DashboardSummary(
            total_assembly_members=assembly,
            total_government_appointees=appointees,
            total_members=assembly + appointees,
            total_conveners=len(self._subcommittees.list_conveners()),
            general_attendance=int(by_kind.get(ContextKind.GENERAL, 0)),
            convener_attendance=int(by_kind.get(ContextKind.CONVENER, 0)),
            subcommittee_attendance=int(by_kind.get(ContextKind.SUBCOMMITTEE, 0)),
        )
