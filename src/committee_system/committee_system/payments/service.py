from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from ..attendance.model import MeetingContext
from ..attendance.population import holds_convener_status
from ..attendance.repository import AttendanceRepository
from ..core.constants import CONVENER_MEETING_LABEL, GENERAL_MEETING_LABEL
from ..core.enums import ContextKind
from ..core.exceptions import NotFoundError
from ..members.repository import MemberRepository
from ..subcommittees.ordering import SubcommitteeOrder
from ..subcommittees.repository import SubcommitteeRepository
from .calculator.base import PaymentCalculator
from .calculator.standard_calculator import StandardPaymentCalculator
from .model import ReportRow


class PaymentReportService:
    """Amounts owed and the flattened attendance report.

    Counts always come from the ledger; nothing here writes.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        subcommittees: SubcommitteeRepository,
        members: MemberRepository,
        *,
        calculator: Optional[PaymentCalculator] = None,
        order: Optional[SubcommitteeOrder] = None,
    ):
        self._attendance = attendance
        self._subcommittees = subcommittees
        self._members = members
        self._calculator = calculator or StandardPaymentCalculator()
        self._order = order or SubcommitteeOrder()

    def amount_for(self, member_id: int, context: MeetingContext) -> Decimal:
        meetings = self._attendance.count_for_member(member_id=int(member_id), context=context)
        is_convener = holds_convener_status(self._subcommittees, member_id=int(member_id), context=context)
        return self._calculator.amount_for(meetings_attended=meetings, is_convener=is_convener)

    def _subcommittee_rows(self, subcommittee_id: int, label: str) -> list[ReportRow]:
        """Rows come from the ledger, so members removed after attending are still paid."""
        counts = self._attendance.counts_by_member(context=MeetingContext.subcommittee(subcommittee_id))
        seats = {m.member_id: m.is_convener for m in self._subcommittees.list_rows(subcommittee_id=subcommittee_id)}
        rows: list[ReportRow] = []
        for member_id, attended in counts.items():
            member = self._members.get_by_id(int(member_id))
            if not member or attended <= 0:
                continue
            is_convener = seats.get(member.member_id, False)
            rows.append(
                ReportRow(
                    subcommittee_name=label,
                    member_id=member.member_id,
                    member_name=member.name,
                    meetings_attended=int(attended),
                    amount=self._calculator.amount_for(meetings_attended=int(attended), is_convener=is_convener),
                    is_convener=is_convener,
                )
            )
        return rows

    def _meeting_rows(self, context: MeetingContext, label: str) -> list[ReportRow]:
        is_convener = context.kind == ContextKind.CONVENER
        rows: list[ReportRow] = []
        for member_id, attended in self._attendance.counts_by_member(context=context).items():
            member = self._members.get_by_id(int(member_id))
            if not member or attended <= 0:
                continue
            rows.append(
                ReportRow(
                    subcommittee_name=label,
                    member_id=member.member_id,
                    member_name=member.name,
                    meetings_attended=int(attended),
                    amount=self._calculator.amount_for(meetings_attended=int(attended), is_convener=is_convener),
                    is_convener=is_convener,
                )
            )
        return rows

    def build_report(self, context: Optional[MeetingContext] = None) -> list[ReportRow]:
        """Report rows ordered by subcommittee rank, then member name.

        Without a filter every subcommittee is included. Only members with at
        least one attendance appear, so an empty ledger gives an empty list.
        """

        if context is not None and context.kind == ContextKind.GENERAL:
            rows = self._meeting_rows(context, GENERAL_MEETING_LABEL)
        elif context is not None and context.kind == ContextKind.CONVENER:
            rows = self._meeting_rows(context, CONVENER_MEETING_LABEL)
        else:
            subs = list(self._subcommittees.list_subcommittees())
            if context is not None:
                subs = [s for s in subs if s.subcommittee_id == context.subcommittee_id]
                if not subs:
                    raise NotFoundError("Subcommittee not found")

            rows = []
            for sub in sorted(subs, key=lambda s: self._order.rank(s.name)):
                rows.extend(
                    sorted(
                        self._subcommittee_rows(sub.subcommittee_id, sub.name.value),
                        key=lambda r: (r.member_name.lower(), r.member_id),
                    )
                )
            return rows

        return sorted(rows, key=lambda r: (r.member_name.lower(), r.member_id))

    @staticmethod
    def report_total(rows: Iterable[ReportRow]) -> Decimal:
        return sum((r.amount for r in rows), Decimal("0"))
