from __future__ import annotations

from typing import Optional, Sequence

from ..common.locks import KeyedLock
from ..common.logging import get_logger
from ..common.validators import require_choice
from ..core.constants import MAX_SUBCOMMITTEES_PER_MEMBER
from ..core.enums import ConvenerConflictPolicy, MemberType, SubcommitteeName
from ..core.exceptions import CapacityError, DuplicateError, NotFoundError
from ..members.repository import MemberRepository
from .factory import ConvenerRuleFactory
from .model import Membership, MembershipRow, Subcommittee
from .ordering import SubcommitteeOrder
from .repository import SubcommitteeRepository

logger = get_logger("subcommittees")


class SubcommitteeService:
    """Use case: seat members on subcommittees under the capacity and convener rules."""

    def __init__(
        self,
        subcommittees: SubcommitteeRepository,
        members: MemberRepository,
        *,
        rule_factory: Optional[ConvenerRuleFactory] = None,
        policy: ConvenerConflictPolicy = ConvenerConflictPolicy.DEMOTE,
        order: Optional[SubcommitteeOrder] = None,
        max_per_member: int = MAX_SUBCOMMITTEES_PER_MEMBER,
        locks: Optional[KeyedLock] = None,
    ):
        self._subcommittees = subcommittees
        self._members = members
        self._rule = (rule_factory or ConvenerRuleFactory()).for_policy(policy)
        self._order = order or SubcommitteeOrder()
        self._max_per_member = int(max_per_member)
        self._locks = locks or KeyedLock()

    def _get_subcommittee(self, subcommittee_name) -> Subcommittee:
        name = require_choice(subcommittee_name, SubcommitteeName, "Subcommittee")
        sub = self._subcommittees.get_by_name(name)
        if not sub:
            raise NotFoundError(f"Subcommittee {name.value} is not set up")
        return sub

    def add_member(self, *, subcommittee_name, member_id: int, member_type) -> Membership:
        sub = self._get_subcommittee(subcommittee_name)
        member_type = require_choice(member_type, MemberType, "Member type")

        member = self._members.get_by_id(int(member_id))
        if not member or member.member_type != member_type:
            raise NotFoundError("Member not found")

        with self._locks.hold(("member", member.member_id), ("subcommittee", sub.subcommittee_id)):
            existing = list(self._subcommittees.list_for_member(member.member_id))
            if len(existing) >= self._max_per_member:
                logger.warning("member id=%s refused: already on %s subcommittees", member.member_id, len(existing))
                raise CapacityError(f"Member can only be part of {self._max_per_member} subcommittees")
            if any(m.subcommittee_id == sub.subcommittee_id for m in existing):
                raise DuplicateError(f"Member already belongs to {sub.name.value}")

            decision = self._rule.decide(
                is_candidate=member.is_convener,
                convener_elsewhere=next((m for m in existing if m.is_convener), None),
                current_convener=self._subcommittees.get_convener(sub.subcommittee_id),
            )
            if decision.note:
                logger.info("member id=%s joins %s as ordinary member: %s", member.member_id, sub.name.value, decision.note)

            taken = {m.slot for m in existing}
            slot = next(s for s in range(1, self._max_per_member + 1) if s not in taken)

            membership_id = self._subcommittees.create_membership(
                subcommittee_id=sub.subcommittee_id,
                member_id=member.member_id,
                member_type=member.member_type,
                is_convener=decision.is_convener,
                slot=slot,
            )

        logger.info(
            "member id=%s added to %s (convener=%s)", member.member_id, sub.name.value, decision.is_convener
        )
        return Membership(
            membership_id=membership_id,
            subcommittee_id=sub.subcommittee_id,
            member_id=member.member_id,
            member_type=member.member_type,
            is_convener=decision.is_convener,
            slot=slot,
        )

    def remove_member(self, *, subcommittee_id: int, member_id: int) -> None:
        with self._locks.hold(("member", int(member_id)), ("subcommittee", int(subcommittee_id))):
            if not self._subcommittees.delete_membership(subcommittee_id=int(subcommittee_id), member_id=int(member_id)):
                raise NotFoundError("Membership not found")
        logger.info("member id=%s removed from subcommittee id=%s", member_id, subcommittee_id)

    def list_by_subcommittee(self, subcommittee_name) -> Sequence[MembershipRow]:
        sub = self._get_subcommittee(subcommittee_name)
        rows = self._subcommittees.list_rows(subcommittee_id=sub.subcommittee_id)
        return sorted(rows, key=lambda r: (r.name.lower(), r.member_id))

    def overview(self) -> list[tuple[Subcommittee, list[MembershipRow]]]:
        """All subcommittees in display rank, each with its members."""
        by_sub: dict[int, list[MembershipRow]] = {}
        for row in self._subcommittees.list_rows():
            by_sub.setdefault(row.subcommittee_id, []).append(row)

        subs = sorted(self._subcommittees.list_subcommittees(), key=lambda s: self._order.rank(s.name))
        return [
            (s, sorted(by_sub.get(s.subcommittee_id, []), key=lambda r: (r.name.lower(), r.member_id)))
            for s in subs
        ]

    def count_subcommittees(self, member_id: int) -> int:
        return len(self._subcommittees.list_for_member(int(member_id)))

    def list_conveners(self) -> Sequence[MembershipRow]:
        return sorted(
            self._subcommittees.list_conveners(),
            key=lambda r: (self._order.rank(r.subcommittee_name), r.name.lower()),
        )
