from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import MemberType, SubcommitteeName
from .model import Membership, MembershipRow, Subcommittee


class SubcommitteeRepository(Protocol):
    def list_subcommittees(self) -> Sequence[Subcommittee]:
        raise NotImplementedError

    def get_by_name(self, name: SubcommitteeName) -> Optional[Subcommittee]:
        raise NotImplementedError

    def get_by_id(self, subcommittee_id: int) -> Optional[Subcommittee]:
        raise NotImplementedError

    def list_for_member(self, member_id: int) -> Sequence[Membership]:
        raise NotImplementedError

    def get_membership(self, *, subcommittee_id: int, member_id: int) -> Optional[Membership]:
        raise NotImplementedError

    def get_convener(self, subcommittee_id: int) -> Optional[Membership]:
        raise NotImplementedError

    def create_membership(
        self,
        *,
        subcommittee_id: int,
        member_id: int,
        member_type: MemberType,
        is_convener: bool,
        slot: int,
    ) -> int:
        """Insert a membership.

        Implementations backed by shared storage must refuse a duplicate
        (member, subcommittee), a taken (member, slot) and a second convener,
        raising the matching domain error.
        """

        raise NotImplementedError

    def delete_membership(self, *, subcommittee_id: int, member_id: int) -> bool:
        raise NotImplementedError

    def list_rows(self, *, subcommittee_id: Optional[int] = None) -> Sequence[MembershipRow]:
        raise NotImplementedError

    def list_conveners(self) -> Sequence[MembershipRow]:
        raise NotImplementedError
