from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import Gender, MemberType
from .model import Member


class MemberRepository(Protocol):
    """Repository interface for Member.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def get_by_contact(self, contact: str) -> Optional[Member]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update_member(self, *, member_id: int, member_type: MemberType, fields: Mapping[str, object]) -> bool:
        """Apply already-validated column values. Returns False if the id/type pair is unknown."""

        raise NotImplementedError

    def delete_member(self, *, member_id: int, member_type: MemberType) -> bool:
        """Delete the member with its memberships and attendance rows."""

        raise NotImplementedError

    def search(self, query: str, *, limit: int) -> Sequence[Member]:
        raise NotImplementedError

    def list_members(self, *, member_type: Optional[MemberType] = None) -> Sequence[Member]:
        raise NotImplementedError

    def count_by_type(self) -> Mapping[MemberType, int]:
        raise NotImplementedError
