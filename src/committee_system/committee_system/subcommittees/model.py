from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import MemberType, SubcommitteeName


@dataclass(frozen=True)
class Subcommittee:
    subcommittee_id: int
    name: SubcommitteeName


@dataclass(frozen=True)
class Membership:
    """Domain entity: a member's seat on one subcommittee."""

    membership_id: int
    subcommittee_id: int
    member_id: int
    member_type: MemberType
    is_convener: bool
    slot: int


@dataclass(frozen=True)
class MembershipRow:
    """Read-model for listings and reports (membership joined with member)."""

    subcommittee_id: int
    subcommittee_name: SubcommitteeName
    member_id: int
    member_type: MemberType
    name: str
    contact: str
    is_convener: bool
