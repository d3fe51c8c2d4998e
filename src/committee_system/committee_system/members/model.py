from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Gender, MemberType


@dataclass(frozen=True)
class Member:
    """Domain entity: an Assembly Member or a Government Appointee.

    `is_convener` is the convener-candidate flag captured at registration; the
    actual convener seat lives on the subcommittee membership.
    """

    member_id: int
    member_type: MemberType
    name: str
    electoral_area: str
    contact: str
    gender: Gender
    is_convener: bool = False
