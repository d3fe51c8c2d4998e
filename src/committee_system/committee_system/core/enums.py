from __future__ import annotations

from enum import Enum


class MemberType(str, Enum):
    """The two registries a member can come from."""

    ASSEMBLY_MEMBER = "AssemblyMember"
    GOVERNMENT_APPOINTEE = "GovernmentAppointee"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class SubcommitteeName(str, Enum):
    """Closed set of subcommittees seeded at bootstrap."""

    TRAVEL = "Travel"
    REVENUE = "Revenue"
    TRANSPORT = "Transport"


class ContextKind(str, Enum):
    """Independent attendance ledgers."""

    SUBCOMMITTEE = "subcommittee"
    GENERAL = "general"
    CONVENER = "execo"


class ConvenerConflictPolicy(str, Enum):
    """What happens when a convener candidate cannot take the convener seat."""

    DEMOTE = "demote"
    REJECT = "reject"
