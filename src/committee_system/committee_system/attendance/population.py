"""Who belongs to a meeting context, and who counts as its convener."""
from __future__ import annotations

from ..core.enums import ContextKind
from ..subcommittees.repository import SubcommitteeRepository
from .model import MeetingContext


def is_in_population(subcommittees: SubcommitteeRepository, *, member_id: int, context: MeetingContext) -> bool:
    if context.kind == ContextKind.SUBCOMMITTEE:
        return subcommittees.get_membership(subcommittee_id=context.subcommittee_id, member_id=member_id) is not None
    if context.kind == ContextKind.CONVENER:
        return any(m.is_convener for m in subcommittees.list_for_member(member_id))
    return True


def holds_convener_status(subcommittees: SubcommitteeRepository, *, member_id: int, context: MeetingContext) -> bool:
    """Subcommittee: that membership's seat. Execo: every attendee. General: nobody."""
    if context.kind == ContextKind.SUBCOMMITTEE:
        m = subcommittees.get_membership(subcommittee_id=context.subcommittee_id, member_id=member_id)
        return bool(m and m.is_convener)
    if context.kind == ContextKind.CONVENER:
        return is_in_population(subcommittees, member_id=member_id, context=context)
    return False
