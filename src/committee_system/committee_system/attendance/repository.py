from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Optional, Protocol

from ..core.enums import ContextKind
from .model import AttendanceRecord, MeetingContext


class AttendanceRepository(Protocol):
    def get_for_member_and_date(
        self, *, member_id: int, context: MeetingContext, attended_on: date
    ) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_record(
        self,
        *,
        member_id: int,
        context: MeetingContext,
        attended_on: date,
        marked_at: datetime,
        is_convener_mark: bool = False,
    ) -> int:
        """Insert one mark; shared storage must refuse a second one for the same day."""

        raise NotImplementedError

    def delete_all(self, *, context: MeetingContext) -> int:
        raise NotImplementedError

    def count_for_member(self, *, member_id: int, context: MeetingContext) -> int:
        raise NotImplementedError

    def counts_by_member(self, *, context: MeetingContext) -> Mapping[int, int]:
        """member_id -> meetings attended, only for members with at least one mark."""

        raise NotImplementedError

    def count_by_kind(self) -> Mapping[ContextKind, int]:
        raise NotImplementedError
