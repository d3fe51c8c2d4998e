from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from .model import Meeting


class MeetingRepository(Protocol):
    def get_by_id(self, meeting_id: int) -> Optional[Meeting]:
        raise NotImplementedError

    def create_meeting(
        self, *, title: str, meeting_date: date, minutes: Optional[str], created_by: Optional[str]
    ) -> int:
        raise NotImplementedError

    def update_meeting(self, *, meeting_id: int, fields: Mapping[str, object]) -> bool:
        raise NotImplementedError

    def delete_meeting(self, meeting_id: int) -> bool:
        raise NotImplementedError

    def list_recent(self, *, limit: int) -> Sequence[Meeting]:
        raise NotImplementedError
