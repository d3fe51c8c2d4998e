from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.logging import get_logger
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_MEETING_LIMIT
from ..core.exceptions import NotFoundError, ValidationError
from .model import Meeting
from .repository import MeetingRepository

logger = get_logger("meetings")


def _as_date(value) -> date:
    if isinstance(value, date):
        return value
    try:
        # accept full ISO timestamps, the date part is what counts
        return parse_iso_date(str(value or "").strip()[:10])
    except ValueError:
        raise ValidationError("Meeting date must be YYYY-MM-DD")


class MeetingService:
    def __init__(self, meetings: MeetingRepository):
        self._meetings = meetings

    def create(
        self,
        *,
        title: str,
        meeting_date,
        minutes: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> Meeting:
        title = require_non_empty(title, "Meeting title")
        meeting_date = _as_date(meeting_date)
        minutes = (minutes or "").strip() or None
        created_by = (created_by or "").strip() or None

        meeting_id = self._meetings.create_meeting(
            title=title, meeting_date=meeting_date, minutes=minutes, created_by=created_by
        )
        logger.info("meeting created id=%s date=%s", meeting_id, meeting_date)
        return Meeting(
            meeting_id=meeting_id, title=title, meeting_date=meeting_date, minutes=minutes, created_by=created_by
        )

    def update(self, *, meeting_id: int, patch: Mapping[str, object]) -> Meeting:
        fields: dict[str, object] = {}
        if "title" in patch:
            fields["title"] = require_non_empty(patch["title"], "Meeting title")
        if "date" in patch or "meeting_date" in patch:
            fields["meeting_date"] = _as_date(patch.get("date", patch.get("meeting_date")))
        if "minutes" in patch:
            fields["minutes"] = (str(patch["minutes"] or "")).strip() or None
        if not fields:
            raise ValidationError("Nothing to update")

        if not self._meetings.update_meeting(meeting_id=int(meeting_id), fields=fields):
            raise NotFoundError("Meeting not found")
        return self.get(int(meeting_id))

    def get(self, meeting_id: int) -> Meeting:
        meeting = self._meetings.get_by_id(int(meeting_id))
        if not meeting:
            raise NotFoundError("Meeting not found")
        return meeting

    def delete(self, meeting_id: int) -> None:
        if not self._meetings.delete_meeting(int(meeting_id)):
            raise NotFoundError("Meeting not found")
        logger.info("meeting deleted id=%s", meeting_id)

    def list_recent(self, *, limit: int = DEFAULT_MEETING_LIMIT) -> Sequence[Meeting]:
        return list(self._meetings.list_recent(limit=int(limit)))
