from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Meeting:
    """A meeting entry in the minutes book."""

    meeting_id: int
    title: str
    meeting_date: date
    minutes: Optional[str] = None
    created_by: Optional[str] = None
