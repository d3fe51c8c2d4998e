from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ReportRow:
    """Read-model for the attendance/payment report. Derived, never stored."""

    subcommittee_name: str
    member_id: int
    member_name: str
    meetings_attended: int
    amount: Decimal
    is_convener: bool = False
