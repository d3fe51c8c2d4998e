from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ContextKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class MeetingContext:
    """An attendance scope with its own ledger.

    Wire/storage key: ``subcommittee:<id>``, ``general`` or ``execo``.
    """

    kind: ContextKind
    subcommittee_id: Optional[int] = None

    def __post_init__(self):
        if self.kind == ContextKind.SUBCOMMITTEE:
            if not self.subcommittee_id or int(self.subcommittee_id) <= 0:
                raise ValidationError("Subcommittee context needs a subcommittee id")
        elif self.subcommittee_id is not None:
            raise ValidationError(f"{self.kind.value} context does not take a subcommittee id")

    @classmethod
    def subcommittee(cls, subcommittee_id: int) -> "MeetingContext":
        return cls(ContextKind.SUBCOMMITTEE, int(subcommittee_id))

    @classmethod
    def general(cls) -> "MeetingContext":
        return cls(ContextKind.GENERAL)

    @classmethod
    def convener(cls) -> "MeetingContext":
        return cls(ContextKind.CONVENER)

    @classmethod
    def parse(cls, key: str) -> "MeetingContext":
        raw = (key or "").strip().lower()
        kind_s, sep, ident = raw.partition(":")
        try:
            kind = ContextKind(kind_s)
        except ValueError:
            raise ValidationError(f"Unknown meeting context: {key!r}")

        if kind == ContextKind.SUBCOMMITTEE:
            if not sep or not ident.isdigit():
                raise ValidationError("Subcommittee context must look like 'subcommittee:<id>'")
            return cls.subcommittee(int(ident))
        if sep:
            raise ValidationError(f"Unknown meeting context: {key!r}")
        return cls(kind)

    @property
    def key(self) -> str:
        if self.kind == ContextKind.SUBCOMMITTEE:
            return f"{self.kind.value}:{self.subcommittee_id}"
        return self.kind.value


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark."""

    attendance_id: int
    member_id: int
    context: MeetingContext
    attended_on: date
    marked_at: datetime
    is_convener_mark: bool = False
