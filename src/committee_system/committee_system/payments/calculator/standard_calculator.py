from __future__ import annotations

from decimal import Decimal

from ...core.constants import DEFAULT_CONVENER_BONUS, DEFAULT_RATE_PER_MEETING
from ...core.exceptions import ValidationError
from .base import PaymentCalculator


def _money(value) -> Decimal:
    return Decimal(str(value))


class StandardPaymentCalculator(PaymentCalculator):
    """Standard rule: meetings x rate, plus a flat bonus for the convener."""

    def __init__(self, *, rate_per_meeting=DEFAULT_RATE_PER_MEETING, convener_bonus=DEFAULT_CONVENER_BONUS):
        self.rate_per_meeting = _money(rate_per_meeting)
        self.convener_bonus = _money(convener_bonus)
        if self.rate_per_meeting < 0 or self.convener_bonus < 0:
            raise ValidationError("Rate and convener bonus cannot be negative")

    def amount_for(self, *, meetings_attended: int, is_convener: bool) -> Decimal:
        if int(meetings_attended) < 0:
            raise ValidationError("Meetings attended cannot be negative")
        amount = self.rate_per_meeting * int(meetings_attended)
        if is_convener:
            amount += self.convener_bonus
        return amount
