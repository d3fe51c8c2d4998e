from __future__ import annotations

from typing import Optional

from ..model import Membership
from .base import ConvenerDecision, ConvenerRule


class DemoteConvenerRule(ConvenerRule):
    """Default rule: a blocked candidate joins as an ordinary member."""

    def decide(
        self,
        *,
        is_candidate: bool,
        convener_elsewhere: Optional[Membership],
        current_convener: Optional[Membership],
    ) -> ConvenerDecision:
        if not is_candidate:
            return ConvenerDecision(is_convener=False)

        reason = self.blocking_reason(convener_elsewhere=convener_elsewhere, current_convener=current_convener)
        if reason:
            return ConvenerDecision(is_convener=False, note=reason)
        return ConvenerDecision(is_convener=True)
