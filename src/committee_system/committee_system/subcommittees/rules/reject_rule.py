from __future__ import annotations

from typing import Optional

from ...core.exceptions import ConflictError
from ..model import Membership
from .base import ConvenerDecision, ConvenerRule


class RejectConvenerRule(ConvenerRule):
    """Strict rule: a blocked candidate is refused instead of demoted."""

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
            raise ConflictError(reason)
        return ConvenerDecision(is_convener=True)
