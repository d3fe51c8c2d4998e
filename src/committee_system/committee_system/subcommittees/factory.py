from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_choice
from ..core.enums import ConvenerConflictPolicy
from .rules.base import ConvenerRule
from .rules.demote_rule import DemoteConvenerRule
from .rules.reject_rule import RejectConvenerRule


@dataclass
class ConvenerRuleFactory:
    """Factory Pattern: choose the convener rule from the configured policy."""

    def for_policy(self, policy) -> ConvenerRule:
        policy = require_choice(policy, ConvenerConflictPolicy, "Convener policy")
        if policy == ConvenerConflictPolicy.REJECT:
            return RejectConvenerRule()
        return DemoteConvenerRule()
