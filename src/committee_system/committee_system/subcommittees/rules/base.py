from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..model import Membership


@dataclass(frozen=True)
class ConvenerDecision:
    is_convener: bool
    note: Optional[str] = None


class ConvenerRule(ABC):
    """Strategy Pattern: decide whether a new membership takes the convener seat."""

    @staticmethod
    def blocking_reason(
        *,
        convener_elsewhere: Optional[Membership],
        current_convener: Optional[Membership],
    ) -> Optional[str]:
        if convener_elsewhere is not None:
            return "Member is already convener of another subcommittee"
        if current_convener is not None:
            return "Subcommittee already has a convener"
        return None

    @abstractmethod
    def decide(
        self,
        *,
        is_candidate: bool,
        convener_elsewhere: Optional[Membership],
        current_convener: Optional[Membership],
    ) -> ConvenerDecision:
        raise NotImplementedError
