from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class PaymentCalculator(ABC):
    """Calculator interface (Strategy Pattern for sitting allowances)."""

    @abstractmethod
    def amount_for(self, *, meetings_attended: int, is_convener: bool) -> Decimal:
        raise NotImplementedError
