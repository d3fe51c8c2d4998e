from decimal import Decimal

import pytest

from committee_system.core.exceptions import ValidationError
from committee_system.payments.calculator.standard_calculator import StandardPaymentCalculator


def test_convener_with_three_meetings():
    calc = StandardPaymentCalculator()
    assert calc.amount_for(meetings_attended=3, is_convener=True) == Decimal("350")


def test_ordinary_member():
    calc = StandardPaymentCalculator()
    assert calc.amount_for(meetings_attended=2, is_convener=False) == Decimal("200")
    assert calc.amount_for(meetings_attended=0, is_convener=False) == Decimal("0")


def test_configured_rate_and_bonus():
    calc = StandardPaymentCalculator(rate_per_meeting="75.50", convener_bonus=20)
    assert calc.amount_for(meetings_attended=2, is_convener=True) == Decimal("171.00")


def test_negative_values_rejected():
    with pytest.raises(ValidationError):
        StandardPaymentCalculator(rate_per_meeting=-1)
    with pytest.raises(ValidationError):
        StandardPaymentCalculator().amount_for(meetings_attended=-1, is_convener=False)
