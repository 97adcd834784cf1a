from decimal import Decimal

import pytest

from ledger_api.models.transaction import Transaction
from ledger_api.services.ledger import signed_amount


def test_income_is_stored_positive():
    assert signed_amount(1000, "income") == Decimal("1000.00")
    assert signed_amount(-1000, "income") == Decimal("1000.00")


@pytest.mark.parametrize("tx_type", [None, "expense", "Income", "INCOME", "incme", 1, True, ""])
def test_anything_but_income_is_an_expense(tx_type):
    assert signed_amount(50, tx_type) == Decimal("-50.00")
    assert signed_amount(-50, tx_type) == Decimal("-50.00")


def test_amount_is_rounded_to_cents():
    assert signed_amount(10.005) == Decimal("-10.01")
    assert signed_amount(Decimal("0.125"), "income") == Decimal("0.13")


def test_zero_is_never_negative():
    value = signed_amount(0)
    assert value == 0
    assert not value.is_signed()
    assert Transaction(amount=value).tx_type == "income"


@pytest.mark.parametrize(
    "amount, expected",
    [(Decimal("-0.01"), "expense"), (Decimal("0.00"), "income"), (Decimal("12.50"), "income"), (-3, "expense")],
)
def test_type_follows_the_sign(amount, expected):
    assert Transaction(amount=amount).tx_type == expected
