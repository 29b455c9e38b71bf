import pytest
from decimal import Decimal

from ledger_asset.core.asset import Asset
from ledger_asset.core.exc import AmountDomainError
from ledger_asset.core.symbol import Symbol
from ledger_asset.core.fmt import asset_to_decimal, fmt_asset, fmt_dec


def _a(amount: int, symbol: str = "4,SYM") -> Asset:
    return Asset.from_amount(amount, Symbol.parse(symbol))


def test_asset_to_decimal_normal_and_zero():
    print("[asset_to_decimal] 12345 @ 4,SYM and zero")
    assert asset_to_decimal(_a(12345)) == Decimal("1.2345")
    assert asset_to_decimal(_a(0)) == Decimal("0")


def test_asset_to_decimal_none_and_malformed_raise():
    print("[asset_to_decimal] None and non-asset should raise AmountDomainError")
    with pytest.raises(AmountDomainError):
        asset_to_decimal(None)  # type: ignore[arg-type]
    with pytest.raises(AmountDomainError):
        asset_to_decimal(Decimal("1"))  # type: ignore[arg-type]


def test_fmt_dec_scientific_formatting():
    print("[fmt_dec] check scientific formatting stability")
    assert fmt_dec(Decimal("1")) == "1.000000000000000000E+0"
    assert fmt_dec(Decimal("-100.0001")) == "-1.000001000000000000E+2"


def test_fmt_asset():
    print("[fmt_asset] 15000 @ 4,SYM, 2 places")
    assert fmt_asset(_a(15000), places=2) == "1.50E+0 SYM"
