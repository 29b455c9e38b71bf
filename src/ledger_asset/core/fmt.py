"""
Formatting helpers (display only).

Core arithmetic stays on integers. Decimal here is only for logs, tests and
display; nothing returned from this module is fed back into an Asset.
"""

from decimal import Decimal

from .exc import AmountDomainError
from .asset import Asset


def fmt_dec(x: Decimal, places: int = 18) -> str:
    """Format a Decimal in scientific notation with fixed fractional digits.

    The output is stable for logs and tests, e.g.:
      Decimal('1')        -> '1.000000000000000000E+0'
      Decimal('-100.0001') -> '-1.000001000000000000E+2'
    """
    return format(x, f".{places}E")


def asset_to_decimal(a: Asset) -> Decimal:
    """Convert an asset into an exact Decimal (amount × 10^-precision) for logging only."""
    if a is None:
        raise AmountDomainError("asset_to_decimal(): received None")
    if not isinstance(a, Asset):
        raise AmountDomainError("asset_to_decimal(): unsupported amount type")
    return a.to_decimal()


def fmt_asset(a: Asset, places: int = 18) -> str:
    """Scientific-notation rendering with the symbol code, e.g. '1.5E+0 SYM'."""
    return f"{fmt_dec(asset_to_decimal(a), places)} {a.symbol.code}"


__all__ = [
    "fmt_dec",
    "asset_to_decimal",
    "fmt_asset",
]
