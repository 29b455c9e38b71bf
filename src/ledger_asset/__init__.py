# Top-level API for ledger_asset (integer-domain).
"""
Top-level API for ledger_asset (integer-domain).

This module exposes the stable interface:
  - Asset: signed 64-bit amount paired with a Symbol, exact arithmetic
  - Symbol / SymbolCode: unit of account (code + precision)
  - encode_asset / decode_asset: the "1.2345 SYM" text codec

Decimal and float conversions exist for display only.
"""

from __future__ import annotations

from .core import (
    Asset,
    Symbol,
    SymbolCode,
    MAX_AMOUNT,
    encode_asset,
    decode_asset,
    ParseError,
    BadFormat,
    BadAmount,
    BadSymbolCode,
    AmountDomainError,
    InvariantViolation,
    SymbolMismatchError,
    SignedOverflowError,
)

__all__ = [
    # value types
    "Asset",
    "Symbol",
    "SymbolCode",
    "MAX_AMOUNT",
    # codec
    "encode_asset",
    "decode_asset",
    # exceptions
    "ParseError",
    "BadFormat",
    "BadAmount",
    "BadSymbolCode",
    "AmountDomainError",
    "InvariantViolation",
    "SymbolMismatchError",
    "SignedOverflowError",
]
