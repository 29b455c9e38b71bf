"""
Ledger Asset Core
=================

Unified exports for the integer-domain asset primitive and its collaborators.
All arithmetic is exact on signed 64-bit amounts; Decimal and float views are
provided *only* for display.
"""

# NOTE:
#   `Asset` pairs an integer amount with a `Symbol` (code + precision). Operands
#   must share a symbol; results are range-checked against MAX_AMOUNT.
#   Text encoding/decoding lives in `codec`; display helpers live in `fmt`.

# Integer-domain constants
from .constants import (
    I64_MIN,
    I64_MAX,
    MAX_AMOUNT,
    MAX_PRECISION,
    MAX_POW10_EXPONENT,
    SYMBOL_CODE_MAX_LEN,
)

# Symbol collaborator
from .symbol import (
    Symbol,
    SymbolCode,
)

# Text codec
from .codec import (
    encode_asset,
    decode_asset,
)

# Asset primitive
from .asset import (
    Asset,
)

# Display helpers (non-core arithmetic)
from .fmt import (
    fmt_dec,
    fmt_asset,
    asset_to_decimal,
)

# Core exceptions
from .exc import (
    ParseError,
    BadFormat,
    BadAmount,
    BadSymbolCode,
    InvalidSymbolCode,
    AmountDomainError,
    InvariantViolation,
    SymbolMismatchError,
    SignedOverflowError,
)

__all__ = [
    # constants
    "I64_MIN",
    "I64_MAX",
    "MAX_AMOUNT",
    "MAX_PRECISION",
    "MAX_POW10_EXPONENT",
    "SYMBOL_CODE_MAX_LEN",
    # symbol
    "Symbol",
    "SymbolCode",
    # codec
    "encode_asset",
    "decode_asset",
    # asset
    "Asset",
    # fmt
    "fmt_dec",
    "fmt_asset",
    "asset_to_decimal",
    # exceptions
    "ParseError",
    "BadFormat",
    "BadAmount",
    "BadSymbolCode",
    "InvalidSymbolCode",
    "AmountDomainError",
    "InvariantViolation",
    "SymbolMismatchError",
    "SignedOverflowError",
]
