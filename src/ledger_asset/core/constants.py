"""
Ledger Asset Core Constants (integer domain)
============================================

Only integer bounds and text-codec tokens live here. Decimal is used for
display only and never appears in this module.
"""

# NOTE: MAX_AMOUNT leaves two bits of headroom below the signed 64-bit range so
# that products can be checked before narrowing.

# ---------------------------------------------------------------------------
# Signed 64-bit amount domain
# ---------------------------------------------------------------------------

#: Bounds of the signed 64-bit integer that carries an asset amount.
I64_MIN: int = -(1 << 63)
I64_MAX: int = (1 << 63) - 1

#: Largest magnitude a valid asset amount may hold (2^62 - 1).
MAX_AMOUNT: int = (1 << 62) - 1


# ---------------------------------------------------------------------------
# Symbol bounds
# ---------------------------------------------------------------------------

#: Precision is stored in a single byte.
MAX_PRECISION: int = 255

#: A symbol code packs at most 7 uppercase letters into the upper 56 bits.
SYMBOL_CODE_MAX_LEN: int = 7


# ---------------------------------------------------------------------------
# Text codec
# ---------------------------------------------------------------------------

#: Largest power of ten that fits a signed 64-bit integer (10^18).
#: Digit extraction clamps its exponent here, so precisions above 18 repeat
#: the most significant digits instead of overflowing.
MAX_POW10_EXPONENT: int = 18

#: Separator between the numeric token and the symbol token ("1.0000 SYM").
AMOUNT_SYMBOL_SEPARATOR: str = " "

#: Decimal point within the numeric token.
DECIMAL_POINT: str = "."

#: Separator between precision and code in the symbol form "4,SYM".
PRECISION_CODE_SEPARATOR: str = ","


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "I64_MIN",
    "I64_MAX",
    "MAX_AMOUNT",
    "MAX_PRECISION",
    "SYMBOL_CODE_MAX_LEN",
    "MAX_POW10_EXPONENT",
    "AMOUNT_SYMBOL_SEPARATOR",
    "DECIMAL_POINT",
    "PRECISION_CODE_SEPARATOR",
]
