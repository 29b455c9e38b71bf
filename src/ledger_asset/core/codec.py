"""
Text codec for assets: ``"<sign><integer>.<fraction> <CODE>"``.

Encoding walks the fractional digits from most to least significant using
integer division only; no decimal string of the whole magnitude is built.
Decoding treats the decimal point as positional: ``"123.45"`` is parsed as the
integer ``12345`` with precision 2, so no rounding ever happens.

Decoding never checks the range invariant; that is a separate concern of the
asset type.
"""

from __future__ import annotations

import re
from typing import Tuple

from .constants import (
    I64_MIN,
    I64_MAX,
    MAX_PRECISION,
    MAX_POW10_EXPONENT,
    AMOUNT_SYMBOL_SEPARATOR,
    DECIMAL_POINT,
)
from .exc import BadFormat, BadAmount, BadSymbolCode, InvalidSymbolCode
from .symbol import Symbol, SymbolCode

# Debug printing control (codec layer)
DEBUG_CODEC = False

def _dbg(msg: str) -> None:
    if DEBUG_CODEC:
        print(msg)


# Optional sign then ASCII digits only (no whitespace, underscores or unicode digits).
_I64_LITERAL = re.compile(r"[+-]?[0-9]+")


def _pow10(n: int) -> int:
    """Return 10**min(n, MAX_POW10_EXPONENT) (clamped to the 64-bit range)."""
    if n < 0:
        raise ValueError("_pow10 expects non-negative exponent")
    return 10 ** min(n, MAX_POW10_EXPONENT)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _parse_i64(text: str) -> int:
    """Parse a signed 64-bit integer literal; raise ValueError otherwise."""
    if _I64_LITERAL.fullmatch(text) is None:
        raise ValueError(f"not an integer literal: {text!r}")
    n = int(text)
    if not I64_MIN <= n <= I64_MAX:
        raise ValueError(f"integer out of 64-bit range: {text!r}")
    return n


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def encode_asset(amount: int, symbol: Symbol) -> str:
    """Render ``amount`` scaled by ``symbol.precision`` followed by the code.

    Examples:
      (-1000001, 4,SYM) -> '-100.0001 SYM'
      (0, 0,SYM)        -> '0 SYM'
      (-5, 4,SYM)       -> '-0.0005 SYM'
    """
    precision = symbol.precision
    whole = _trunc_div(amount, _pow10(precision))
    # Keep the sign when the integer part truncates to zero.
    whole_str = f"-{-whole}" if amount < 0 else str(whole)

    magnitude = abs(amount)
    fraction = "".join(
        chr(ord("0") + (magnitude // _pow10(i)) % 10)
        for i in range(precision - 1, -1, -1)
    )
    _dbg(f"encode: amount={amount}, precision={precision}, whole={whole_str}, fraction={fraction!r}")

    if not fraction:
        return f"{whole_str}{AMOUNT_SYMBOL_SEPARATOR}{symbol.code}"
    return f"{whole_str}{DECIMAL_POINT}{fraction}{AMOUNT_SYMBOL_SEPARATOR}{symbol.code}"


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode_asset(text: str) -> Tuple[int, Symbol]:
    """Split ``text`` into (amount, symbol); precision is the digit count after the dot.

    Raises BadFormat, BadAmount or BadSymbolCode (all ParseError).
    """
    parts = text.split(AMOUNT_SYMBOL_SEPARATOR)
    if len(parts) != 2:
        _dbg(f"decode: {len(parts)} tokens in {text!r}")
        raise BadFormat()
    amount_str, symbol_str = parts

    idx = amount_str.find(DECIMAL_POINT)
    precision = 0 if idx < 0 else len(amount_str) - idx - 1
    if precision > MAX_PRECISION:
        raise BadAmount(amount_str)

    try:
        amount = _parse_i64(amount_str.replace(DECIMAL_POINT, ""))
    except ValueError:
        raise BadAmount(amount_str) from None

    try:
        code = SymbolCode.parse(symbol_str)
    except InvalidSymbolCode:
        raise BadSymbolCode(symbol_str) from None

    _dbg(f"decode: amount={amount}, precision={precision}, code={code}")
    return amount, Symbol.from_precision(code, precision)


__all__ = [
    "encode_asset",
    "decode_asset",
]
