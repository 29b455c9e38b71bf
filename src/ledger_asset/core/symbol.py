"""
Symbol collaborator: a currency-like code paired with a decimal precision.

Only the surface the asset type consumes lives here:

- SymbolCode: up to 7 uppercase ASCII letters packed into an integer, first
  letter in the lowest byte.
- Symbol: (code, precision) with equality on both fields, a validity check, and
  the ``"<precision>,<CODE>"`` text form.

Contract-qualified codes (``SYM@contract``) are not handled.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_PRECISION, PRECISION_CODE_SEPARATOR, SYMBOL_CODE_MAX_LEN
from .exc import InvalidSymbolCode, InvariantViolation


def _is_code_char(c: str) -> bool:
    return "A" <= c <= "Z"


@dataclass(frozen=True)
class SymbolCode:
    """Packed symbol code (raw integer). ``SymbolCode()`` is the empty code."""
    value: int = 0

    @classmethod
    def parse(cls, text: str) -> "SymbolCode":
        """Pack ``text`` into a code; raise InvalidSymbolCode carrying ``text`` on bad input."""
        if not text or len(text) > SYMBOL_CODE_MAX_LEN:
            raise InvalidSymbolCode(text)
        value = 0
        for c in reversed(text):
            if not _is_code_char(c):
                raise InvalidSymbolCode(text)
            value = (value << 8) | ord(c)
        return cls(value)

    def raw(self) -> int:
        return self.value

    def is_valid(self) -> bool:
        """True when the bytes spell 1..7 letters A-Z followed only by zero bytes."""
        sym = self.value
        if sym <= 0 or sym >> (8 * SYMBOL_CODE_MAX_LEN):
            return False
        seen_end = False
        for _ in range(SYMBOL_CODE_MAX_LEN):
            b = sym & 0xFF
            sym >>= 8
            if seen_end:
                if b:
                    return False
                continue
            if b == 0:
                seen_end = True
            elif not _is_code_char(chr(b)):
                return False
        return True

    def __str__(self) -> str:
        chars = []
        sym = self.value
        while sym:
            chars.append(chr(sym & 0xFF))
            sym >>= 8
        return "".join(chars)


@dataclass(frozen=True)
class Symbol:
    """Unit of account: code plus number of decimal places (0..255)."""
    code: SymbolCode = SymbolCode()
    precision: int = 0

    def __post_init__(self):
        if not isinstance(self.code, SymbolCode):
            raise InvariantViolation("Symbol code must be a SymbolCode")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise InvariantViolation("Symbol precision must be int")
        if not 0 <= self.precision <= MAX_PRECISION:
            raise InvariantViolation(f"Symbol precision out of range: {self.precision}")

    # ------------- constructors -------------

    @classmethod
    def from_precision(cls, code: SymbolCode, precision: int) -> "Symbol":
        return cls(code, precision)

    @classmethod
    def parse(cls, text: str) -> "Symbol":
        """Parse the ``"<precision>,<CODE>"`` form, e.g. ``"4,SYM"``."""
        parts = text.split(PRECISION_CODE_SEPARATOR)
        if len(parts) != 2:
            raise InvalidSymbolCode(text)
        precision_str, code_str = parts
        if not precision_str.isascii() or not precision_str.isdigit():
            raise InvalidSymbolCode(text)
        precision = int(precision_str)
        if precision > MAX_PRECISION:
            raise InvalidSymbolCode(text)
        return cls(SymbolCode.parse(code_str), precision)

    # ------------- queries -------------

    def raw(self) -> int:
        return (self.code.raw() << 8) | self.precision

    def is_valid(self) -> bool:
        return self.code.is_valid()

    def __str__(self) -> str:
        return f"{self.precision}{PRECISION_CODE_SEPARATOR}{self.code}"


__all__ = [
    "SymbolCode",
    "Symbol",
]
