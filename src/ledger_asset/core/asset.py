"""
Asset primitive: a signed 64-bit amount tied to a Symbol (fixed-point by precision).

- Amount is an integer scaled by 10^precision; "1.2345 SYM" with precision 4 is 12345.
- Construction stores the amount without a range check; ``is_amount_within_range``
  and ``is_valid`` are queries. Arithmetic re-checks the range on every result.
- Every binary operation and comparison requires identical symbols (code and
  precision). A mismatch raises SymbolMismatchError.
- Division truncates toward zero. Float and Decimal views are for display only.

Failure tiers:
- ParseError (BadFormat / BadAmount / BadSymbolCode) from ``Asset.parse``: bad input.
- InvariantViolation / ZeroDivisionError from arithmetic: a bug in the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from .constants import I64_MIN, I64_MAX, MAX_AMOUNT
from .codec import encode_asset, decode_asset, _trunc_div
from .exc import (
    AmountDomainError,
    InvariantViolation,
    ParseError,
    SignedOverflowError,
    SymbolMismatchError,
)
from .symbol import Symbol

# Debug printing control
DEBUG_ASSET = False

def _dbg(msg: str) -> None:
    if DEBUG_ASSET:
        print(msg)


def _require_i64(n: int, what: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise AmountDomainError(f"{what} must be int, got {type(n).__name__}")
    if not I64_MIN <= n <= I64_MAX:
        raise AmountDomainError(f"{what} outside signed 64-bit range: {n}")
    return n


@dataclass(frozen=True, eq=False)
class Asset:
    """Fixed-point ledger quantity: ``amount`` units of 10^-precision of ``symbol``."""
    amount: int = 0
    symbol: Symbol = Symbol()

    MAX_AMOUNT = MAX_AMOUNT

    def __post_init__(self):
        _require_i64(self.amount, "Asset amount")
        if not isinstance(self.symbol, Symbol):
            raise AmountDomainError("Asset symbol must be a Symbol")

    # ------------- constructors -------------

    @classmethod
    def zero(cls, symbol: Optional[Symbol] = None) -> "Asset":
        return cls(0, symbol if symbol is not None else Symbol())

    @classmethod
    def from_amount(cls, amount: int, symbol: Symbol) -> "Asset":
        """Store both fields as given; the range is not checked here."""
        return cls(amount, symbol)

    @classmethod
    def parse(cls, text: str) -> "Asset":
        """Decode ``"1.2345 SYM"``. Raises a ParseError subclass on malformed text."""
        amount, symbol = decode_asset(text)
        return cls(amount, symbol)

    @classmethod
    def from_string(cls, text: str) -> "Asset":
        """Like ``parse`` for trusted literals: malformed text is an InvariantViolation."""
        try:
            return cls.parse(text)
        except ParseError as e:
            raise InvariantViolation(f"failed to parse asset from string: {e}") from e

    # ------------- predicates -------------

    def is_amount_within_range(self) -> bool:
        return -MAX_AMOUNT <= self.amount <= MAX_AMOUNT

    def is_valid(self) -> bool:
        """Amount within range and symbol code valid."""
        return self.is_amount_within_range() and self.symbol.is_valid()

    def is_zero(self) -> bool:
        return self.amount == 0

    # ------------- mutation (by replacement) -------------

    def set_amount(self, amount: int) -> "Asset":
        """Return this asset with ``amount`` replaced; the new amount must be within range."""
        result = Asset(amount, self.symbol)
        if not result.is_amount_within_range():
            raise InvariantViolation("magnitude of asset amount must be less than 2^62")
        return result

    # ------------- conversions -------------

    def value(self) -> float:
        """Lossy float view (amount / 10^precision). Never feed it back into arithmetic."""
        return self.amount / 10 ** self.symbol.precision

    def to_decimal(self) -> Decimal:
        """Exact Decimal view for logs/printing only."""
        return Decimal(self.amount).scaleb(-self.symbol.precision)

    def __str__(self) -> str:
        return encode_asset(self.amount, self.symbol)

    # ------------- comparisons -------------

    def _check_symbol(self, other: "Asset", msg: str) -> None:
        if self.symbol != other.symbol:
            _dbg(f"symbol mismatch: {self.symbol} vs {other.symbol}")
            raise SymbolMismatchError(msg)

    def compare(self, other: "Asset") -> int:
        """Return -1, 0 or 1 comparing amounts; symbols must match."""
        if not isinstance(other, Asset):
            raise AmountDomainError("Asset comparison requires Asset operands")
        self._check_symbol(other, "comparison of assets with different symbols is not allowed")
        return (self.amount > other.amount) - (self.amount < other.amount)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: "Asset") -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Asset") -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Asset") -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Asset") -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.amount, self.symbol))

    # ------------- arithmetic (integer domain) -------------

    def negate(self) -> "Asset":
        if self.amount == I64_MIN:
            raise SignedOverflowError("signed negation overflow")
        return Asset(-self.amount, self.symbol)

    def add(self, other: "Asset") -> "Asset":
        if not isinstance(other, Asset):
            raise AmountDomainError("Asset arithmetic requires Asset operands")
        self._check_symbol(other, "attempt to add asset with different symbol")
        amount = self.amount + other.amount
        if amount < -MAX_AMOUNT:
            raise InvariantViolation("addition underflow")
        if amount > MAX_AMOUNT:
            raise InvariantViolation("addition overflow")
        return Asset(amount, self.symbol)

    def subtract(self, other: "Asset") -> "Asset":
        if not isinstance(other, Asset):
            raise AmountDomainError("Asset arithmetic requires Asset operands")
        self._check_symbol(other, "attempt to subtract asset with different symbol")
        amount = self.amount - other.amount
        if amount < -MAX_AMOUNT:
            raise InvariantViolation("subtraction underflow")
        if amount > MAX_AMOUNT:
            raise InvariantViolation("subtraction overflow")
        return Asset(amount, self.symbol)

    def scale_by(self, k: int) -> "Asset":
        """Multiply by a 64-bit scalar; the exact product is range-checked before narrowing."""
        _require_i64(k, "scalar")
        product = self.amount * k
        _dbg(f"scale_by: {self.amount} * {k} = {product}")
        if product > MAX_AMOUNT:
            raise InvariantViolation("multiplication overflow")
        if product < -MAX_AMOUNT:
            raise InvariantViolation("multiplication underflow")
        return Asset(product, self.symbol)

    def divide_by(self, k: int) -> "Asset":
        """Divide by a 64-bit scalar, truncating toward zero."""
        _require_i64(k, "scalar")
        if k == 0:
            raise ZeroDivisionError("divide by zero")
        if self.amount == I64_MIN and k == -1:
            raise SignedOverflowError("signed division overflow")
        return Asset(_trunc_div(self.amount, k), self.symbol)

    def ratio_to(self, other: "Asset") -> int:
        """Integer ratio of the two amounts (truncated toward zero), not an Asset."""
        if not isinstance(other, Asset):
            raise AmountDomainError("Asset ratio requires Asset operands")
        if other.amount == 0:
            raise ZeroDivisionError("divide by zero")
        self._check_symbol(other, "attempt to divide assets with different symbol")
        if self.amount == I64_MIN and other.amount == -1:
            raise SignedOverflowError("signed division overflow")
        return _trunc_div(self.amount, other.amount)

    # ------------- operator sugar -------------

    def __neg__(self) -> "Asset":
        return self.negate()

    def __add__(self, other: "Asset") -> "Asset":
        return self.add(other)

    def __sub__(self, other: "Asset") -> "Asset":
        return self.subtract(other)

    def __mul__(self, k: int) -> "Asset":
        return self.scale_by(k)

    def __rmul__(self, k: int) -> "Asset":
        return self.scale_by(k)

    def __truediv__(self, other: Union["Asset", int]) -> Union["Asset", int]:
        if isinstance(other, Asset):
            return self.ratio_to(other)
        return self.divide_by(other)


__all__ = [
    "Asset",
]
