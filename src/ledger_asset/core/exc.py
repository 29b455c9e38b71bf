"""
Core exception types for ledger_asset.core.

These are dependency-free and may be imported by all core modules.

Two tiers are kept apart on purpose:

- ``ParseError`` and its subclasses report malformed text. They are ordinary
  data-validation outcomes and callers are expected to catch them.
- ``InvariantViolation`` and its subclasses (plus ``ZeroDivisionError`` for
  division by zero) report a programming error such as mixing symbols or
  overflowing the amount range. They are not meant to be caught and retried.
"""

__all__ = [
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


# ---------------------------------------------------------------------------
# Recoverable: decoding text
# ---------------------------------------------------------------------------

class ParseError(ValueError):
    """Base class for text decoding failures.

    Two parse errors are equal when they have the same kind and payload, so
    tests and callers can compare them directly.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.args))


class BadFormat(ParseError):
    """Raised when the text is not exactly ``<numeric> <symbol>``."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "bad asset format, expected '<amount> <SYMBOL>'"


class BadAmount(ParseError):
    """Raised when the numeric token is not a signed 64-bit integer once the dot is removed."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"bad asset amount: {self.text!r}"


class BadSymbolCode(ParseError):
    """Raised when the symbol token is not a valid symbol code."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"bad symbol code: {self.text!r}"


class InvalidSymbolCode(ParseError):
    """Raised by the symbol collaborator for an invalid code or ``precision,CODE`` string."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"invalid symbol: {self.text!r}"


# ---------------------------------------------------------------------------
# Fatal: invariant breaches
# ---------------------------------------------------------------------------

class AmountDomainError(Exception):
    """Raised when an amount or scalar is not a signed 64-bit integer."""
    pass


class InvariantViolation(Exception):
    """Raised when arithmetic or guards would break core invariants."""
    pass


class SymbolMismatchError(InvariantViolation):
    """Raised when two assets with different symbols are compared or combined."""
    pass


class SignedOverflowError(InvariantViolation):
    """Raised when a division or negation would overflow the signed 64-bit range."""
    pass
