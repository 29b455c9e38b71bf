"""Walk-through of the asset value type: decode, arithmetic, encode.

Scenarios covered:
S1) Decode canonical text and show the inferred precision
S2) Add / subtract / scale / divide within one symbol
S3) Fatal tier: symbol mismatch and overflow
S4) Recoverable tier: malformed text
"""
from __future__ import annotations

import argparse
import sys
from typing import List

from ledger_asset.core import (
    Asset,
    ParseError,
    InvariantViolation,
    MAX_AMOUNT,
    fmt_asset,
)


def describe(label: str, a: Asset) -> None:
    print(f"- {label}: {a}  (amount={a.amount}, precision={a.symbol.precision}, "
          f"valid={a.is_valid()}, sci={fmt_asset(a, places=6)})")


def run_scenarios(texts: List[str], scalar: int) -> int:
    print("\n=== S1: decode ===")
    assets: List[Asset] = []
    for t in texts:
        try:
            a = Asset.parse(t)
        except ParseError as e:
            print(f"- {t!r}: rejected ({type(e).__name__}: {e})")
            continue
        describe(repr(t), a)
        assets.append(a)

    if len(assets) >= 2:
        a, b = assets[0], assets[1]
        print("\n=== S2: arithmetic ===")
        try:
            describe("a + b", a + b)
            describe("a - b", a - b)
            describe(f"a * {scalar}", a * scalar)
            describe(f"a / {scalar}", a / scalar)
            print(f"- a / b: {a / b}")
        except InvariantViolation as e:
            print(f"- fatal: {type(e).__name__}: {e}")
        except ZeroDivisionError as e:
            print(f"- fatal: ZeroDivisionError: {e}")

    print("\n=== S3: fatal tier ===")
    top = Asset.parse("1.0000 SYM").set_amount(MAX_AMOUNT)
    for title, fn in [
        ("MAX + 1", lambda: top + Asset.parse("0.0001 SYM")),
        ("4,SYM + 2,SYM", lambda: Asset.parse("1.0000 SYM") + Asset.parse("1.00 SYM")),
    ]:
        try:
            fn()
        except InvariantViolation as e:
            print(f"- {title}: {type(e).__name__}: {e}")

    print("\n=== S4: recoverable tier ===")
    for t in ("10000", "1s EOS", "10000 LONGSYMBOL"):
        try:
            Asset.parse(t)
        except ParseError as e:
            print(f"- {t!r}: {type(e).__name__}: {e}")
    return 0


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Asset value type demo")
    ap.add_argument("assets", nargs="*", default=["123.4500 SYM", "-0.0500 SYM"],
                    help="asset strings such as '1.0000 SYM'")
    ap.add_argument("--scalar", type=int, default=3, help="scalar for multiply/divide")
    args = ap.parse_args(argv)
    return run_scenarios(args.assets, args.scalar)


if __name__ == "__main__":
    sys.exit(main())
