import pytest

from ledger_asset.core.symbol import Symbol, SymbolCode
from ledger_asset.core.exc import InvalidSymbolCode, InvariantViolation


def test_symbol_code_packs_first_letter_in_low_byte():
    print("[symcode-pack] 'SYM' -> S | Y<<8 | M<<16")
    code = SymbolCode.parse("SYM")
    print("raw ->", hex(code.raw()))
    assert code.raw() == ord("S") | (ord("Y") << 8) | (ord("M") << 16)
    assert str(code) == "SYM"
    assert code.is_valid()


@pytest.mark.parametrize("text", ["", "LONGSYMBOL", "sym", "S1M", "\\u0005", "SY M"])
def test_symbol_code_parse_rejects(text):
    print(f"[symcode-reject] {text!r} -> expect InvalidSymbolCode carrying the input")
    with pytest.raises(InvalidSymbolCode) as ei:
        SymbolCode.parse(text)
    assert ei.value.text == text


def test_symbol_code_validity_of_raw_values():
    print("[symcode-valid] empty code invalid; gap between letters invalid")
    assert not SymbolCode().is_valid()
    assert not SymbolCode(ord("A") | (ord("B") << 16)).is_valid()
    assert SymbolCode.parse("SYMBOLL").is_valid()


def test_symbol_parse_and_str():
    print("[symbol-parse] '4,SYM' -> precision 4, code SYM")
    s = Symbol.parse("4,SYM")
    assert s.precision == 4
    assert str(s.code) == "SYM"
    assert str(s) == "4,SYM"
    assert s.raw() == (SymbolCode.parse("SYM").raw() << 8) | 4
    assert s.is_valid()


def test_symbol_equality_covers_code_and_precision():
    print("[symbol-eq] 4,SYM == 4,SYM; != 5,SYM; != 4,TST")
    assert Symbol.parse("4,SYM") == Symbol.from_precision(SymbolCode.parse("SYM"), 4)
    assert Symbol.parse("4,SYM") != Symbol.parse("5,SYM")
    assert Symbol.parse("4,SYM") != Symbol.parse("4,TST")


def test_symbol_large_precision_accepted():
    print("[symbol-precision] 69,JIAYOUY is a legal symbol")
    assert Symbol.parse("69,JIAYOUY").precision == 69


@pytest.mark.parametrize("text", ["SYM", "4", "-1,SYM", "256,SYM", "4,SYM,X", "a,SYM"])
def test_symbol_parse_rejects(text):
    print(f"[symbol-reject] {text!r} -> expect InvalidSymbolCode")
    with pytest.raises(InvalidSymbolCode):
        Symbol.parse(text)


def test_symbol_default_is_empty_and_invalid():
    print("[symbol-default] Symbol() -> raw 0, invalid")
    assert Symbol().raw() == 0
    assert not Symbol().is_valid()


def test_symbol_precision_out_of_range_raises():
    with pytest.raises(InvariantViolation):
        Symbol(SymbolCode.parse("SYM"), 256)
