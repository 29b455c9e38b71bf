import ledger_asset
from ledger_asset import Asset, Symbol, MAX_AMOUNT, decode_asset, encode_asset


def test_top_level_exports():
    print("[api] top-level names resolve to core objects")
    assert MAX_AMOUNT == (1 << 62) - 1 == Asset.MAX_AMOUNT
    for name in ledger_asset.__all__:
        assert hasattr(ledger_asset, name), name


def test_scenario_decode_add_encode():
    print("[api-scenario] '1.5000 EOS' + '0.2500 EOS' -> '1.7500 EOS'")
    total = Asset.parse("1.5000 EOS") + Asset.parse("0.2500 EOS")
    assert str(total) == "1.7500 EOS"
    amount, symbol = decode_asset(str(total))
    assert (amount, symbol) == (17500, Symbol.parse("4,EOS"))
    assert encode_asset(amount, symbol) == "1.7500 EOS"
