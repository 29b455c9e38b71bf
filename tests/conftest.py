from __future__ import annotations

import pytest

from ledger_asset.core import Symbol


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def sym4() -> Symbol:
    return Symbol.parse("4,SYM")


@pytest.fixture()
def sym5() -> Symbol:
    """Same code as sym4, different precision."""
    return Symbol.parse("5,SYM")


@pytest.fixture()
def tst4() -> Symbol:
    """Same precision as sym4, different code."""
    return Symbol.parse("4,TST")
