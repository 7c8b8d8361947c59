from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Allow `pytest` to import the package directly from the src layout
# without requiring an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from binomial_decomposition.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def in_process_oracle(monkeypatch):
    """Run every test against the in-process lattice oracle, whatever is installed."""
    monkeypatch.setenv("BINOMIAL_MARKOV_BACKEND", "saturation")
    monkeypatch.delenv("BINOMIAL_GROEBNER_METHOD", raising=False)
    monkeypatch.delenv("BINOMIAL_ORACLE_TIMEOUT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
