"""Shared fixtures."""

import pytest

from yasumi.calculator import default_calculator
from yasumi.config import LANGUAGE_ENV_VAR


@pytest.fixture(autouse=True)
def japanese_default_calculator(monkeypatch):
    """Pin the module-level calculator to Japanese names, whatever the host config says."""
    monkeypatch.setenv(LANGUAGE_ENV_VAR, "ja")
    default_calculator.cache_clear()
    yield
    default_calculator.cache_clear()
