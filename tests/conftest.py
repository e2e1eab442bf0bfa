"""Shared pytest fixtures."""

import pytest

from jsonresume_md.contexts.rendering.config import LOCALE_ENV_VAR


@pytest.fixture(autouse=True)
def default_locale(monkeypatch):
    """Run every test with the locale variable unset unless a test sets it."""
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
