"""
Shared fixtures for configuration tests.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from UNACY_* variables, including ones loaded from .env files."""
    for key in list(os.environ):
        if key.startswith("UNACY_"):
            monkeypatch.delenv(key)
    yield
    for key in list(os.environ):
        if key.startswith("UNACY_"):
            os.environ.pop(key)
