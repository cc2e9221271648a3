"""Root test configuration: isolate tests from BOARDMARK_* environment settings"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove BOARDMARK_* env vars so each test starts from defaults."""
    for name in list(os.environ):
        if name.startswith("BOARDMARK_"):
            monkeypatch.delenv(name)
