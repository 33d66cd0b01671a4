"""Root test configuration: isolate tests from NETRAL_* environment settings"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_netral_env(monkeypatch):
    """Remove NETRAL_* env vars so a developer's shell cannot leak into settings."""
    for name in list(os.environ):
        if name.startswith("NETRAL_"):
            monkeypatch.delenv(name)
