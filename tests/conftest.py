"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "cli: marks tests that drive the command-line entry point"
    )


@pytest.fixture(autouse=True)
def isolate_config_env(monkeypatch):
    """
    Keep the developer's environment out of config loading.

    CAREER_CRUSH_CONFIG and LOG_LEVEL would otherwise leak into every
    load_config() call made by the tests.
    """
    monkeypatch.delenv("CAREER_CRUSH_CONFIG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
