"""Pytest configuration and shared fixtures for the htom test suite.

This module provides shared fixtures, Hypothesis profiles and the custom
markers used across the test suite.
"""

import logging
import os
from typing import Generator

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from htom import ClassStyle, IdStyle, MaudConfig, Render

# The autouse HTOM_* isolation fixture is function-scoped
SHARED_FIXTURES = [HealthCheck.function_scoped_fixture]

settings.register_profile(
    "ci", max_examples=100, verbosity=Verbosity.verbose, deadline=None, suppress_health_check=SHARED_FIXTURES
)
settings.register_profile("dev", max_examples=25, deadline=None, suppress_health_check=SHARED_FIXTURES)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate],
    suppress_health_check=SHARED_FIXTURES,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def default_config() -> MaudConfig:
    """Provide the default configuration (auto render, full id and class)."""
    return MaudConfig()


@pytest.fixture
def shorthand_config() -> MaudConfig:
    """Provide a body-only configuration with implicit-div shorthand styles."""
    return MaudConfig(
        render=Render.ONLY_BODY,
        id_style=IdStyle.SHORT_NO_DIV,
        class_style=ClassStyle.SHORT_NO_DIV,
    )


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.captureWarnings(False)


@pytest.fixture(autouse=True)
def _isolate_htom_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep HTOM_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("HTOM_"):
            monkeypatch.delenv(key, raising=False)
