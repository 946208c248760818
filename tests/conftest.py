"""
Global test configuration with support for different test types.
"""

import os

import pytest

from crystal_design.config import resolve_config
from crystal_design.config.types import FrozenConfig


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_crystal_env(request, monkeypatch):
    """Ensure a clean CRYSTAL_DESIGN_* environment for each test.

    Escape hatches:
      - @pytest.mark.allow_env_pollution: keep current env unchanged
      - tests marked with @pytest.mark.api bypass isolation so the real
        environment can be used when explicitly running API tests.
    """
    if request.node.get_closest_marker("allow_env_pollution") or (
        "api" in request.node.keywords
    ):
        return

    for key in list(os.environ.keys()):
        if key.startswith("CRYSTAL_DESIGN_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def frozen_config() -> FrozenConfig:
    """Offline configuration resolved from defaults only."""
    return resolve_config().to_frozen()


@pytest.fixture
def telemetry_on(monkeypatch):
    """Enable telemetry for the duration of one test."""
    monkeypatch.setenv("CRYSTAL_DESIGN_TELEMETRY", "1")


# --- Test Configuration ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Component integration tests with scripted clients",
        "contract: Behavioral invariants of the pipeline",
        "api: Real API integration tests (requires network access)",
        "allow_env_pollution: Keep CRYSTAL_DESIGN_* variables for this test",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):  # noqa: ARG001
    """Skip API tests unless explicitly enabled."""
    if not os.getenv("ENABLE_API_TESTS"):
        skip_api = pytest.mark.skip(reason="API tests require ENABLE_API_TESTS=1")
        for item in items:
            if "api" in item.keywords:
                item.add_marker(skip_api)
