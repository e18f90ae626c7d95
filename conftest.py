"""
Root conftest.py — registers custom markers.

Markers:
  @pytest.mark.timing — really sleeps through animations; skipped unless TIMING_TESTS=1
"""
from __future__ import annotations

import os

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "timing: mark test as sleeping in real time (run with TIMING_TESTS=1 or --timing flag)",
    )


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--timing",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.timing (slow, real delays)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.timing tests unless --timing flag or TIMING_TESTS=1 is set."""
    run_timing = config.getoption("--timing") or os.environ.get("TIMING_TESTS", "").lower() in ("1", "true", "yes")
    skip_timing = pytest.mark.skip(reason="Real-time animation test — run with --timing or TIMING_TESTS=1")
    for item in items:
        if "timing" in item.keywords and not run_timing:
            item.add_marker(skip_timing)
