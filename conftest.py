"""
Root conftest.py — registers custom markers.

Markers:
  @pytest.mark.realtime — runs against a real asyncio event loop and wall-clock
                          timers; skipped with --skip-realtime or SKIP_REALTIME_TESTS=1
"""
from __future__ import annotations

import logging
import os

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "realtime: mark test as depending on real event-loop timing (skip with --skip-realtime)",
    )
    logging.getLogger("emoji_suggestion").setLevel(logging.DEBUG)


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--skip-realtime",
        action="store_true",
        default=False,
        help="Skip tests marked with @pytest.mark.realtime",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.realtime tests when asked to (e.g. on slow CI runners)."""
    skip = config.getoption("--skip-realtime") or os.environ.get("SKIP_REALTIME_TESTS", "").lower() in ("1", "true", "yes")
    if not skip:
        return
    skip_realtime = pytest.mark.skip(reason="Real-time test — disabled by --skip-realtime or SKIP_REALTIME_TESTS")
    for item in items:
        if "realtime" in item.keywords:
            item.add_marker(skip_realtime)
