"""Shared fixtures: isolate settings cache and logging configuration per test."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from optval.config.settings import load_settings


@pytest.fixture(autouse=True)
def _isolate_config_and_logging() -> Iterator[None]:
    load_settings.cache_clear()
    root = logging.getLogger()
    level = root.level
    yield
    load_settings.cache_clear()
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
