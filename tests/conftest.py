from __future__ import annotations

import json
import os

import pytest

from phish_risk_engine.cli import run_once
from phish_risk_engine.config.settings import ENV_PREFIX, AppConfig


@pytest.fixture(autouse=True)
def clean_engine_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def run_cli_once():
    def _run(payload: dict[str, object], *, config: AppConfig | None = None) -> dict[str, object]:
        return json.loads(run_once(payload, config=config or AppConfig()))

    return _run


@pytest.fixture(autouse=True)
def reset_package_log_handlers():
    # Handlers bound to a previous test's captured stdout would be flushed after
    # capture closed it; start and end each test with a fresh package logger.
    import logging

    logger = logging.getLogger("phish_risk_engine")
    saved = list(logger.handlers)
    for handler in saved:
        logger.removeHandler(handler)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in saved:
        logger.addHandler(handler)
