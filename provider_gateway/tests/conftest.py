"""Pytest configuration for the gateway test suite.

Every test runs with a clean configuration: ``GATEWAY_*`` variables are
removed, ``.env`` loading points at a file that does not exist, and the
config cache is reset on both sides of the test.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from provider_gateway.base.logging import BASE_LOGGER_NAME, get_logger
from provider_gateway.config import ENV_FIELD_MAP, reset_config_cache
from provider_gateway.tests.utils import ListHandler


@pytest.fixture(autouse=True)
def clean_gateway_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Isolate tests from the developer's environment and config files."""
    for env_name in ENV_FIELD_MAP.values():
        monkeypatch.delenv(env_name, raising=False)
    for env_name in ("GATEWAY_CONFIG_FILE", "GATEWAY_API_KEY", "GATEWAY_LOG_LEVEL"):
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def log_records() -> Iterator[ListHandler]:
    """Attach a collecting handler to the shared ``gateway`` logger."""
    logger = get_logger(BASE_LOGGER_NAME)
    handler = ListHandler()
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
