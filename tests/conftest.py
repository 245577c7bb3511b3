"""Pytest configuration for the repository-level test suite.

Adapter golden tests build requests from configuration, so every test starts
from defaults: ``GATEWAY_*`` variables are cleared and the config cache reset.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from provider_gateway.config import ENV_FIELD_MAP, reset_config_cache


@pytest.fixture(autouse=True)
def default_gateway_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for env_name in ENV_FIELD_MAP.values():
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.delenv("GATEWAY_CONFIG_FILE", raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
