"""Unified configuration layer for the gateway.

Goals
-----
* Centralize tunables (token budget, temperature, provider wire constants).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional external config file (JSON or YAML) pointed to by
       ``GATEWAY_CONFIG_FILE``
    3. Environment variables (``GATEWAY_MAX_TOKENS`` and friends)
    4. In-code overrides passed to :func:`get_gateway_config`
* Provide a single call site: ``get_gateway_config()``.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML::

    max_tokens: 2048
    temperature: 0.2
    hf_router_url: https://router.huggingface.co/v1

Invalid values for numeric fields are ignored and the previous layer wins.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    ANTHROPIC_VERSION,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    ERROR_SNIPPET_CHARS,
    HF_ROUTER_URL,
    STEALTH_SYSTEM_PREFIX,
)

CONFIG_FILE_ENV = "GATEWAY_CONFIG_FILE"


@dataclass(frozen=True)
class GatewayConfig:
    """Resolved gateway settings.

    Attributes:
        max_tokens: Completion budget sent to every provider.
        temperature: Sampling temperature (omitted for ``o1-`` models).
        anthropic_version: Value of the ``anthropic-version`` header.
        hf_router_url: Base URL of the HuggingFace OpenAI-compatible router.
        error_snippet_chars: Body characters surfaced in error messages.
        http_timeout_seconds: Transport timeout; ``None`` keeps the HTTP
            client's own default.
        stealth_prefix: Instruction prepended to the system prompt in stealth mode.
    """

    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    anthropic_version: str = ANTHROPIC_VERSION
    hf_router_url: str = HF_ROUTER_URL
    error_snippet_chars: int = ERROR_SNIPPET_CHARS
    http_timeout_seconds: Optional[float] = None
    stealth_prefix: str = STEALTH_SYSTEM_PREFIX


ENV_FIELD_MAP = {
    "max_tokens": "GATEWAY_MAX_TOKENS",
    "temperature": "GATEWAY_TEMPERATURE",
    "anthropic_version": "GATEWAY_ANTHROPIC_VERSION",
    "hf_router_url": "GATEWAY_HF_ROUTER_URL",
    "error_snippet_chars": "GATEWAY_ERROR_SNIPPET_CHARS",
    "http_timeout_seconds": "GATEWAY_HTTP_TIMEOUT_SECONDS",
    "stealth_prefix": "GATEWAY_STEALTH_PREFIX",
}

_COERCERS = {
    "max_tokens": int,
    "temperature": float,
    "error_snippet_chars": int,
    "http_timeout_seconds": float,
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables are never overwritten. Safe to call repeatedly.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    try:
        if not os.path.isfile(path):
            return
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and k not in os.environ:
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    data: Any = {}
    if path and Path(path).is_file():
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError:
                data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field_name, env_name in ENV_FIELD_MAP.items():
        val = os.getenv(env_name)
        if val is not None and val.strip():
            out[field_name] = val
    return out


def _coerce(field_name: str, value: Any) -> Any:
    """Coerce a raw value for ``field_name``; raise ``ValueError`` when invalid."""
    fn = _COERCERS.get(field_name)
    if fn is None:
        return str(value)
    coerced = fn(value)
    if coerced < 0:
        raise ValueError(f"{field_name} must be non-negative")
    return coerced


def _apply(cfg: GatewayConfig, layer: Dict[str, Any]) -> GatewayConfig:
    known = {f.name for f in fields(GatewayConfig)}
    changes: Dict[str, Any] = {}
    for k, v in layer.items():
        if k not in known or v is None:
            continue
        try:
            changes[k] = _coerce(k, v)
        except (TypeError, ValueError):
            continue
    return replace(cfg, **changes) if changes else cfg


def get_gateway_config(overrides: Optional[Dict[str, Any]] = None) -> GatewayConfig:
    """Return merged gateway configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    """
    _load_dotenv_once()
    cfg = GatewayConfig()
    cfg = _apply(cfg, _load_external_config())
    cfg = _apply(cfg, _env_overrides())
    if overrides:
        cfg = _apply(cfg, overrides)
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file contents and the .env load marker."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "GatewayConfig",
    "get_gateway_config",
    "reset_config_cache",
    "ENV_FIELD_MAP",
]
