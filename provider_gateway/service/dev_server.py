from __future__ import annotations

import os
import uvicorn

from provider_gateway.config.defaults import SERVICE_DEFAULT_HOST, SERVICE_DEFAULT_PORT


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to ``default``."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def main(host: str | None = None, port: int | None = None, reload: bool | None = None) -> None:
    """Start the development server for the gateway FastAPI app.

    Explicit arguments win; otherwise the environment decides:

    - GATEWAY_SERVICE_HOST: interface to bind (default "127.0.0.1")
    - GATEWAY_SERVICE_PORT: port to bind (default 8091)
    - GATEWAY_SERVICE_RELOAD: "true"/"false" to toggle auto-reload (default False)
    """
    if host is None:
        host = os.getenv("GATEWAY_SERVICE_HOST", SERVICE_DEFAULT_HOST)
    if port is None:
        port = _parse_port(os.getenv("GATEWAY_SERVICE_PORT"), SERVICE_DEFAULT_PORT)
    if reload is None:
        reload = (os.getenv("GATEWAY_SERVICE_RELOAD") or "").lower() == "true"

    uvicorn.run(
        "provider_gateway.service.app:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
