"""
Server Entry Point - Main Layer

Serves the FastAPI application with uvicorn using the configured host
and port.
"""

import uvicorn

from leadfunnel.main.config import get_settings


def main() -> None:
    settings = get_settings()

    uvicorn.run(
        "leadfunnel.main.app:app",
        host=settings.app.host,
        port=settings.app.port,
        reload=settings.app.reload,
        log_config=None,
    )
