from __future__ import annotations

import pytest

from leadfunnel.main import app as module_app
from leadfunnel.main.app import create_app


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    assert app.title == "Lead Funnel Orchestrator"

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is not None

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_routes_are_registered() -> None:
    app = create_app()
    paths = set(app.openapi()["paths"])

    assert {"/api/analyze", "/api/health", "/api/info"} <= paths
