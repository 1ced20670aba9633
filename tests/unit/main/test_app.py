from __future__ import annotations

import pytest
from dependency_injector import providers

from labs.main import app as module_app
from labs.main.app import create_app
from labs.main.container import get_container


class _StubMongoDatabase:
    async def create_indexes(self) -> None:
        pass

    def close(self) -> None:
        pass


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    get_container().mongo_database.override(providers.Object(_StubMongoDatabase()))
    assert app.title

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is get_container()

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_create_app_registers_api_routes() -> None:
    paths = {route.path for route in create_app().routes}

    assert "/health" in paths
    assert "/api/auth/signup" in paths
    assert "/api/auth/signin" in paths
