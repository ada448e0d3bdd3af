# =============================================================================
# Shared fixtures
# =============================================================================
#
# Every test gets its own store and its own application instance, so no
# state leaks between tests.  The front end is served from a temporary
# directory.
# =============================================================================

import pytest
from fastapi.testclient import TestClient

from resource_store_api.app.core.config import Settings
from resource_store_api.app.main import create_app
from resource_store_api.app.services.store import ResourceStore


INDEX_HTML = "<!DOCTYPE html><title>store</title>"


@pytest.fixture
def store() -> ResourceStore:
    return ResourceStore.seeded()


@pytest.fixture
def frontend_dir(tmp_path):
    root = tmp_path / "frontend"
    root.mkdir()
    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "app.js").write_text("console.log('hi');", encoding="utf-8")
    return root


@pytest.fixture
def settings(frontend_dir) -> Settings:
    return Settings(frontend_dir=str(frontend_dir), cors_origins="*")


@pytest.fixture
def client(store, settings):
    with TestClient(create_app(store=store, settings=settings)) as test_client:
        yield test_client
