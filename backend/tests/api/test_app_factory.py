"""App Factory — isolation between apps and release-mode surface."""

from echostore.config import Settings
from echostore.core.record_store import RecordStore
from echostore.main import create_app


def test_each_app_owns_its_store():
    a = create_app(Settings(_env_file=None))
    b = create_app(Settings(_env_file=None))
    assert a.state.store is not b.state.store


def test_injected_store_is_used_even_when_empty():
    store = RecordStore()
    app = create_app(Settings(_env_file=None), store=store)
    assert app.state.store is store


async def test_release_mode_hides_docs(client_factory):
    async with client_factory(Settings(_env_file=None, release_mode=True)) as c:
        assert (await c.get("/docs")).status_code == 404
        assert (await c.get("/openapi.json")).status_code == 404


async def test_development_mode_documents_versioned_routes_once(client):
    schema = (await client.get("/openapi.json")).json()
    assert "/api/v1/data" in schema["paths"]
    assert "/data" not in schema["paths"]


async def test_root_only_deployment(client_factory):
    async with client_factory(Settings(_env_file=None, api_prefixes=[""])) as c:
        assert (await c.get("/data")).status_code == 200
        assert (await c.get("/api/v1/data")).status_code == 404
        endpoints = (await c.get("/")).json()["data"]["endpoints"]
    assert "GET /health - Health check" in endpoints
