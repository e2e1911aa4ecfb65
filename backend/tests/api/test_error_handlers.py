"""Error Handlers — every failure mode renders an error Envelope."""

from fastapi import APIRouter

from echostore.config import Settings
from echostore.main import create_app


async def test_unknown_route_is_404_envelope(client):
    res = await client.get("/api/v2/nothing")
    assert res.status_code == 404
    body = res.json()
    assert body == {
        "message": "Not Found",
        "status": "error",
        "timestamp": body["timestamp"],
    }


async def test_wrong_method_is_405_with_allow_header(client):
    res = await client.put("/api/v1/data", json={"k": "v"})
    assert res.status_code == 405
    assert res.json()["status"] == "error"
    assert "GET" in res.headers["allow"]


async def test_unhandled_exception_becomes_500_envelope():
    from httpx import ASGITransport, AsyncClient

    app = create_app(Settings(_env_file=None))
    boom = APIRouter()

    @boom.get("/boom")
    async def explode():
        raise RuntimeError("secret internal detail")

    app.include_router(boom)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/boom")

    assert res.status_code == 500
    body = res.json()
    assert body["status"] == "error"
    assert body["message"] == "Internal server error"
    assert "secret" not in res.text


async def test_app_keeps_serving_after_a_failure():
    from httpx import ASGITransport, AsyncClient

    app = create_app(Settings(_env_file=None))

    @app.get("/boom")
    async def explode():
        raise ValueError("boom")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        assert (await c.get("/boom")).status_code == 500
        assert (await c.get("/health")).status_code == 200
