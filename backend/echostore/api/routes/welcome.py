"""Welcome & Echo — discoverability and echo endpoints.

Invariants:
    - The endpoint list is static text built from the versioned prefix
    - Echo returns the path segment as received, with its character length
"""

from fastapi import APIRouter, Depends

from echostore.api.deps import get_app_settings
from echostore.config import Settings
from echostore.schemas.envelope import Envelope

router = APIRouter(tags=["welcome"])

ENDPOINTS = (
    ("GET", "/health", "Health check"),
    ("GET", "/", "Welcome message"),
    ("GET", "/echo/:message", "Echo a message"),
    ("POST", "/data", "Create data"),
    ("GET", "/data", "Get all data"),
)


def describe_endpoints(prefix: str, readiness: bool = False) -> list[str]:
    lines = [f"{method} {prefix}{path} - {summary}" for method, path, summary in ENDPOINTS]
    if readiness:
        lines.insert(1, f"GET {prefix}/ready - Readiness check")
    return lines


@router.get("/")
async def welcome(settings: Settings = Depends(get_app_settings)):
    """List the available endpoints."""
    return Envelope.success(
        "Welcome to the API!",
        {
            "endpoints": describe_endpoints(
                settings.versioned_prefix, settings.enable_readiness,
            ),
        },
    ).render()


@router.get("/echo/{message}")
async def echo_message(message: str):
    return Envelope.success(
        "Message echoed successfully",
        {"echo": message, "length": len(message)},
    ).render()
