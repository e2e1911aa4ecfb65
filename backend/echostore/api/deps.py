"""Request Dependencies — per-app store/settings lookup and body parsing.

Invariants:
    - Handlers reach the store only through get_store (app.state.store)
    - read_record_payload accepts strict JSON objects only (no NaN/Infinity,
      no nesting deep enough to exhaust the stack); everything else raises
      InvalidPayloadError before the handler runs
"""

import json

from fastapi import Request

from echostore.config import Settings
from echostore.core.domain_types import Record
from echostore.core.errors import InvalidPayloadError
from echostore.core.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def _reject_constant(token: str):
    raise InvalidPayloadError(f"non-standard JSON constant {token}")


async def read_record_payload(request: Request) -> Record:
    """Parse the raw body as a JSON object."""
    body = await request.body()
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise InvalidPayloadError(f"malformed JSON: {e}")
    if not isinstance(payload, dict):
        raise InvalidPayloadError(
            f"expected JSON object, got {type(payload).__name__}",
        )
    return payload
