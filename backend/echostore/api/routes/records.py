"""Records — create and list operations over the in-memory record store.

Invariants:
    - POST /data stores the parsed JSON object unchanged and echoes it back
    - GET /data returns the whole store (no pagination, no filtering)
    - Malformed bodies never reach the store (read_record_payload raises first)

Design Decisions:
    - Store injected via Depends(get_store): one store per app instance, shared
      by every prefix the router is mounted under
"""

import logging

from fastapi import APIRouter, Depends, status

from echostore.api.deps import get_store, read_record_payload
from echostore.core.domain_types import Record
from echostore.core.record_store import RecordStore
from echostore.schemas.envelope import Envelope

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/data", tags=["records"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_data(
    payload: Record = Depends(read_record_payload),
    store: RecordStore = Depends(get_store),
):
    """Store a JSON object under a generated identifier."""
    record_id, data = store.create(payload)
    logger.info("Record created", extra={"record_id": record_id})
    return Envelope.success(
        "Data created successfully", {"id": record_id, "data": data},
    ).render()


@router.get("")
async def get_data(store: RecordStore = Depends(get_store)):
    """Return every stored record keyed by identifier."""
    return Envelope.success(
        "Data retrieved successfully", store.snapshot(),
    ).render()
