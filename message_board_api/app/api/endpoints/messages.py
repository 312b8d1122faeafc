"""
Message endpoints.

``POST /api/message`` posts a new message and ``GET /api/messages``
lists the board, optionally only the messages changed after a given
time.  Clients poll the latter with the newest timestamp they have seen
to pick up new posts and vote changes.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import ValidationError

from message_board_api.app.api.deps import get_message_store
from message_board_api.app.core.clock import parse_rfc3339
from message_board_api.app.core.exceptions import InvalidInput, describe_validation_error
from message_board_api.app.schemas.message import MessageCreate, MessageRead
from message_board_api.app.services.message_service import MessageStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/message",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": MessageCreate.model_json_schema()}},
            "required": True,
        }
    },
)
async def create_message(request: Request, store: MessageStore = Depends(get_message_store)) -> MessageRead:
    """Post a new message.

    The body is decoded as JSON whatever its ``Content-Type`` says; the
    bundled browser client sends JSON text with jQuery's default form
    content type.  A malformed body or an empty ``text`` yields 400.
    """
    raw = await request.body()
    try:
        payload = MessageCreate.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidInput(describe_validation_error(e)) from e
    return store.create(payload.text)


@router.get("/messages", response_model=List[MessageRead])
async def list_messages(
    updated_after: Optional[str] = Query(
        None,
        description="RFC3339 timestamp; only messages updated strictly after it are returned",
        examples=["2025-09-01T10:00:00Z"],
    ),
    store: MessageStore = Depends(get_message_store),
) -> List[MessageRead]:
    """Return all messages in posting order, or only the recently updated ones."""
    if not updated_after:
        return store.list_all()
    timestamp = parse_rfc3339(updated_after)
    messages = store.list_since(timestamp)
    logger.debug("%d message(s) updated after %s", len(messages), timestamp.isoformat())
    return messages
