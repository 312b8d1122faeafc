"""
Vote endpoint.

``GET /api/vote?id=<id>[&direction=down]`` adds one upvote, or one
downvote when ``direction`` is ``down``, to the message with the given
id.  Because each call carries a single vote rather than a new total,
concurrent voters never overwrite each other's votes.
"""

import re
from typing import Optional

from fastapi import APIRouter, Depends, Query

from message_board_api.app.api.deps import get_message_store
from message_board_api.app.core.exceptions import InvalidInput
from message_board_api.app.schemas.message import MessageRead, VoteDirection
from message_board_api.app.services.message_service import MessageStore

router = APIRouter()

MAX_MESSAGE_ID = 2**32 - 1

_DIGITS_RE = re.compile(r"[0-9]+")


def parse_message_id(value: Optional[str]) -> int:
    """Parse the ``id`` query parameter as an unsigned 32-bit integer."""
    if not value:
        raise InvalidInput("query parameter 'id' not found")
    if not _DIGITS_RE.fullmatch(value):
        raise InvalidInput(f"invalid message id: {value[:20]!r}")
    # Bound the length before int() so huge inputs are rejected cheaply.
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(MAX_MESSAGE_ID)) or int(digits) > MAX_MESSAGE_ID:
        raise InvalidInput(f"message id out of range: {value[:20]}")
    return int(digits)


@router.get("/vote", response_model=MessageRead)
async def vote(
    message_id: Optional[str] = Query(None, alias="id", description="Id of the message to vote on"),
    direction: Optional[str] = Query(None, description="'down' to downvote; anything else upvotes"),
    store: MessageStore = Depends(get_message_store),
) -> MessageRead:
    """Cast a vote and return the updated message.

    A missing or malformed id and an unknown id all return 400.
    """
    return store.vote(parse_message_id(message_id), VoteDirection.from_query(direction))
