"""
Error types shared by the message store and the HTTP layer.

Every failure the board can report is caused by the caller's input, so
there are only two kinds: ``InvalidInput`` for malformed or missing
values and ``NotFound`` for votes on an unknown message.  Both are
reported to HTTP clients as ``400 Bad Request`` with a plain-text body;
unknown ids deliberately do not map to 404.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class MessageBoardError(ValueError):
    """Base class for caller errors raised by the message board."""


class InvalidInput(MessageBoardError):
    """A required value is missing, empty or cannot be parsed."""


class NotFound(MessageBoardError):
    """No message exists with the requested id."""


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ``ValidationError`` into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request body"


async def message_board_error_handler(request: Request, exc: MessageBoardError) -> PlainTextResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the board's error handlers to ``app``."""
    app.add_exception_handler(MessageBoardError, message_board_error_handler)
