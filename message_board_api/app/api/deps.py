"""
FastAPI dependencies shared by the endpoint modules.

The message store lives on ``app.state`` and is created by
``create_app``.  Handlers receive it through ``Depends`` instead of
importing a module-level global, so each application instance (and
each test) gets its own board.
"""

from fastapi import Request

from message_board_api.app.services.message_service import MessageStore


def get_message_store(request: Request) -> MessageStore:
    """Return the store attached to the running application."""
    return request.app.state.message_store
