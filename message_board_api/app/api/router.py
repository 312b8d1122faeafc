"""
Top-level API router.

Aggregates the endpoint routers.  The application factory mounts it
under the ``/api`` prefix, giving ``/api/message``, ``/api/messages``
and ``/api/vote``.
"""

from fastapi import APIRouter

from .endpoints import messages, votes

router = APIRouter()

router.include_router(messages.router, tags=["messages"])
# Votes are cast with GET so that a vote can be tried from a browser's
# address bar.
router.include_router(votes.router, tags=["votes"])
