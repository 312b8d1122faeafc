"""Message board API client.

This module defines a small client wrapper around the message board's
HTTP API.  It uses the ``requests`` library internally and exposes one
method per operation:

* :meth:`MessageBoardAPI.post_message` – post a new message.
* :meth:`MessageBoardAPI.vote` – upvote or downvote a message.
* :meth:`MessageBoardAPI.list_messages` – list messages, optionally only
  those updated after a given time.

Every method returns a ``(data, error)`` tuple.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
The server reports errors as plain text, which becomes ``message``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Union

import requests


logger = logging.getLogger(__name__)


class MessageBoardAPI:
    """Client for interacting with the message board API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/messages``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        if response.status_code >= 400:
            message = response.text.strip() or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Message operations
    # ------------------------------------------------------------------
    def post_message(self, text: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Post a new message and return the created message."""
        return self._request("POST", "/api/message", json_body={"text": text})

    def vote(self, message_id: int, direction: str = "up") -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Vote on a message.

        Args:
            message_id: Identifier of the message.
            direction: ``"down"`` for a downvote; anything else upvotes.
        Returns:
            A tuple ``(message, error)`` with the updated message.
        """
        params: Dict[str, Any] = {"id": message_id}
        if direction == "down":
            params["direction"] = "down"
        return self._request("GET", "/api/vote", params=params)

    def list_messages(
        self, updated_after: Union[datetime, str, None] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """List messages.

        Args:
            updated_after: Optional RFC3339 string or aware ``datetime``.
                Naive datetimes are taken to be UTC.  When given, only
                messages updated strictly after it are returned.
        Returns:
            A tuple ``(messages, error)``.  ``messages`` is empty on
            failure.
        """
        params: Dict[str, Any] = {}
        if isinstance(updated_after, datetime):
            if updated_after.tzinfo is None:
                updated_after = updated_after.replace(tzinfo=timezone.utc)
            params["updated_after"] = updated_after.isoformat()
        elif updated_after:
            params["updated_after"] = updated_after
        data, error = self._request("GET", "/api/messages", params=params or None)
        if error:
            return [], error
        return data or [], None
