"""
Service layer for board messages.

``MessageStore`` keeps every message in process memory, in insertion
order, together with the counter used to assign ids.  A single lock
guards both, so creating, voting and listing may be called from any
number of request handlers at once without losing updates or reusing
ids.  Nothing is persisted; the board starts empty on every run.

Callers always receive ``MessageRead`` copies.  The stored records are
never handed out, so a returned message is a snapshot that later votes
do not change.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from message_board_api.app.core.clock import utcnow
from message_board_api.app.core.exceptions import InvalidInput, NotFound
from message_board_api.app.schemas.message import MessageRead, VoteDirection

logger = logging.getLogger(__name__)


@dataclass
class MessageRecord:
    """Mutable stored form of a message."""

    id: int
    text: str
    upvotes: int
    last_updated: datetime

    def to_read(self) -> MessageRead:
        return MessageRead(
            id=self.id,
            text=self.text,
            upvotes=self.upvotes,
            last_updated=self.last_updated,
        )


class MessageStore:
    """Thread-safe in-memory message collection.

    Parameters
    ----------
    clock : Optional[Callable[[], datetime]]
        Returns the current time as an aware datetime.  Defaults to
        ``utcnow``; tests pass a fake to control timestamps.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or utcnow
        self._lock = threading.Lock()
        self._messages: List[MessageRecord] = []
        # Id 0 is never assigned so that clients can tell an absent id
        # from a real one.
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def create(self, text: str) -> MessageRead:
        """Store a new message and return it.

        Raises ``InvalidInput`` if ``text`` is empty; in that case no id
        is consumed.
        """
        if not text:
            raise InvalidInput("missing 'text' field")
        with self._lock:
            record = MessageRecord(
                id=self._next_id,
                text=text,
                upvotes=0,
                last_updated=self._now(),
            )
            self._next_id += 1
            self._messages.append(record)
            created = record.to_read()
        logger.info("Created message %s", created.id)
        return created

    def vote(self, message_id: int, direction: VoteDirection = VoteDirection.UP) -> MessageRead:
        """Apply one vote to a message and return the updated message.

        The lookup and the update happen under the same lock, so
        concurrent votes on one message are never lost.  Raises
        ``NotFound`` if no message has ``message_id``.
        """
        with self._lock:
            record = self._find(message_id)
            record.upvotes += direction.delta
            # Never move the timestamp backwards, even if the wall clock
            # does.
            record.last_updated = max(self._now(), record.last_updated)
            updated = record.to_read()
        logger.debug("Message %s voted %s, now %s", message_id, direction.value, updated.upvotes)
        return updated

    def get(self, message_id: int) -> MessageRead:
        """Return a single message.  Raises ``NotFound`` if absent."""
        with self._lock:
            return self._find(message_id).to_read()

    def list_all(self) -> List[MessageRead]:
        """Return a snapshot of every message in insertion order."""
        with self._lock:
            return [record.to_read() for record in self._messages]

    def list_since(self, timestamp: datetime) -> List[MessageRead]:
        """Return messages updated strictly after ``timestamp``.

        Messages whose ``last_updated`` equals ``timestamp`` are left
        out so that a poller passing back the newest timestamp it has
        seen does not receive the same message twice.  ``timestamp``
        must be timezone-aware.
        """
        if timestamp.tzinfo is None or timestamp.utcoffset() is None:
            raise InvalidInput("timestamp must include a timezone offset")
        with self._lock:
            return [record.to_read() for record in self._messages if record.last_updated > timestamp]

    def _now(self) -> datetime:
        # Milliseconds, the precision of a JS Date.
        now = self._clock()
        return now.replace(microsecond=now.microsecond // 1000 * 1000)

    def _find(self, message_id: int) -> MessageRecord:
        # Caller must hold ``self._lock``.  Ids are assigned in order, so
        # a linear scan is fine at this scale.
        for record in self._messages:
            if record.id == message_id:
                return record
        raise NotFound(f"message {message_id} not found")
