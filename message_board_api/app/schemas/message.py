"""
Pydantic schemas for board messages.

A message carries its identifier, the posted text, the net vote count
(``upvotes``, which goes negative after enough downvotes) and the time
of its last change.  ``MessageCreate`` is the body accepted by
``POST /api/message``; ``MessageRead`` is what every endpoint returns.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> int:
        return -1 if self is VoteDirection.DOWN else 1

    @classmethod
    def from_query(cls, value: str | None) -> "VoteDirection":
        """Only ``down`` casts a downvote; anything else is an upvote."""
        return cls.DOWN if value == cls.DOWN.value else cls.UP


class MessageCreate(BaseModel):
    """Schema for posting a new message."""

    text: str = Field(..., description="Message text", examples=["hello"])

    @field_validator("text")
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("missing 'text' field")
        return v


class MessageRead(BaseModel):
    """Schema for reading a message from the API."""

    id: int = Field(..., ge=1, examples=[1])
    text: str = Field(..., examples=["hello"])
    upvotes: int = Field(0, examples=[3])
    last_updated: datetime = Field(..., examples=["2025-09-01T10:00:00Z"])
