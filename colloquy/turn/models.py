"""Activity model for inbound and outbound turn data."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class ActivityType(str, Enum):
    """Kind of activity exchanged on a turn."""

    MESSAGE = "message"
    EVENT = "event"
    CONVERSATION_UPDATE = "conversationUpdate"
    END_OF_CONVERSATION = "endOfConversation"


class Activity(BaseModel):
    """A single inbound or outbound unit of conversation."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    type: ActivityType = Field(default=ActivityType.MESSAGE, description="Activity kind")
    conversation_id: str = Field(..., min_length=1, description="Owning conversation")
    text: str | None = Field(default=None, description="Message text")
    value: Any = Field(default=None, description="Structured payload")
    channel_id: str | None = Field(default=None, description="Channel the activity travels on")
    timestamp: datetime = Field(default_factory=utc_now, description="Creation time")

    def create_reply(self, text: str | None = None, **kwargs: Any) -> "Activity":
        """Build an outbound message addressed to the same conversation."""
        return Activity(
            type=ActivityType.MESSAGE,
            conversation_id=self.conversation_id,
            channel_id=self.channel_id,
            text=text,
            **kwargs,
        )
