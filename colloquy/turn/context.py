"""Turn context protocol.

The engine never inspects a turn context beyond passing it to dialogs; the
transport adapter owns the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from colloquy.turn.models import Activity


@runtime_checkable
class TurnContext(Protocol):
    """Capability object for one inbound turn."""

    @property
    def activity(self) -> Activity:
        """The inbound activity being processed."""
        ...

    @property
    def responded(self) -> bool:
        """Whether at least one activity was sent during this turn."""
        ...

    async def send_activity(self, activity: Activity | str) -> None:
        """Send an outbound activity, or a plain text message."""
        ...
