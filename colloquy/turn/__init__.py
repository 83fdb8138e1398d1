"""Turn-level collaborators consumed by the dialog engine."""

from colloquy.turn.context import TurnContext
from colloquy.turn.models import Activity, ActivityType

__all__ = [
    "Activity",
    "ActivityType",
    "TurnContext",
]
