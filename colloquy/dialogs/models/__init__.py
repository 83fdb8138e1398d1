"""Dialog domain models.

- StackFrame / DialogStackState for persisted stack data
- DialogTurnResult for invocation outcomes
- Enums for turn status and resume reason
"""

from colloquy.dialogs.models.enums import DialogReason, DialogTurnStatus
from colloquy.dialogs.models.results import END_OF_TURN, DialogTurnResult
from colloquy.dialogs.models.state import DialogStackState, StackFrame

__all__ = [
    # Enums
    "DialogReason",
    "DialogTurnStatus",
    # State
    "DialogStackState",
    "StackFrame",
    # Results
    "DialogTurnResult",
    "END_OF_TURN",
]
