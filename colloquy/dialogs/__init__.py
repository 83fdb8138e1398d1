"""Dialog stack engine.

- Dialog: the contract every stackable dialog implements
- DialogCatalog: registry of dialogs by id
- DialogContext: stack operations for one conversation turn
- DialogRunner: load / run / save host loop
"""

from colloquy.dialogs.catalog import DialogCatalog
from colloquy.dialogs.context import DialogContext
from colloquy.dialogs.dialog import Dialog
from colloquy.dialogs.exceptions import (
    DialogError,
    DialogStackError,
    DialogUsageError,
    DuplicateIdError,
    EmptyStackError,
    InvalidTurnResultError,
    MissingArgumentError,
    UnknownDialogError,
)
from colloquy.dialogs.models import (
    END_OF_TURN,
    DialogReason,
    DialogStackState,
    DialogTurnResult,
    DialogTurnStatus,
    StackFrame,
)
from colloquy.dialogs.runner import DialogRunner

__all__ = [
    # Engine
    "Dialog",
    "DialogCatalog",
    "DialogContext",
    "DialogRunner",
    # Models
    "DialogReason",
    "DialogStackState",
    "DialogTurnResult",
    "DialogTurnStatus",
    "END_OF_TURN",
    "StackFrame",
    # Errors
    "DialogError",
    "DialogStackError",
    "DialogUsageError",
    "DuplicateIdError",
    "EmptyStackError",
    "InvalidTurnResultError",
    "MissingArgumentError",
    "UnknownDialogError",
]
