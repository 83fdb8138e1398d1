"""Enums for the dialog domain."""

from enum import Enum


class DialogTurnStatus(str, Enum):
    """State of the dialog stack after an operation."""

    EMPTY = "empty"
    WAITING = "waiting"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


class DialogReason(str, Enum):
    """Why a dialog is being resumed."""

    # A new inbound turn arrived for the active dialog
    CONTINUE_CALLED = "continue_called"
    # A dialog started by the active dialog has ended
    END_CALLED = "end_called"
