"""Dialog abstract interface.

A dialog is a unit of multi-turn logic identified by a unique id. The engine
depends only on this contract and never on a concrete dialog's internals.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from colloquy.dialogs.exceptions import MissingArgumentError
from colloquy.dialogs.models import END_OF_TURN, DialogReason, DialogTurnResult, StackFrame
from colloquy.observability.telemetry import NullTelemetryClient, TelemetryClient

if TYPE_CHECKING:
    from colloquy.dialogs.context import DialogContext
    from colloquy.turn import TurnContext


class Dialog(ABC):
    """Base class for everything that can live on the dialog stack.

    Subclasses implement `begin_dialog` and `resume_dialog` and return
    either a waiting result (stay on the stack) or a complete result (be
    popped, with the result delivered to the dialog underneath). Returning
    `await dc.end_dialog(result)` is equivalent to returning
    `DialogTurnResult.complete(result)`.
    """

    end_of_turn = END_OF_TURN

    def __init__(self, dialog_id: str) -> None:
        if not dialog_id or not dialog_id.strip():
            raise MissingArgumentError("dialog_id")
        self._id = dialog_id
        self._telemetry_client: TelemetryClient = NullTelemetryClient()

    @property
    def id(self) -> str:
        return self._id

    @property
    def telemetry_client(self) -> TelemetryClient:
        return self._telemetry_client

    @telemetry_client.setter
    def telemetry_client(self, value: TelemetryClient | None) -> None:
        self._telemetry_client = value if value is not None else NullTelemetryClient()

    @abstractmethod
    async def begin_dialog(
        self, dc: DialogContext, options: Any = None
    ) -> DialogTurnResult:
        """Start a new instance whose frame has just been pushed."""
        pass

    @abstractmethod
    async def resume_dialog(
        self,
        dc: DialogContext,
        reason: DialogReason,
        result: Any = None,
    ) -> DialogTurnResult:
        """Resume the active instance.

        `reason` is CONTINUE_CALLED for a new inbound turn and END_CALLED when
        a dialog this one started has ended with `result`.
        """
        pass

    async def reprompt_dialog(
        self, turn_context: TurnContext, frame: StackFrame
    ) -> None:
        """Re-issue the last prompt. Dialogs without a prompt do nothing."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
