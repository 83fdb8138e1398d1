"""Turn results returned by dialogs and by stack operations."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from colloquy.dialogs.models.enums import DialogTurnStatus


class DialogTurnResult(BaseModel):
    """Outcome of a dialog invocation or a stack operation.

    Dialogs return WAITING or COMPLETE. Top-level stack operations may also
    report EMPTY or CANCELLED to the host. `result` is only populated when a
    dialog just ended.
    """

    model_config = ConfigDict(frozen=True)

    status: DialogTurnStatus = Field(..., description="Stack status after the call")
    result: Any = Field(default=None, description="Value returned by an ended dialog")

    @classmethod
    def waiting(cls) -> "DialogTurnResult":
        return cls(status=DialogTurnStatus.WAITING)

    @classmethod
    def complete(cls, result: Any = None) -> "DialogTurnResult":
        return cls(status=DialogTurnStatus.COMPLETE, result=result)

    @classmethod
    def empty(cls) -> "DialogTurnResult":
        return cls(status=DialogTurnStatus.EMPTY)

    @classmethod
    def cancelled(cls) -> "DialogTurnResult":
        return cls(status=DialogTurnStatus.CANCELLED)

    @property
    def is_waiting(self) -> bool:
        return self.status == DialogTurnStatus.WAITING

    @property
    def is_complete(self) -> bool:
        return self.status == DialogTurnStatus.COMPLETE


# Shared result for dialogs that wait for the next turn
END_OF_TURN = DialogTurnResult.waiting()
