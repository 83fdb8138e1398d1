"""Persisted dialog stack state."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StackFrame(BaseModel):
    """One active dialog instance on the stack.

    The engine persists and restores `state` verbatim; only the owning
    dialog reads or writes it.
    """

    model_config = ConfigDict(frozen=False)

    dialog_id: str = Field(..., min_length=1, description="Registered dialog id")
    state: dict[str, Any] = Field(
        default_factory=dict, description="Private dialog instance state"
    )


class DialogStackState(BaseModel):
    """Per-conversation dialog data.

    The last element of `stack` is the active dialog. `values` is shared by
    every frame and survives pushes and pops.
    """

    model_config = ConfigDict(frozen=False)

    stack: list[StackFrame] = Field(default_factory=list, description="Call-ordered frames")
    values: dict[str, Any] = Field(
        default_factory=dict, description="Conversation-scoped ambient values"
    )

    @property
    def top(self) -> StackFrame | None:
        """The active frame, or None when the stack is empty."""
        return self.stack[-1] if self.stack else None

    @property
    def depth(self) -> int:
        return len(self.stack)
