"""DialogStateStore abstract interface."""

from abc import ABC, abstractmethod

from colloquy.dialogs.models import DialogStackState


class DialogStateStore(ABC):
    """Abstract interface for persisting dialog stacks between turns.

    A host loads a conversation's stack once at the start of a turn and
    saves it once at the end. Conflict detection between concurrent
    writers belongs to the implementation, not to the dialog engine.
    """

    @abstractmethod
    async def load(self, key: str) -> DialogStackState:
        """Load the stack stored under key, or a fresh empty one."""
        pass

    @abstractmethod
    async def save(self, key: str, state: DialogStackState) -> None:
        """Persist the stack under key."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete the stack stored under key."""
        pass
