"""Dialog state store implementations."""

from colloquy.state.store import DialogStateStore
from colloquy.state.stores.inmemory import InMemoryDialogStateStore

__all__ = [
    "DialogStateStore",
    "InMemoryDialogStateStore",
]
