"""Persistence of per-conversation dialog stacks."""

from colloquy.state.exceptions import StateStoreError
from colloquy.state.store import DialogStateStore
from colloquy.state.stores.inmemory import InMemoryDialogStateStore

__all__ = [
    "DialogStateStore",
    "InMemoryDialogStateStore",
    "StateStoreError",
]
