"""In-memory implementation of DialogStateStore."""

from pydantic import ValidationError

from colloquy.dialogs.models import DialogStackState
from colloquy.state.exceptions import StateStoreError
from colloquy.state.store import DialogStateStore


class InMemoryDialogStateStore(DialogStateStore):
    """In-memory implementation of DialogStateStore for testing and development.

    Stacks are kept as JSON documents so loaded states never share objects
    with the store or with earlier turns. Not suitable for production use.
    """

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}

    async def load(self, key: str) -> DialogStackState:
        document = self._documents.get(key)
        if document is None:
            return DialogStackState()
        try:
            return DialogStackState.model_validate_json(document)
        except ValidationError as e:
            raise StateStoreError(f"Stored dialog state is invalid: {e}", key=key) from e

    async def save(self, key: str, state: DialogStackState) -> None:
        try:
            self._documents[key] = state.model_dump_json()
        except (TypeError, ValueError) as e:
            raise StateStoreError(f"Dialog state is not serializable: {e}", key=key) from e

    async def delete(self, key: str) -> bool:
        if key in self._documents:
            del self._documents[key]
            return True
        return False

    def keys(self) -> list[str]:
        return list(self._documents)
