"""Tests for InMemoryDialogStateStore."""

import pytest

from colloquy.dialogs import DialogStackState, StackFrame
from colloquy.state import InMemoryDialogStateStore, StateStoreError


@pytest.fixture
def store() -> InMemoryDialogStateStore:
    return InMemoryDialogStateStore()


@pytest.fixture
def state() -> DialogStackState:
    return DialogStackState(
        stack=[
            StackFrame(dialog_id="checkout", state={"step": 2}),
            StackFrame(dialog_id="address", state={"lines": ["1 Main St"]}),
        ],
        values={"locale": "en-GB"},
    )


class TestInMemoryDialogStateStore:
    """Tests for loading, saving and deleting stacks."""

    @pytest.mark.asyncio
    async def test_load_unknown_key_returns_empty_state(self, store) -> None:
        loaded = await store.load("dialog_state:new")
        assert loaded.stack == []
        assert loaded.values == {}

    @pytest.mark.asyncio
    async def test_save_and_load(self, store, state) -> None:
        await store.save("dialog_state:conv-1", state)

        loaded = await store.load("dialog_state:conv-1")

        assert loaded == state

    @pytest.mark.asyncio
    async def test_loaded_state_is_independent(self, store, state) -> None:
        """Mutating a loaded stack does not change what is stored."""
        await store.save("k", state)
        loaded = await store.load("k")
        loaded.stack.pop()
        loaded.values["locale"] = "fr"

        reloaded = await store.load("k")

        assert reloaded == state

    @pytest.mark.asyncio
    async def test_save_overwrites(self, store, state) -> None:
        await store.save("k", state)
        await store.save("k", DialogStackState())

        assert (await store.load("k")).stack == []

    @pytest.mark.asyncio
    async def test_delete(self, store, state) -> None:
        await store.save("k", state)

        assert await store.delete("k") is True
        assert await store.delete("k") is False
        assert store.keys() == []

    @pytest.mark.asyncio
    async def test_unserializable_state_raises(self, store) -> None:
        bad = DialogStackState(values={"handle": object()})

        with pytest.raises(StateStoreError) as exc_info:
            await store.save("k", bad)

        assert exc_info.value.key == "k"
        assert store.keys() == []

    @pytest.mark.asyncio
    async def test_corrupt_document_raises(self, store) -> None:
        store._documents["k"] = '{"stack": [{"dialog_id": ""}]}'

        with pytest.raises(StateStoreError):
            await store.load("k")
