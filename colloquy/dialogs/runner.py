"""Per-turn host loop for a dialog catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from colloquy.dialogs.catalog import DialogCatalog
from colloquy.dialogs.context import DialogContext
from colloquy.dialogs.exceptions import MissingArgumentError
from colloquy.dialogs.models import DialogTurnResult
from colloquy.observability.logging import get_logger
from colloquy.observability.metrics import DIALOG_TURNS

if TYPE_CHECKING:
    from colloquy.state.store import DialogStateStore
    from colloquy.turn import TurnContext

logger = get_logger(__name__)


class DialogRunner:
    """Loads a conversation's stack, runs one operation and saves it.

    The stack is loaded exactly once and saved exactly once per turn. If the
    dialog operation raises, nothing is saved and the error propagates.
    """

    def __init__(
        self,
        catalog: DialogCatalog,
        store: DialogStateStore,
        *,
        state_key_prefix: str = "dialog_state",
        record_metrics: bool = True,
    ) -> None:
        if catalog is None:
            raise MissingArgumentError("catalog")
        if store is None:
            raise MissingArgumentError("store")
        self._catalog = catalog
        self._store = store
        self._state_key_prefix = state_key_prefix
        self._record_metrics = record_metrics

    @property
    def catalog(self) -> DialogCatalog:
        return self._catalog

    def state_key(self, turn_context: TurnContext) -> str:
        return f"{self._state_key_prefix}:{turn_context.activity.conversation_id}"

    async def create_context(self, turn_context: TurnContext) -> DialogContext:
        """Load the conversation's stack and bind it to a new DialogContext."""
        if turn_context is None:
            raise MissingArgumentError("turn_context")
        state = await self._store.load(self.state_key(turn_context))
        return DialogContext(
            self._catalog,
            turn_context,
            state,
            record_metrics=self._record_metrics,
        )

    async def save_context(self, dc: DialogContext) -> None:
        await self._store.save(self.state_key(dc.context), dc.state)

    async def run(
        self,
        turn_context: TurnContext,
        dialog_id: str,
        options: Any = None,
    ) -> DialogTurnResult:
        """Continue the active dialog, or begin dialog_id when none is active."""
        if turn_context is None:
            raise MissingArgumentError("turn_context")
        conversation_id = turn_context.activity.conversation_id
        structlog.contextvars.bind_contextvars(conversation_id=conversation_id)
        try:
            dc = await self.create_context(turn_context)
            if dc.active_dialog is None:
                result = await dc.begin_dialog(dialog_id, options)
            else:
                result = await dc.continue_dialog()
            await self.save_context(dc)
        except Exception as e:
            if self._record_metrics:
                DIALOG_TURNS.labels(status="error").inc()
            logger.error("dialog_turn_failed", error=str(e), error_type=type(e).__name__)
            raise
        finally:
            structlog.contextvars.unbind_contextvars("conversation_id")

        if self._record_metrics:
            DIALOG_TURNS.labels(status=result.status.value).inc()
        logger.info(
            "dialog_turn_processed",
            conversation_id=conversation_id,
            status=result.status.value,
            depth=dc.state.depth,
        )
        return result
