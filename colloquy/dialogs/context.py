"""Dialog context: drives one conversation's dialog stack for one turn.

Every stack operation called by the host runs a flat propagation loop. Each
loop step invokes exactly one dialog (begin or resume) and interprets its
result:

- WAITING ends the loop.
- COMPLETE pops the dialog's frame and, if a frame remains, schedules a
  resume of the new top dialog with reason END_CALLED and the result.

Stack operations called by a dialog while the loop is running mutate the
stack immediately and schedule the follow-up step for the running loop
instead of invoking other dialogs themselves, so propagation depth never
grows the Python call stack.

The state is checkpointed after every completed pop. If a step raises,
including on task cancellation, the state is restored to the last
checkpoint before the exception propagates, so a failed operation leaves
either the original stack or the stack as of its last completed pop.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from colloquy.dialogs.catalog import DialogCatalog
from colloquy.dialogs.dialog import Dialog
from colloquy.dialogs.exceptions import (
    DialogStackError,
    EmptyStackError,
    InvalidTurnResultError,
    MissingArgumentError,
    UnknownDialogError,
)
from colloquy.dialogs.models import (
    DialogReason,
    DialogStackState,
    DialogTurnResult,
    DialogTurnStatus,
    StackFrame,
)
from colloquy.dialogs.prompts.models import PromptOptions
from colloquy.observability.logging import get_logger
from colloquy.observability.metrics import (
    DIALOG_ERRORS,
    DIALOG_OPERATIONS,
    DIALOG_PROPAGATION_STEPS,
)

if TYPE_CHECKING:
    from colloquy.turn import TurnContext

logger = get_logger(__name__)


@dataclass
class _BeginStep:
    dialog: Dialog
    frame: StackFrame
    options: Any


@dataclass
class _ResumeStep:
    reason: DialogReason
    result: Any = None


# A loop step, or the final result that stops the loop
_Next = _BeginStep | _ResumeStep | DialogTurnResult


class DialogContext:
    """Binds a catalog, a turn and a conversation's stack state.

    Create one per turn; the context must not outlive the turn so the host
    stays free to persist the state.
    """

    def __init__(
        self,
        catalog: DialogCatalog,
        turn_context: TurnContext,
        state: DialogStackState,
        *,
        record_metrics: bool = True,
    ) -> None:
        if catalog is None:
            raise MissingArgumentError("catalog")
        if turn_context is None:
            raise MissingArgumentError("turn_context")
        if state is None:
            raise MissingArgumentError("state")

        self._catalog = catalog
        self._context = turn_context
        self._state = state
        self._record_metrics = record_metrics
        self._running = False
        self._scheduled: _Next | None = None

    @property
    def catalog(self) -> DialogCatalog:
        return self._catalog

    @property
    def context(self) -> TurnContext:
        return self._context

    @property
    def state(self) -> DialogStackState:
        return self._state

    @property
    def stack(self) -> list[StackFrame]:
        return self._state.stack

    @property
    def values(self) -> dict[str, Any]:
        """Conversation-scoped values shared by every frame."""
        return self._state.values

    @property
    def active_dialog(self) -> StackFrame | None:
        return self._state.top

    def find_dialog(self, dialog_id: str) -> Dialog | None:
        return self._catalog.find(dialog_id)

    # ------------------------------------------------------------------
    # Stack operations
    # ------------------------------------------------------------------

    async def begin_dialog(self, dialog_id: str, options: Any = None) -> DialogTurnResult:
        """Push a new instance of dialog_id and start it.

        Raises:
            MissingArgumentError: If dialog_id is blank
            UnknownDialogError: If dialog_id is not registered
        """
        dialog = self._require_dialog(dialog_id)

        if self._running:
            self._ensure_can_schedule("begin_dialog")
            self._schedule(self._push(dialog, options))
            return Dialog.end_of_turn

        return await self._run("begin", lambda: self._push(dialog, options))

    async def prompt(self, dialog_id: str, options: PromptOptions) -> DialogTurnResult:
        """Begin a prompt dialog with the given prompt options."""
        if options is None:
            raise MissingArgumentError("options")
        return await self.begin_dialog(dialog_id, options)

    async def continue_dialog(self) -> DialogTurnResult:
        """Deliver the current turn to the active dialog.

        Raises:
            EmptyStackError: If no dialog is active
            UnknownDialogError: If the active frame names an unregistered dialog
            DialogStackError: If called by a dialog while the stack is running
        """
        if self._running:
            raise DialogStackError("continue_dialog cannot be called from within a dialog.")
        if not self._state.stack:
            raise EmptyStackError()

        return await self._run(
            "continue", lambda: _ResumeStep(DialogReason.CONTINUE_CALLED)
        )

    async def end_dialog(self, result: Any = None) -> DialogTurnResult:
        """Pop the active dialog and hand result to the dialog underneath."""
        if self._running:
            self._ensure_can_schedule("end_dialog")
            self._schedule(self._pop_and_complete(result))
            return DialogTurnResult.complete(result)

        return await self._run("end", lambda: self._pop_and_complete(result))

    async def replace_dialog(self, dialog_id: str, options: Any = None) -> DialogTurnResult:
        """Swap the active dialog for a new instance of dialog_id.

        The dialog underneath is not resumed; the replacement simply takes
        over the popped frame's position.
        """
        dialog = self._require_dialog(dialog_id)

        def replace() -> _Next:
            popped = self._pop()
            logger.debug(
                "dialog_replaced",
                replaced_dialog_id=popped.dialog_id if popped else None,
                dialog_id=dialog.id,
            )
            return self._push(dialog, options)

        if self._running:
            self._ensure_can_schedule("replace_dialog")
            self._schedule(replace())
            return Dialog.end_of_turn

        return await self._run("replace", replace)

    async def cancel_all_dialogs(self) -> DialogTurnResult:
        """Pop every frame without invoking any dialog.

        Returns CANCELLED if frames were removed, EMPTY otherwise. Ambient
        values are left untouched.
        """

        def cancel() -> _Next:
            depth = len(self._state.stack)
            self._state.stack.clear()
            if depth == 0:
                return DialogTurnResult.empty()
            logger.debug("dialog_stack_cancelled", depth=depth)
            return DialogTurnResult.cancelled()

        if self._running:
            self._ensure_can_schedule("cancel_all_dialogs")
            outcome = cancel()
            self._schedule(outcome)
            return outcome

        return await self._run("cancel", cancel)

    async def reprompt_dialog(self) -> None:
        """Ask the active dialog to re-issue its prompt; no-op when empty."""
        frame = self._state.top
        if frame is None:
            return
        dialog = self._resolve(frame)
        await dialog.reprompt_dialog(self._context, frame)

    # ------------------------------------------------------------------
    # Propagation loop
    # ------------------------------------------------------------------

    async def _run(self, operation: str, start: Callable[[], _Next]) -> DialogTurnResult:
        # Checkpoints are only refreshed before resume steps: a pushed frame
        # whose begin step fails is rolled back together with the push.
        self._running = True
        self._scheduled = None
        steps = 0
        checkpoint = self._state.model_copy(deep=True)
        try:
            step = start()
            while not isinstance(step, DialogTurnResult):
                step = await self._execute(step)
                steps += 1
                if isinstance(step, _ResumeStep):
                    checkpoint = self._state.model_copy(deep=True)
        except BaseException as error:
            self._restore(checkpoint)
            if self._record_metrics and isinstance(error, Exception):
                DIALOG_ERRORS.labels(error_type=type(error).__name__).inc()
            raise
        finally:
            self._running = False
            self._scheduled = None

        if self._record_metrics:
            DIALOG_OPERATIONS.labels(operation=operation, status=step.status.value).inc()
            DIALOG_PROPAGATION_STEPS.observe(steps)
        logger.debug(
            "dialog_operation_finished",
            operation=operation,
            status=step.status.value,
            steps=steps,
            depth=self._state.depth,
        )
        return step

    async def _execute(self, step: _BeginStep | _ResumeStep) -> _Next:
        if isinstance(step, _BeginStep):
            frame = step.frame
            dialog = step.dialog
            logger.debug("dialog_begin", dialog_id=dialog.id, depth=self._state.depth)
            outcome = await dialog.begin_dialog(self, step.options)
        else:
            frame = self._state.top
            if frame is None:
                return DialogTurnResult.complete(step.result)
            dialog = self._resolve(frame)
            logger.debug(
                "dialog_resume",
                dialog_id=dialog.id,
                reason=step.reason.value,
                depth=self._state.depth,
            )
            outcome = await dialog.resume_dialog(self, step.reason, step.result)

        scheduled, self._scheduled = self._scheduled, None
        if scheduled is not None:
            return scheduled
        return self._interpret(dialog, frame, outcome)

    def _interpret(self, dialog: Dialog, frame: StackFrame, outcome: Any) -> _Next:
        if not isinstance(outcome, DialogTurnResult) or outcome.status not in (
            DialogTurnStatus.WAITING,
            DialogTurnStatus.COMPLETE,
        ):
            raise InvalidTurnResultError(dialog.id, outcome)

        if outcome.status == DialogTurnStatus.WAITING:
            return outcome

        if self._state.top is not frame:
            raise DialogStackError(
                f"Dialog '{dialog.id}' completed but is no longer the active dialog."
            )
        self._state.stack.pop()
        logger.debug("dialog_end", dialog_id=dialog.id, depth=self._state.depth)
        return self._completion(outcome.result)

    def _completion(self, result: Any) -> _Next:
        if self._state.stack:
            return _ResumeStep(DialogReason.END_CALLED, result)
        return DialogTurnResult.complete(result)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_dialog(self, dialog_id: str) -> Dialog:
        if not dialog_id or not dialog_id.strip():
            raise MissingArgumentError("dialog_id")
        dialog = self._catalog.find(dialog_id)
        if dialog is None:
            raise UnknownDialogError(dialog_id)
        return dialog

    def _resolve(self, frame: StackFrame) -> Dialog:
        dialog = self._catalog.find(frame.dialog_id)
        if dialog is None:
            logger.warning(
                "dialog_stack_mismatch",
                dialog_id=frame.dialog_id,
                depth=self._state.depth,
            )
            raise UnknownDialogError(frame.dialog_id, persisted=True)
        return dialog

    def _push(self, dialog: Dialog, options: Any) -> _BeginStep:
        frame = StackFrame(dialog_id=dialog.id)
        self._state.stack.append(frame)
        return _BeginStep(dialog=dialog, frame=frame, options=options)

    def _pop(self) -> StackFrame | None:
        return self._state.stack.pop() if self._state.stack else None

    def _pop_and_complete(self, result: Any) -> _Next:
        popped = self._pop()
        if popped is not None:
            logger.debug("dialog_end", dialog_id=popped.dialog_id, depth=self._state.depth)
        return self._completion(result)

    def _ensure_can_schedule(self, operation: str) -> None:
        # A pending cancellation may be superseded; anything else may not.
        scheduled = self._scheduled
        if scheduled is None:
            return
        if isinstance(scheduled, DialogTurnResult) and scheduled.status in (
            DialogTurnStatus.CANCELLED,
            DialogTurnStatus.EMPTY,
        ):
            return
        raise DialogStackError(
            f"{operation} called after another stack operation in the same dialog step."
        )

    def _schedule(self, step: _Next) -> None:
        self._scheduled = step

    def _restore(self, checkpoint: DialogStackState) -> None:
        self._state.stack[:] = checkpoint.stack
        self._state.values.clear()
        self._state.values.update(checkpoint.values)

