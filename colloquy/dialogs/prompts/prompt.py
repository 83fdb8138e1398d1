"""Abstract prompt dialog.

A prompt asks a question, recognizes the reply, runs an optional validator
and either ends with the recognized value or asks again. Concrete prompts
only implement recognition.
"""

from __future__ import annotations

import inspect
from abc import abstractmethod
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from colloquy.dialogs.dialog import Dialog
from colloquy.dialogs.models import DialogReason, DialogTurnResult, StackFrame
from colloquy.dialogs.prompts.models import PromptOptions, PromptRecognizerResult
from colloquy.dialogs.prompts.validation import ATTEMPT_COUNT_KEY, ValidationContext

if TYPE_CHECKING:
    from colloquy.dialogs.context import DialogContext
    from colloquy.turn import TurnContext

T = TypeVar("T")

PromptValidator = Callable[[ValidationContext[T]], bool | Awaitable[bool]]

# Keys inside the prompt's frame state
PERSISTED_OPTIONS = "options"
PERSISTED_STATE = "state"


class Prompt(Dialog, Generic[T]):
    """Base class for dialogs that collect a single value from the user."""

    def __init__(self, dialog_id: str, validator: PromptValidator[T] | None = None) -> None:
        super().__init__(dialog_id)
        self._validator = validator

    async def begin_dialog(self, dc: DialogContext, options: Any = None) -> DialogTurnResult:
        prompt_options = self._coerce_options(options)
        frame = dc.active_dialog
        frame.state[PERSISTED_OPTIONS] = prompt_options.model_dump(mode="json")
        frame.state[PERSISTED_STATE] = {ATTEMPT_COUNT_KEY: 0}

        await self.on_prompt(dc.context, frame.state[PERSISTED_STATE], prompt_options, False)
        return Dialog.end_of_turn

    async def resume_dialog(
        self,
        dc: DialogContext,
        reason: DialogReason,
        result: Any = None,
    ) -> DialogTurnResult:
        frame = dc.active_dialog
        options = PromptOptions.model_validate(frame.state[PERSISTED_OPTIONS])
        state = frame.state[PERSISTED_STATE]

        if reason != DialogReason.CONTINUE_CALLED:
            # Something this prompt started has ended; ask the question again.
            await self.on_prompt(dc.context, state, options, False)
            return Dialog.end_of_turn

        recognized = await self.on_recognize(dc.context, state, options)
        state[ATTEMPT_COUNT_KEY] = int(state.get(ATTEMPT_COUNT_KEY, 0)) + 1

        if await self._is_valid(dc.context, recognized, state, options):
            self.telemetry_client.track_event(
                "prompt_accepted",
                {"dialog_id": self.id, "attempts": state[ATTEMPT_COUNT_KEY]},
            )
            return await dc.end_dialog(recognized.value)

        self.telemetry_client.track_event(
            "prompt_rejected",
            {"dialog_id": self.id, "attempts": state[ATTEMPT_COUNT_KEY]},
        )
        if not dc.context.responded:
            await self.on_prompt(dc.context, state, options, True)
        return Dialog.end_of_turn

    async def reprompt_dialog(self, turn_context: TurnContext, frame: StackFrame) -> None:
        options = PromptOptions.model_validate(frame.state[PERSISTED_OPTIONS])
        await self.on_prompt(turn_context, frame.state[PERSISTED_STATE], options, False)

    async def on_prompt(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
        is_retry: bool,
    ) -> None:
        """Send the prompt, or the retry prompt when one is configured."""
        message = options.retry_prompt if is_retry and options.retry_prompt else options.prompt
        if message is not None:
            await turn_context.send_activity(message)

    @abstractmethod
    async def on_recognize(
        self,
        turn_context: TurnContext,
        state: dict[str, Any],
        options: PromptOptions,
    ) -> PromptRecognizerResult[T]:
        """Recognize a value of type T in the inbound activity."""
        pass

    async def _is_valid(
        self,
        turn_context: TurnContext,
        recognized: PromptRecognizerResult[T],
        state: dict[str, Any],
        options: PromptOptions,
    ) -> bool:
        if self._validator is None:
            return recognized.succeeded

        verdict = self._validator(ValidationContext(turn_context, recognized, state, options))
        if inspect.isawaitable(verdict):
            verdict = await verdict
        return bool(verdict)

    @staticmethod
    def _coerce_options(options: Any) -> PromptOptions:
        if options is None:
            return PromptOptions()
        if isinstance(options, PromptOptions):
            return options
        return PromptOptions.model_validate(options)
