"""Context handed to a prompt's validator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from colloquy.dialogs.prompts.models import PromptOptions, PromptRecognizerResult

if TYPE_CHECKING:
    from colloquy.turn import TurnContext

T = TypeVar("T")

ATTEMPT_COUNT_KEY = "attempt_count"


class ValidationContext(Generic[T]):
    """Per-attempt view of a prompt for its validator.

    `state` is the prompt's scratch mapping. It is the same dict on every
    attempt of one prompt instance, so validators can keep counters or
    partial answers there; the engine never reads it.
    """

    def __init__(
        self,
        turn_context: TurnContext,
        recognized: PromptRecognizerResult[T],
        state: dict[str, Any],
        options: PromptOptions,
    ) -> None:
        self._turn_context = turn_context
        self._recognized = recognized
        self._state = state
        self._options = options

    @property
    def turn_context(self) -> TurnContext:
        return self._turn_context

    @property
    def recognized(self) -> PromptRecognizerResult[T]:
        return self._recognized

    @property
    def state(self) -> dict[str, Any]:
        return self._state

    @property
    def options(self) -> PromptOptions:
        return self._options

    @property
    def attempt_count(self) -> int:
        """Replies received by this prompt so far, including the current one."""
        return int(self._state.get(ATTEMPT_COUNT_KEY, 0))
