"""Prompt option and recognition models."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from colloquy.turn.models import Activity

T = TypeVar("T")


class PromptOptions(BaseModel):
    """Options a prompt dialog is begun with.

    Persisted in the prompt's frame, so every field must be JSON-friendly.
    """

    model_config = ConfigDict(frozen=False)

    prompt: Activity | str | None = Field(default=None, description="Initial prompt")
    retry_prompt: Activity | str | None = Field(
        default=None, description="Prompt sent after an invalid reply"
    )
    choices: list[str] = Field(default_factory=list, description="Choices offered to the user")
    validations: Any = Field(default=None, description="Extra data for custom validators")


class PromptRecognizerResult(BaseModel, Generic[T]):
    """Best-effort recognition of the user's reply.

    Validators may overwrite `value` before accepting it.
    """

    model_config = ConfigDict(frozen=False)

    succeeded: bool = Field(default=False, description="Whether a value was recognized")
    value: T | None = Field(default=None, description="Recognized value")
    reason: str | None = Field(default=None, description="Why recognition failed")

    @classmethod
    def success(cls, value: T) -> "PromptRecognizerResult[T]":
        return cls(succeeded=True, value=value)

    @classmethod
    def failure(cls, reason: str | None = None) -> "PromptRecognizerResult[T]":
        return cls(succeeded=False, reason=reason)
