"""Prompt dialogs and the validation hook."""

from colloquy.dialogs.prompts.models import PromptOptions, PromptRecognizerResult
from colloquy.dialogs.prompts.prompt import Prompt, PromptValidator
from colloquy.dialogs.prompts.validation import ValidationContext

__all__ = [
    "Prompt",
    "PromptOptions",
    "PromptRecognizerResult",
    "PromptValidator",
    "ValidationContext",
]
