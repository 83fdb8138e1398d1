"""Test factories and fakes."""

from tests.factories.dialogs import (
    DialogCall,
    NumberPrompt,
    ScriptedDialog,
    TextPrompt,
    begin,
    cancel_and_begin,
    complete,
    end,
    fail,
    sequence,
    wait,
)
from tests.factories.turns import RecordingTelemetryClient, RecordingTurnContext

__all__ = [
    "DialogCall",
    "NumberPrompt",
    "RecordingTelemetryClient",
    "RecordingTurnContext",
    "ScriptedDialog",
    "TextPrompt",
    "begin",
    "cancel_and_begin",
    "complete",
    "end",
    "fail",
    "sequence",
    "wait",
]
