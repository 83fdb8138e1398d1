"""Fake turn contexts and telemetry sinks."""

from typing import Any

from colloquy.turn import Activity


class RecordingTurnContext:
    """Turn context that keeps every outbound activity in memory."""

    def __init__(self, text: str | None = None, conversation_id: str = "conv-1") -> None:
        self._activity = Activity(conversation_id=conversation_id, text=text)
        self.sent: list[Activity] = []

    @property
    def activity(self) -> Activity:
        return self._activity

    @property
    def responded(self) -> bool:
        return bool(self.sent)

    async def send_activity(self, activity: Activity | str) -> None:
        if isinstance(activity, str):
            activity = self._activity.create_reply(activity)
        self.sent.append(activity)

    @property
    def sent_texts(self) -> list[str | None]:
        return [activity.text for activity in self.sent]


class RecordingTelemetryClient:
    """Telemetry client that records tracked events."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def track_event(self, name: str, properties: dict[str, Any] | None = None) -> None:
        self.events.append((name, dict(properties or {})))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]
