"""Telemetry sink shared by the dialogs of a catalog."""

from typing import Any, Protocol, runtime_checkable

from colloquy.observability.logging import get_logger


@runtime_checkable
class TelemetryClient(Protocol):
    """Sink for dialog-level telemetry events."""

    def track_event(self, name: str, properties: dict[str, Any] | None = None) -> None:
        """Record a named event with optional properties."""
        ...


class NullTelemetryClient:
    """Telemetry client that discards every event."""

    def track_event(self, name: str, properties: dict[str, Any] | None = None) -> None:
        return None


class LoggingTelemetryClient:
    """Telemetry client that writes events to the structured log."""

    def __init__(self, logger_name: str = "colloquy.telemetry") -> None:
        self._logger = get_logger(logger_name)

    def track_event(self, name: str, properties: dict[str, Any] | None = None) -> None:
        self._logger.info("telemetry_event", name=name, properties=properties or {})


def create_telemetry_client(backend: str) -> TelemetryClient:
    """Build the telemetry client named by configuration."""
    if backend == "null":
        return NullTelemetryClient()
    if backend == "logging":
        return LoggingTelemetryClient()
    raise ValueError(f"Unknown telemetry backend: {backend}")
