"""Configuration model exports."""

from colloquy.config.models.dialogs import DialogsConfig, TelemetryBackend
from colloquy.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)

__all__ = [
    "DialogsConfig",
    "TelemetryBackend",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
]
