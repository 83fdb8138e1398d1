"""Dialog engine configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

TelemetryBackend = Literal["null", "logging"]


class DialogsConfig(BaseModel):
    """Dialog engine configuration."""

    state_key_prefix: str = Field(
        default="dialog_state",
        min_length=1,
        description="Prefix of the storage key holding a conversation's dialog stack",
    )
    telemetry: TelemetryBackend = Field(
        default="null",
        description="Telemetry sink shared by every registered dialog",
    )
