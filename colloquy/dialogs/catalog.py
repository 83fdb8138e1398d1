"""Registry of dialog definitions."""

from collections.abc import Iterable, Iterator

from colloquy.dialogs.dialog import Dialog
from colloquy.dialogs.exceptions import DuplicateIdError, MissingArgumentError
from colloquy.observability.logging import get_logger
from colloquy.observability.telemetry import NullTelemetryClient, TelemetryClient

logger = get_logger(__name__)


class DialogCatalog:
    """A related set of dialogs that can all call each other.

    Built once at startup and shared read-only by every conversation.
    Registration must finish before turn processing starts.
    """

    def __init__(
        self,
        dialogs: Iterable[Dialog] | None = None,
        *,
        telemetry_client: TelemetryClient | None = None,
    ) -> None:
        self._dialogs: dict[str, Dialog] = {}
        self._telemetry_client: TelemetryClient = telemetry_client or NullTelemetryClient()
        for dialog in dialogs or []:
            self.add(dialog)

    @property
    def telemetry_client(self) -> TelemetryClient:
        return self._telemetry_client

    @telemetry_client.setter
    def telemetry_client(self, value: TelemetryClient | None) -> None:
        """Set the shared sink and push it onto every registered dialog."""
        self._telemetry_client = value if value is not None else NullTelemetryClient()
        for dialog in self._dialogs.values():
            dialog.telemetry_client = self._telemetry_client

    def add(self, dialog: Dialog) -> "DialogCatalog":
        """Register a dialog, returning the catalog for chained calls.

        Raises:
            MissingArgumentError: If dialog is None
            DuplicateIdError: If the id is already registered
        """
        if dialog is None:
            raise MissingArgumentError("dialog")
        if dialog.id in self._dialogs:
            raise DuplicateIdError(dialog.id)

        dialog.telemetry_client = self._telemetry_client
        self._dialogs[dialog.id] = dialog
        logger.debug("dialog_registered", dialog_id=dialog.id, dialog_type=type(dialog).__name__)
        return self

    def find(self, dialog_id: str) -> Dialog | None:
        """Return the dialog registered under dialog_id, or None."""
        if not dialog_id:
            return None
        return self._dialogs.get(dialog_id)

    def __contains__(self, dialog_id: object) -> bool:
        return dialog_id in self._dialogs

    def __iter__(self) -> Iterator[Dialog]:
        return iter(self._dialogs.values())

    def __len__(self) -> int:
        return len(self._dialogs)
