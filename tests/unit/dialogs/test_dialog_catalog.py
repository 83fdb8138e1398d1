"""Tests for DialogCatalog."""

import pytest

from colloquy.dialogs import DialogCatalog, DuplicateIdError, MissingArgumentError
from colloquy.observability.telemetry import NullTelemetryClient
from tests.factories import RecordingTelemetryClient, ScriptedDialog


@pytest.fixture
def catalog() -> DialogCatalog:
    return DialogCatalog()


class TestRegistration:
    """Tests for adding dialogs."""

    def test_add_and_find(self, catalog: DialogCatalog) -> None:
        """Should find a registered dialog by id."""
        dialog = ScriptedDialog("greeting")
        catalog.add(dialog)

        assert catalog.find("greeting") is dialog
        assert "greeting" in catalog
        assert len(catalog) == 1

    def test_add_returns_catalog_for_chaining(self, catalog: DialogCatalog) -> None:
        """add() returns the catalog itself."""
        result = catalog.add(ScriptedDialog("a")).add(ScriptedDialog("b"))
        assert result is catalog
        assert {dialog.id for dialog in catalog} == {"a", "b"}

    def test_constructor_registers_dialogs(self) -> None:
        catalog = DialogCatalog([ScriptedDialog("a"), ScriptedDialog("b")])
        assert len(catalog) == 2

    def test_duplicate_id_rejected(self, catalog: DialogCatalog) -> None:
        """A second dialog with the same id fails and leaves the first in place."""
        first = ScriptedDialog("greeting")
        catalog.add(first)

        with pytest.raises(DuplicateIdError, match="already added") as exc_info:
            catalog.add(ScriptedDialog("greeting"))

        assert exc_info.value.dialog_id == "greeting"
        assert catalog.find("greeting") is first
        assert len(catalog) == 1

    def test_add_none_rejected(self, catalog: DialogCatalog) -> None:
        with pytest.raises(MissingArgumentError):
            catalog.add(None)  # type: ignore[arg-type]

    def test_blank_dialog_id_rejected(self) -> None:
        with pytest.raises(MissingArgumentError):
            ScriptedDialog("  ")


class TestLookup:
    """Tests for find()."""

    def test_find_missing_returns_none(self, catalog: DialogCatalog) -> None:
        assert catalog.find("missing") is None

    def test_find_blank_returns_none(self, catalog: DialogCatalog) -> None:
        assert catalog.find("") is None


class TestTelemetryPropagation:
    """Tests for the shared telemetry client."""

    def test_default_is_null_client(self, catalog: DialogCatalog) -> None:
        dialog = ScriptedDialog("a")
        catalog.add(dialog)

        assert isinstance(catalog.telemetry_client, NullTelemetryClient)
        assert isinstance(dialog.telemetry_client, NullTelemetryClient)

    def test_new_dialogs_inherit_catalog_client(self) -> None:
        """Dialogs registered after construction receive the catalog client."""
        client = RecordingTelemetryClient()
        catalog = DialogCatalog(telemetry_client=client)
        dialog = ScriptedDialog("a")

        catalog.add(dialog)

        assert dialog.telemetry_client is client

    def test_setting_client_updates_registered_dialogs(self, catalog: DialogCatalog) -> None:
        """Changing the catalog client re-propagates it to every dialog."""
        dialogs = [ScriptedDialog("a"), ScriptedDialog("b")]
        for dialog in dialogs:
            catalog.add(dialog)
        client = RecordingTelemetryClient()

        catalog.telemetry_client = client

        assert all(dialog.telemetry_client is client for dialog in dialogs)

    def test_setting_none_resets_to_null_client(self, catalog: DialogCatalog) -> None:
        dialog = ScriptedDialog("a")
        catalog.add(dialog)
        catalog.telemetry_client = RecordingTelemetryClient()

        catalog.telemetry_client = None

        assert isinstance(catalog.telemetry_client, NullTelemetryClient)
        assert isinstance(dialog.telemetry_client, NullTelemetryClient)

    def test_catalogs_do_not_share_clients(self) -> None:
        """Each catalog owns its own default sink."""
        assert DialogCatalog().telemetry_client is not DialogCatalog().telemetry_client
