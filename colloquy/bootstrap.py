"""Bootstrap module for quick colloquy setup.

Wires configuration, logging, a dialog catalog, an in-memory state store
and a runner, primarily for notebooks and tests.

Example usage:

    from colloquy.bootstrap import bootstrap

    runner, ctx = bootstrap([GreetingDialog("greeting")])

    result = await runner.run(turn_context, "greeting")
"""

from collections.abc import Iterable
from dataclasses import dataclass

from colloquy.config import get_settings
from colloquy.config.settings import Settings
from colloquy.dialogs import Dialog, DialogCatalog, DialogRunner
from colloquy.observability.logging import get_logger, setup_logging
from colloquy.observability.telemetry import create_telemetry_client
from colloquy.state import InMemoryDialogStateStore

logger = get_logger(__name__)


@dataclass
class BootstrapContext:
    """Objects created by bootstrap, exposed for inspection in tests."""

    settings: Settings
    catalog: DialogCatalog
    store: InMemoryDialogStateStore


def bootstrap(
    dialogs: Iterable[Dialog] = (),
    settings: Settings | None = None,
) -> tuple[DialogRunner, BootstrapContext]:
    """Build a DialogRunner over an in-memory store.

    Args:
        dialogs: Dialogs to register in the catalog
        settings: Explicit settings; loaded from config files when omitted

    Returns:
        Tuple of (runner, context with the settings, catalog and store)
    """
    settings = settings or get_settings()
    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )

    catalog = DialogCatalog(
        dialogs,
        telemetry_client=create_telemetry_client(settings.dialogs.telemetry),
    )
    store = InMemoryDialogStateStore()
    runner = DialogRunner(
        catalog,
        store,
        state_key_prefix=settings.dialogs.state_key_prefix,
        record_metrics=settings.observability.metrics.enabled,
    )

    logger.info(
        "colloquy_bootstrapped",
        app_name=settings.app_name,
        dialogs=len(catalog),
        telemetry=settings.dialogs.telemetry,
    )
    return runner, BootstrapContext(settings=settings, catalog=catalog, store=store)
