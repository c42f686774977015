"""Mini README: Wire a ledger controller to configured collaborators.

Both the web dashboard and the console build their controller here so the
store location, storage key and palette always come from the same
settings object.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..charts import MatplotlibChartRenderer, SvgCanvas
from ..configuration import ExpenseTrackerSettings, get_settings
from ..ledger import LedgerController, LedgerDisplay, LedgerRepository
from ..logging_utils import get_logger
from ..storage import JsonFileStore, KeyValueStore

LOGGER = get_logger(__name__)


def build_controller(
    display: LedgerDisplay,
    *,
    settings: Optional[ExpenseTrackerSettings] = None,
    store: Optional[KeyValueStore] = None,
) -> Tuple[LedgerController, SvgCanvas]:
    """Create an initialised controller and the canvas its chart is drawn on."""

    settings = settings or get_settings()
    if store is None:
        store = JsonFileStore(settings.storage_path)
        LOGGER.debug("Using JSON store at %s", settings.storage_path)
    canvas = SvgCanvas()
    controller = LedgerController(
        display,
        LedgerRepository(store, key=settings.storage_key),
        MatplotlibChartRenderer(canvas),
        palette=settings.palette,
    )
    controller.initialize()
    return controller, canvas
