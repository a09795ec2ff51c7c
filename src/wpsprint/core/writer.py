from pathlib import Path
from typing import Any, List

from .base import DocumentDriver
from .classifier import WORD_PROCESSOR
from .errors import PrinterNotFound
from .printers import PrinterRegistry
from ..config import Orientation

# Constants from the WPS Writer/Word Object Model
wdOrientPortrait = 0
wdOrientLandscape = 1
wdDoNotSaveChanges = 0


class WriterDriver(DocumentDriver):
    """WPS Writer (wps.exe) automation, driven through KWps.Application."""
    spec = WORD_PROCESSOR
    ORIENTATION_CODES = {
        Orientation.PORTRAIT: wdOrientPortrait,
        Orientation.LANDSCAPE: wdOrientLandscape,
    }

    def open(self, app: Any, file_path: Path) -> Any:
        return app.Documents.Open(str(file_path), ReadOnly=True, Visible=False)

    def apply_printer(self, app: Any, printer_name: str, registry: PrinterRegistry) -> None:
        registry.lookup(printer_name)
        try:
            app.ActivePrinter = printer_name
        except Exception as e:
            raise PrinterNotFound(printer_name, {"reason": str(e)}) from e

    def page_setups(self, document: Any) -> List[Any]:
        return [document.PageSetup]

    def print_out(self, document: Any) -> None:
        document.PrintOut()

    def mark_clean(self, document: Any) -> None:
        document.Saved = True

    def close(self, document: Any) -> None:
        document.Close(SaveChanges=wdDoNotSaveChanges)
