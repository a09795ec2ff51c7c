"""
WPS Spreadsheets (et.exe) automation, driven through KET.Application.

The ET object model mirrors Excel's: workbooks, worksheets and a
PageSetup per worksheet.
"""
from pathlib import Path
from typing import Any, List

from .base import DocumentDriver
from .classifier import SPREADSHEET
from .printers import PrinterRegistry
from ..config import Orientation
from ..utils.logger import logger

# Constants from the ET/Excel Object Model
xlPortrait = 1
xlLandscape = 2


class SpreadsheetDriver(DocumentDriver):
    spec = SPREADSHEET
    ORIENTATION_CODES = {
        Orientation.PORTRAIT: xlPortrait,
        Orientation.LANDSCAPE: xlLandscape,
    }

    def open(self, app: Any, file_path: Path) -> Any:
        # UpdateLinks=0: don't prompt about external links
        return app.Workbooks.Open(str(file_path), UpdateLinks=0, ReadOnly=True)

    def apply_printer(self, app: Any, printer_name: str, registry: PrinterRegistry) -> None:
        # Workbook.PrintOut only targets the system default printer, so the
        # OS default is switched and deliberately left switched afterwards.
        logger.warning(f"Changing the system default printer to '{printer_name}' to print a spreadsheet")
        registry.set_default(printer_name)

    def page_setups(self, document: Any) -> List[Any]:
        return [sheet.PageSetup for sheet in document.Worksheets]

    def print_out(self, document: Any) -> None:
        document.PrintOut()

    def mark_clean(self, document: Any) -> None:
        document.Saved = True

    def close(self, document: Any) -> None:
        document.Close(SaveChanges=False)
