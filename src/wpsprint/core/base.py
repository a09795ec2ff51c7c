from typing import Any, Dict, List, Protocol
from pathlib import Path

from .classifier import DocumentTypeSpec
from .printers import PrinterRegistry
from ..config import Orientation


class DocumentDriver(Protocol):
    """
    Per-kind view of a WPS automation application.

    The print session runs the same steps for every document kind; a
    driver supplies the object-model calls and numeric codes for one kind.
    """
    spec: DocumentTypeSpec
    ORIENTATION_CODES: Dict[Orientation, int]

    def open(self, app: Any, file_path: Path) -> Any:
        """Open `file_path` and return the document handle (or None)."""
        ...

    def apply_printer(self, app: Any, printer_name: str, registry: PrinterRegistry) -> None:
        """
        Route the next print to `printer_name`.

        Raises:
            PrinterNotFound: the printer is not installed.
        """
        ...

    def page_setups(self, document: Any) -> List[Any]:
        """Every PageSetup object that must receive paper size and orientation."""
        ...

    def print_out(self, document: Any) -> None:
        ...

    def mark_clean(self, document: Any) -> None:
        """Flag the document as unmodified so closing never prompts to save."""
        ...

    def close(self, document: Any) -> None:
        ...
