from pathlib import Path
from typing import Dict, Optional, Type, Union

import pythoncom

from .base import DocumentDriver
from .classifier import DocumentKind, DocumentTypeSpec, classify
from .install import locate_executable
from .printers import PrinterRegistry
from .session import PrintSession
from .spreadsheet import SpreadsheetDriver
from .writer import WriterDriver
from ..config import Orientation, PrintJobConfig
from ..utils.logger import logger

DRIVERS: Dict[DocumentKind, Type[DocumentDriver]] = {
    DocumentKind.SPREADSHEET: SpreadsheetDriver,
    DocumentKind.WORD_PROCESSOR: WriterDriver,
}


def get_driver(spec: DocumentTypeSpec) -> DocumentDriver:
    return DRIVERS[spec.kind]()


def orientation_code(kind: DocumentKind, orientation: Union[str, Orientation]) -> int:
    """Numeric PageSetup.Orientation value for a document kind."""
    return DRIVERS[kind].ORIENTATION_CODES[Orientation.parse(orientation)]


class PrintController:
    """
    Prints one document: classify, locate WPS, then drive a PrintSession.

    Args:
        install_dir: WPS install directory; read from the registry when omitted.
        registry: Printer registry used for lookups and default-printer changes.
    """

    def __init__(self, install_dir: Optional[Path] = None, registry: Optional[PrinterRegistry] = None):
        self.install_dir = install_dir
        self.registry = registry or PrinterRegistry()
        self.session: Optional[PrintSession] = None

    def run(self, job: PrintJobConfig) -> PrintSession:
        """
        Print `job.file_path`.

        Returns:
            The released session, in which `paper` and `cleanup_warnings`
            describe what happened.

        Raises:
            WpsPrintError: the first fatal error. Cleanup has already run.
        """
        spec = classify(job.file_path)
        logger.info(f"Printing '{job.file_path.name}' with {spec.entry_point}")
        locate_executable(spec, self.install_dir)

        # Ensure CoInitialize is called for this thread
        pythoncom.CoInitialize()
        try:
            with PrintSession(get_driver(spec), self.registry) as session:
                self.session = session
                try:
                    session.acquire()
                    session.open(job.file_path)
                    session.configure(job)
                    session.print()
                except Exception as e:
                    logger.error(f"Failed to print {job.file_path.name}: {e}")
                    raise
        finally:
            pythoncom.CoUninitialize()

        logger.success(f"Sent '{job.file_path.name}' to the printer")
        return session
