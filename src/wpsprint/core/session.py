"""
Lifecycle of one WPS automation session.

    Created -> ApplicationAcquired -> DocumentOpened -> Configured -> Printed
                                                                       |
    (any state, on success or failure) -----------------------------> Released

`PrintSession` is a context manager: leaving the `with` block always runs
`release()`, which attempts every cleanup step on its own and never raises.
"""
import gc
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Optional

import win32com.client

from .base import DocumentDriver
from .errors import (
    AutomationUnavailable,
    CleanupWarning,
    DocumentOpenFailed,
    PaperSizeError,
    PrinterNotFound,
    PrintFailed,
)
from .paper import PaperSizeResolver, PrinterCapability
from .printers import PrinterRegistry
from ..config import PrintJobConfig
from ..utils.logger import logger


class SessionState(str, Enum):
    CREATED = "created"
    APPLICATION_ACQUIRED = "application_acquired"
    DOCUMENT_OPENED = "document_opened"
    CONFIGURED = "configured"
    PRINTED = "printed"
    RELEASED = "released"


class PrintSession:
    def __init__(
        self,
        driver: DocumentDriver,
        registry: Optional[PrinterRegistry] = None,
        resolver: Optional[PaperSizeResolver] = None,
    ):
        self.driver = driver
        self.registry = registry or PrinterRegistry()
        self.resolver = resolver or PaperSizeResolver(self.registry)
        self.state = SessionState.CREATED
        self.application: Any = None
        self.document: Any = None
        self.paper: Optional[PrinterCapability] = None
        self.cleanup_warnings: List[CleanupWarning] = []

    def __enter__(self) -> "PrintSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False

    def acquire(self) -> None:
        self._expect(SessionState.CREATED, "acquire the application")
        entry_point = self.driver.spec.entry_point
        try:
            app = win32com.client.Dispatch(entry_point)
        except Exception as e:
            raise AutomationUnavailable(f"Failed to start '{entry_point}': {e}") from e
        if app is None:
            raise AutomationUnavailable(f"'{entry_point}' returned no application object")

        self.application = app
        try:
            app.Visible = False
        except Exception as e:
            raise AutomationUnavailable(f"'{entry_point}' is not usable: {e}") from e
        try:
            app.DisplayAlerts = False
        except Exception as e:
            logger.debug(f"Could not disable alerts: {e}")

        self.state = SessionState.APPLICATION_ACQUIRED
        logger.debug(f"Started {entry_point}")

    def open(self, file_path: Path) -> None:
        self._expect(SessionState.APPLICATION_ACQUIRED, "open a document")
        try:
            document = self.driver.open(self.application, file_path)
        except Exception as e:
            raise DocumentOpenFailed(f"Failed to open '{file_path}': {e}") from e
        if document is None:
            raise DocumentOpenFailed(f"Failed to open '{file_path}': no document returned")

        self.document = document
        self.state = SessionState.DOCUMENT_OPENED
        logger.debug(f"Opened {file_path}")

    def configure(self, job: PrintJobConfig) -> None:
        self._expect(SessionState.DOCUMENT_OPENED, "configure the printer")

        if job.printer_name:
            self.driver.apply_printer(self.application, job.printer_name, self.registry)

        if job.page_size:
            self._apply_paper_size(job.printer_name, job.page_size)

        code = self.driver.ORIENTATION_CODES[job.orientation]
        try:
            for page_setup in self.driver.page_setups(self.document):
                page_setup.Orientation = code
        except Exception as e:
            raise PrintFailed(f"Failed to set orientation to {job.orientation.value}: {e}") from e

        self.state = SessionState.CONFIGURED
        logger.debug(f"Configured: printer={job.printer_name or '(default)'}, "
                     f"paper={self.paper.paper_name if self.paper else '(default)'}, "
                     f"orientation={job.orientation.value}")

    def print(self) -> None:
        self._expect(SessionState.CONFIGURED, "print")
        try:
            self.driver.print_out(self.document)
        except Exception as e:
            raise PrintFailed(f"Print failed: {e}") from e
        self.state = SessionState.PRINTED

    def release(self) -> None:
        """
        Close the document, quit the application and drop every COM reference.

        Each step is attempted even if an earlier one failed. Failures are
        collected in `cleanup_warnings`. Calling this more than once is a no-op.
        """
        if self.state is SessionState.RELEASED:
            return

        if self.document is not None:
            self._attempt("mark document clean", lambda: self.driver.mark_clean(self.document))
            self._attempt("close document", lambda: self.driver.close(self.document))
            self.document = None

        if self.application is not None:
            self._attempt("quit application", lambda: self.application.Quit())
            self.application = None

        self._attempt("reclaim automation references", gc.collect)
        self.state = SessionState.RELEASED

    def _apply_paper_size(self, printer_name: Optional[str], paper_name: str) -> None:
        try:
            capability = self.resolver.resolve(printer_name, paper_name)
        except (PaperSizeError, PrinterNotFound) as e:
            logger.warning(f"{e}. Printing with the driver's current paper size.")
            return

        try:
            for page_setup in self.driver.page_setups(self.document):
                page_setup.PaperSize = capability.paper_id
        except Exception as e:
            logger.warning(f"Could not apply paper size '{paper_name}' (id {capability.paper_id}): {e}")
            return
        self.paper = capability

    def _attempt(self, step: str, action: Callable[[], Any]) -> None:
        try:
            action()
        except Exception as e:
            # the traceback pins the frames that still hold the COM objects
            warning = CleanupWarning(step, e.with_traceback(None))
            self.cleanup_warnings.append(warning)
            logger.warning(str(warning))

    def _expect(self, state: SessionState, action: str) -> None:
        if self.state is not state:
            raise RuntimeError(f"Cannot {action} in state '{self.state.value}'")
