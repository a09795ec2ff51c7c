"""
Exceptions raised while printing a document.

Exception Hierarchy:
    WpsPrintError (base)
    ├── ValidationError          - bad input, nothing acquired yet
    │   └── UnsupportedType      - file extension has no document type
    ├── InstallationNotFound     - executable missing from install directory
    ├── AutomationUnavailable    - automation entry point could not be created
    ├── DocumentOpenFailed       - application returned no document
    ├── PrinterNotFound          - named printer is not installed
    ├── PrintFailed              - print call raised
    ├── PaperSizeError           - paper size could not be resolved (non-fatal)
    │   ├── PaperSizeNotFound
    │   └── DriverError
    └── CleanupWarning           - release step failed (logged, never raised)
"""

from typing import Any, Dict, Iterable, Optional


class WpsPrintError(Exception):
    """Base exception for all wpsprint errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(WpsPrintError):
    """Input rejected before any resource was acquired."""
    pass


class UnsupportedType(ValidationError):
    def __init__(self, extension: str, supported: Iterable[str]):
        self.extension = extension
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported file type '{extension or '(none)'}'. "
            f"Supported: {', '.join(self.supported)}"
        )


class InstallationNotFound(WpsPrintError):
    pass


class AutomationUnavailable(WpsPrintError):
    pass


class DocumentOpenFailed(WpsPrintError):
    pass


class PrinterNotFound(WpsPrintError):
    def __init__(self, printer_name: str, details: Optional[Dict[str, Any]] = None):
        self.printer_name = printer_name
        super().__init__(f"Printer not found: '{printer_name}'", details)


class PrintFailed(WpsPrintError):
    pass


class PaperSizeError(WpsPrintError):
    """
    Paper size could not be resolved for a printer.

    Callers treat this as degraded rather than fatal: the job prints at the
    driver's current paper size.
    """
    pass


class PaperSizeNotFound(PaperSizeError):
    def __init__(self, printer_name: str, paper_name: str):
        self.printer_name = printer_name
        self.paper_name = paper_name
        super().__init__(f"Paper size '{paper_name}' is not supported by printer '{printer_name}'")


class DriverError(PaperSizeError):
    def __init__(self, message: str, error_code: Optional[int] = None):
        self.error_code = error_code
        details = {"error_code": error_code} if error_code is not None else None
        super().__init__(message, details)


class CleanupWarning(WpsPrintError):
    """A release step failed. Collected by the session, never raised."""

    def __init__(self, step: str, cause: BaseException):
        self.step = step
        self.cause = cause
        super().__init__(f"Cleanup step '{step}' failed: {cause}")
