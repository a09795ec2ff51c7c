"""
Paper size resolution against a printer driver's capability tables.

Logical names like "A4" are matched exactly (case-sensitive) against the
names the driver reports. There is no fuzzy fallback: printing on the
wrong paper stock is worse than printing on the driver default.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pywintypes

from .errors import DriverError, PaperSizeNotFound
from .printers import DC_PAPERNAMES, DC_PAPERS, PrinterRegistry
from ..utils.logger import logger


@dataclass(frozen=True)
class PrinterCapability:
    paper_id: int
    paper_name: str


class PaperSizeResolver:
    def __init__(self, registry: Optional[PrinterRegistry] = None):
        self.registry = registry or PrinterRegistry()

    def capabilities(self, printer_name: Optional[str] = None) -> List[PrinterCapability]:
        """
        Pair the driver's paper ids with its paper names by index.

        Args:
            printer_name: Installed printer; the OS default printer when omitted.

        Raises:
            PrinterNotFound: the printer is not installed.
            DriverError: the driver reports no papers or inconsistent tables.
        """
        printer_name = printer_name or self.registry.default_printer()
        if not printer_name:
            raise DriverError("No printer named and no default printer is configured")

        printer = self.registry.lookup(printer_name)

        paper_ids = self._query(printer.name, printer.port, DC_PAPERS)
        if len(paper_ids) <= 0:
            code = self.registry.last_error()
            raise DriverError(f"Printer '{printer.name}' reported no supported paper sizes", error_code=code)

        paper_names = self._query(printer.name, printer.port, DC_PAPERNAMES)
        if len(paper_names) != len(paper_ids):
            raise DriverError(
                f"Printer '{printer.name}' reported {len(paper_ids)} paper ids "
                f"but {len(paper_names)} paper names"
            )

        return [
            PrinterCapability(paper_id=int(paper_id), paper_name=str(name).rstrip("\x00"))
            for paper_id, name in zip(paper_ids, paper_names)
        ]

    def resolve(self, printer_name: Optional[str], paper_name: str) -> PrinterCapability:
        """
        Translate a logical paper name into the driver's native paper id.

        Raises:
            PaperSizeNotFound: no driver paper has exactly this name.
            DriverError, PrinterNotFound: see `capabilities`.
        """
        for capability in self.capabilities(printer_name):
            if capability.paper_name == paper_name:
                logger.debug(f"Resolved paper '{paper_name}' to id {capability.paper_id}")
                return capability
        raise PaperSizeNotFound(printer_name or "(default)", paper_name)

    def _query(self, printer_name: str, port: str, capability: int) -> Sequence:
        try:
            result = self.registry.device_capabilities(printer_name, port, capability)
        except pywintypes.error as e:
            raise DriverError(
                f"DeviceCapabilities query {capability} failed for '{printer_name}': {e}",
                error_code=getattr(e, "winerror", None),
            ) from e
        return list(result or [])


def resolve_paper_id(
    printer_name: Optional[str],
    paper_name: str,
    registry: Optional[PrinterRegistry] = None,
) -> PrinterCapability:
    return PaperSizeResolver(registry).resolve(printer_name, paper_name)


def list_paper_sizes(
    printer_name: Optional[str] = None,
    registry: Optional[PrinterRegistry] = None,
) -> List[PrinterCapability]:
    return PaperSizeResolver(registry).capabilities(printer_name)
