"""
Access to the Windows printer registry through win32print.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pywintypes
import win32api
import win32print

from .errors import PrinterNotFound
from ..utils.logger import logger

# DeviceCapabilities query kinds (wingdi.h)
DC_PAPERS = 2
DC_PAPERNAMES = 16

PRINTER_ENUM_LOCAL = 2
PRINTER_ENUM_CONNECTIONS = 4


@dataclass(frozen=True)
class PrinterInfo:
    name: str
    port: str
    is_default: bool = False


class PrinterRegistry:
    """
    Thin wrapper over the spooler API.

    Every printer handle opened here is closed before the call returns.
    """

    def lookup(self, printer_name: str) -> PrinterInfo:
        """
        Find an installed printer and its port.

        Raises:
            PrinterNotFound: the spooler does not know the printer.
        """
        try:
            handle = win32print.OpenPrinter(printer_name)
        except pywintypes.error as e:
            logger.debug(f"OpenPrinter failed for '{printer_name}': {e}")
            raise PrinterNotFound(printer_name) from e

        try:
            # Level 5 is lightweight, fall back to level 2 for the port
            info = win32print.GetPrinter(handle, 5)
            port = info.get("pPortName", "")
            if not port:
                info = win32print.GetPrinter(handle, 2)
                port = info.get("pPortName", "")
        except pywintypes.error as e:
            raise PrinterNotFound(printer_name, {"reason": str(e)}) from e
        finally:
            win32print.ClosePrinter(handle)

        return PrinterInfo(name=printer_name, port=port)

    def default_printer(self) -> Optional[str]:
        try:
            return win32print.GetDefaultPrinter() or None
        except pywintypes.error as e:
            logger.debug(f"No default printer: {e}")
            return None

    def set_default(self, printer_name: str) -> None:
        """
        Make `printer_name` the OS default printer.

        This change is persistent and outlives the process.
        """
        self.lookup(printer_name)
        try:
            win32print.SetDefaultPrinter(printer_name)
        except pywintypes.error as e:
            raise PrinterNotFound(printer_name, {"reason": str(e)}) from e
        logger.info(f"Default printer set to '{printer_name}'")

    def list_printers(self) -> List[PrinterInfo]:
        default = self.default_printer()
        printers = win32print.EnumPrinters(PRINTER_ENUM_LOCAL | PRINTER_ENUM_CONNECTIONS, None, 2)
        return [
            PrinterInfo(
                name=p.get("pPrinterName", ""),
                port=p.get("pPortName", ""),
                is_default=p.get("pPrinterName") == default,
            )
            for p in printers
        ]

    def device_capabilities(self, printer_name: str, port: str, capability: int) -> Sequence:
        """Run a DeviceCapabilities query. pywin32 owns and frees the result buffer."""
        return win32print.DeviceCapabilities(printer_name, port, capability)

    def last_error(self) -> int:
        return win32api.GetLastError()
