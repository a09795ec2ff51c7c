import pytest
import pywintypes

from wpsprint.core.errors import DriverError, PaperSizeNotFound, PrinterNotFound
from wpsprint.core.paper import (
    PaperSizeResolver,
    PrinterCapability,
    list_paper_sizes,
    resolve_paper_id,
)
from fakes import FakePrinterRegistry, office_printer


def test_resolve_known_paper():
    capability = resolve_paper_id("Office Laser", "A4", registry=office_printer())
    assert capability == PrinterCapability(paper_id=9, paper_name="A4")


def test_resolve_pairs_by_index():
    capability = resolve_paper_id("Office Laser", "Letter", registry=office_printer())
    assert capability.paper_id == 1


def test_resolve_unknown_paper():
    with pytest.raises(PaperSizeNotFound) as exc_info:
        resolve_paper_id("Office Laser", "Legal", registry=office_printer())
    assert exc_info.value.paper_name == "Legal"


def test_resolve_is_case_sensitive():
    with pytest.raises(PaperSizeNotFound):
        resolve_paper_id("Office Laser", "a4", registry=office_printer())


def test_resolve_uses_default_printer_when_unnamed():
    registry = office_printer(default="Label Printer")
    capability = resolve_paper_id(None, "4x6", registry=registry)
    assert capability.paper_id == 256


def test_no_printer_and_no_default():
    with pytest.raises(DriverError):
        resolve_paper_id(None, "A4", registry=office_printer(default=None))


def test_unknown_printer():
    with pytest.raises(PrinterNotFound):
        resolve_paper_id("Nowhere", "A4", registry=office_printer())


def test_zero_papers_is_driver_error():
    registry = FakePrinterRegistry({"Empty": ("LPT1:", [], [])}, last_error=1784)
    with pytest.raises(DriverError) as exc_info:
        resolve_paper_id("Empty", "A4", registry=registry)
    assert exc_info.value.error_code == 1784


@pytest.mark.parametrize("ids, names", [
    ([9, 1, 5], ["A4", "Letter"]),
    ([9], ["A4", "Letter"]),
])
def test_mismatched_tables_are_driver_error(ids, names):
    registry = FakePrinterRegistry({"Broken": ("LPT1:", ids, names)})
    with pytest.raises(DriverError):
        resolve_paper_id("Broken", "Letter", registry=registry)


def test_query_failure_is_driver_error():
    class FailingRegistry(FakePrinterRegistry):
        def device_capabilities(self, printer_name, port, capability):
            raise pywintypes.error(1801, "DeviceCapabilities", "The printer name is invalid.")

    registry = FailingRegistry({"Office Laser": ("Ne01:", [9], ["A4"])})
    with pytest.raises(DriverError):
        resolve_paper_id("Office Laser", "A4", registry=registry)


def test_trailing_nuls_are_stripped():
    registry = FakePrinterRegistry({"Office Laser": ("Ne01:", [9], ["A4\x00\x00"])})
    assert resolve_paper_id("Office Laser", "A4", registry=registry).paper_id == 9


def test_list_paper_sizes():
    capabilities = list_paper_sizes("Office Laser", registry=office_printer())
    assert [(c.paper_id, c.paper_name) for c in capabilities] == [(9, "A4"), (1, "Letter")]


def test_resolver_queries_with_printer_port():
    calls = []

    class RecordingRegistry(FakePrinterRegistry):
        def device_capabilities(self, printer_name, port, capability):
            calls.append((printer_name, port, capability))
            return super().device_capabilities(printer_name, port, capability)

    resolver = PaperSizeResolver(RecordingRegistry({"Office Laser": ("Ne01:", [9], ["A4"])}))
    resolver.resolve("Office Laser", "A4")

    assert calls == [("Office Laser", "Ne01:", 2), ("Office Laser", "Ne01:", 16)]
