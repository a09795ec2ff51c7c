import typer
import pywintypes
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .version import __version__
from .core.controller import PrintController
from .core.errors import WpsPrintError
from .core.paper import list_paper_sizes
from .core.printers import PrinterRegistry
from .utils.logger import setup_logger
from .config import CONFIG_FILE, PrintJobConfig, get_logging_config, get_print_defaults

app = typer.Typer(
    name="wpsprint",
    help="""
    [bold]wpsprint[/bold] - Print a document through WPS Office.

    [bold]Supported files:[/bold]
    - Spreadsheets (.xlsx, .xls, .et) via WPS Spreadsheets
    - Documents (.docx, .doc, .wps) via WPS Writer

    [bold]Note:[/bold]
    Printing a spreadsheet to a named printer makes it the system default printer.

    [bold]Logging:[/bold]
    Logs are written to the console and to files in the `logs/` directory.
    Check `config.yml` for log rotation settings.
    """,
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"[bold green]wpsprint[/bold green] version: {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the application version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """
    wpsprint - Print one document through WPS Office and exit.
    """
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def _setup_logging(config_path: Path, verbose: bool) -> None:
    logging_config = get_logging_config(config_path)
    if verbose:
        logging_config["level"] = "DEBUG"
    setup_logger(logging_config)


def _fail(error: Exception) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    raise typer.Exit(code=1)


@app.command("print")
def print_file(
    file_path: Path = typer.Argument(..., help="Path to the document to print"),
    printer: Optional[str] = typer.Option(None, "--printer", "-p", help="Printer name (default: system default printer)"),
    page_size: Optional[str] = typer.Option(None, "--page-size", "-s", help="Paper name as reported by the printer driver, e.g. A4"),
    orientation: Optional[str] = typer.Option(None, "--orientation", "-o", help="portrait or landscape (default: portrait)"),
    install_dir: Optional[Path] = typer.Option(None, "--install-dir", help="WPS Office install directory (default: read from registry)"),
    config_path: Path = typer.Option(CONFIG_FILE, "--config", "-c", help="Path to config.yml"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Print a single document. Exits 0 once the job is submitted, 1 on any error.
    """
    _setup_logging(config_path, verbose)
    try:
        defaults = get_print_defaults(config_path)
        job = PrintJobConfig.create(
            file_path,
            printer_name=printer or defaults.printer,
            page_size=page_size or defaults.page_size,
            orientation=orientation or defaults.orientation,
        )
        session = PrintController(install_dir or defaults.install_dir).run(job)
    except WpsPrintError as e:
        _fail(e)

    paper = session.paper.paper_name if session.paper else "driver default"
    console.print(
        f"[bold green]Printed[/bold green] {escape(job.file_path.name)} "
        f"({job.orientation.value}, paper: {escape(paper)})"
    )
    if session.cleanup_warnings:
        console.print(f"[yellow]{len(session.cleanup_warnings)} cleanup warning(s), see log.[/yellow]")


@app.command()
def printers(
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    List installed printers.
    """
    _setup_logging(CONFIG_FILE, verbose)
    table = Table(title="Installed Printers")
    table.add_column("Name", style="bold")
    table.add_column("Port")
    table.add_column("Default")

    try:
        installed = PrinterRegistry().list_printers()
    except pywintypes.error as e:
        _fail(e)

    for info in installed:
        table.add_row(escape(info.name), escape(info.port), "[green]yes[/green]" if info.is_default else "")
    console.print(table)


@app.command()
def papers(
    printer: Optional[str] = typer.Argument(None, help="Printer name (default: system default printer)"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    List the paper names and driver ids a printer supports.
    """
    _setup_logging(CONFIG_FILE, verbose)
    try:
        capabilities = list_paper_sizes(printer)
    except WpsPrintError as e:
        _fail(e)

    table = Table(title=f"Paper Sizes: {escape(printer or 'default printer')}")
    table.add_column("Id", justify="right")
    table.add_column("Name", style="bold")
    for capability in capabilities:
        table.add_row(str(capability.paper_id), escape(capability.paper_name))
    console.print(table)


if __name__ == "__main__":
    app()
