"""
CLI Entry Point: Exposes varnorm functionality via command line.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import OutputFormat
from .errors import AlleleValidationError
from .record import normalize_variant
from .utils.logging import setup_logging

app = typer.Typer(help="varnorm: Minimal-form normalization of variant records")


@app.callback()
def main():
    """
    varnorm: Minimal-form normalization of variant records
    """
    pass


@app.command()
def version():
    """
    Show the varnorm version.
    """
    Console().print(f"varnorm {__version__}")


@app.command()
def normalize(
    position: int = typer.Argument(..., min=0, help="1-based position of the first REF base"),
    reference: str = typer.Argument(..., help="Reference allele"),
    alternate: str = typer.Argument(..., help="Alternate allele"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT, "--format", help="Output format (text or json)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-V", help="Enable verbose debug logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Also write log messages to this file"
    ),
):
    """
    Normalize a single variant record and report its type.
    """
    setup_logging(verbose=verbose, log_file=log_file)

    console = Console()

    try:
        variant = normalize_variant(position, reference, alternate)
    except AlleleValidationError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        typer.echo(variant.model_dump_json(indent=2))
        return

    table = Table(title="Variant normalization")
    table.add_column("Record")
    table.add_column("POS", justify="right")
    table.add_column("REF")
    table.add_column("ALT")
    table.add_row("original", str(position), reference, alternate)
    table.add_row("normalized", str(variant.pos), variant.ref, variant.alt)
    console.print(table)

    vtype = variant.variant_type.value if variant.variant_type else "."
    console.print(f"Type: [bold]{vtype}[/bold]")


if __name__ == "__main__":
    app()
