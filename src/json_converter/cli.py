"""Command-line interface for the JSON Converter."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .converter import JSONConverter
from .error_handler import ErrorHandler
from .types import ConversionOptions, JSONSyntaxError, ConversionError


def _read_input(source: Optional[str]) -> str:
    """Read JSON from stdin, a literal JSON argument, or a file path."""
    if source is None or source == "-":
        stdin = click.get_text_stream("stdin")
        if stdin.isatty():
            raise click.UsageError(
                "No input provided.\n"
                "Usage: json-converter <input.json> --format <format>\n"
                "       cat data.json | json-converter --format csv"
            )
        return stdin.read().strip()

    if source.startswith("{") or source.startswith("["):
        return source

    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Cannot read file: {source} ({e.strerror})")


def _fail(message: str, detail: Optional[str] = None) -> None:
    click.echo(f"❌ Error: {message}", err=True)
    if detail:
        click.echo(f"   {detail}", err=True)
    sys.exit(1)


@click.command()
@click.version_option(version=__version__)
@click.argument("source", required=False)
@click.option("--format", "-f", "format_name", default="yaml", show_default=True,
              help="Output format")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
              help="Output file (default: stdout)")
@click.option("--indent", "-i", default=2, show_default=True, type=int,
              help="Indentation for pretty formats")
@click.option("--table-name", "-t", default="data", show_default=True,
              help="Table name for SQL")
@click.option("--root-name", "-r", default=None,
              help="Root name for XML (default: root) and TypeScript (default: Data)")
@click.option("--list-formats", is_flag=True, help="List all supported formats")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def main(source: Optional[str], format_name: str, output: Optional[Path], indent: int,
         table_name: str, root_name: Optional[str], list_formats: bool, verbose: bool):
    """Convert JSON from SOURCE (file, JSON string, or '-' for stdin) to another format."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    converter = JSONConverter()
    error_handler = ErrorHandler()

    if list_formats:
        formats = converter.get_supported_formats()
        width = max(len(name) for name in formats)
        click.echo("\nSupported formats:\n")
        for name in formats:
            click.echo(f"{name.ljust(width + 2)}  # {converter.get_format_description(name)}")
        click.echo()
        return

    format_id = format_name.lower()
    if not converter.is_format_supported(format_id):
        _fail(f"Unsupported format '{format_id}'", "Run with --list-formats to see all options")

    options = ConversionOptions(
        format=format_id,
        indent=indent,
        table_name=table_name,
        root_name=root_name,
        input=source,
        output=str(output) if output else None,
    )
    options_validation = error_handler.validate_options(options)
    if not options_validation.is_valid:
        _fail("Invalid options", "; ".join(error.message for error in options_validation.errors))

    json_text = _read_input(source)
    input_validation = error_handler.validate_input(json_text)
    if not input_validation.is_valid:
        detail = "; ".join(
            f"{error.message} ({error.location})" if error.location else error.message
            for error in input_validation.errors
        )
        _fail("Invalid JSON input", detail)

    try:
        result = converter.convert(json_text, format_id, options)
    except (ConversionError, JSONSyntaxError, RecursionError) as e:
        response = error_handler.handle_conversion_error(e)
        _fail(f"Conversion failed: {e}", response.suggested_action)

    if output:
        output.write_text(result, encoding="utf-8")
        click.echo(f"✅ Output written to {output}", err=True)
    else:
        click.echo(result)


if __name__ == "__main__":
    main()
