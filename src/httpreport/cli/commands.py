"""CLI command definitions."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from httpreport.cli.help import get_help
from httpreport.cli.options import (
    DebugOption,
    MaxLengthOption,
    NoFormatOption,
    NoRequestBodyOption,
    NoRequestHeaderOption,
    NoResponseHeaderOption,
    PresetOption,
)
from httpreport.repositories.files import ExchangeLoadError, load_exchange
from httpreport.services.printer import PrinterService
from httpreport.services.transformers import (
    HintTransformer,
    get_preset,
    no_request_body,
    no_request_header,
    no_response_content_formatting,
    no_response_header,
    show,
    transform_exchange,
)

console = Console()
err_console = Console(stderr=True)


def _build_transformers(
    preset: str | None = None,
    max_length: int | None = None,
    no_format: bool = False,
    no_req_header: bool = False,
    no_req_body: bool = False,
    no_resp_header: bool = False,
) -> list[HintTransformer]:
    """Build the hint transformers selected by CLI options."""
    transformers: list[HintTransformer] = []

    if preset is not None:
        transformers.append(get_preset(preset, max_length))
    elif max_length is not None:
        transformers.append(show(max_length))

    if no_format:
        transformers.append(no_response_content_formatting)
    if no_req_header:
        transformers.append(no_request_header)
    if no_req_body:
        transformers.append(no_request_body)
    if no_resp_header:
        transformers.append(no_response_header)

    return transformers


def show_exchange(
    file: Annotated[Path, typer.Argument(help="Exchange JSON file")],
    preset: PresetOption = None,
    max_length: MaxLengthOption = None,
    no_format: NoFormatOption = False,
    no_request_header: NoRequestHeaderOption = False,
    no_request_body: NoRequestBodyOption = False,
    no_response_header: NoResponseHeaderOption = False,
    debug: DebugOption = False,
) -> None:
    """Print the report for an exchange JSON file."""
    try:
        if debug:
            err_console.print("[dim][DEBUG] Debug mode enabled[/dim]")
            err_console.print(f"[dim][DEBUG] Loading {file}[/dim]")

        exchange = load_exchange(file)
        for transformer in _build_transformers(
            preset,
            max_length,
            no_format,
            no_request_header,
            no_request_body,
            no_response_header,
        ):
            exchange = transform_exchange(transformer, exchange, debug)

        if not exchange.print_hint.is_enabled:
            console.print_json(exchange.model_dump_json())
            return

        output = PrinterService().format_exchange(exchange)
        console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)

    except ExchangeLoadError as e:
        err_console.print(str(e), markup=False)
        raise typer.Exit(1) from None
    except ValueError as e:
        err_console.print(f"Error: {e}", markup=False)
        raise typer.Exit(1) from None


def show_help(
    command: Annotated[
        str | None,
        typer.Argument(help="Command to get help for"),
    ] = None,
) -> None:
    """Show detailed help and examples."""
    help_text = get_help(command)
    console.print(help_text)
