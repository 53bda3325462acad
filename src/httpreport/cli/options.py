"""Reusable CLI option definitions."""

from typing import Annotated

import typer

PresetOption = Annotated[
    str | None,
    typer.Option(
        "--preset",
        "-p",
        help="Print preset: raw, header-only, preview, expand or show",
    ),
]

MaxLengthOption = Annotated[
    int | None,
    typer.Option(
        "--max-length",
        "-n",
        min=0,
        help="Show response content up to N characters",
    ),
]

NoFormatOption = Annotated[
    bool,
    typer.Option(
        "--no-format",
        help="Print response content as raw text",
    ),
]

NoRequestHeaderOption = Annotated[
    bool,
    typer.Option(
        "--no-request-header",
        help="Omit request headers",
    ),
]

NoRequestBodyOption = Annotated[
    bool,
    typer.Option(
        "--no-request-body",
        help="Omit the request body",
    ),
]

NoResponseHeaderOption = Annotated[
    bool,
    typer.Option(
        "--no-response-header",
        help="Omit response headers",
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Enable debug logging to stderr",
    ),
]
