"""Main Typer application."""

import typer

from httpreport.cli.commands import show_exchange, show_help

app = typer.Typer(
    name="httpreport",
    help="Render stored HTTP request/response exchanges as readable reports.",
    no_args_is_help=True,
)

# Register commands
app.command("show", help="Print the report for an exchange JSON file")(show_exchange)
app.command("help", help="Show detailed help and examples")(show_help)


if __name__ == "__main__":
    app()
