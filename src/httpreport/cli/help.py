"""Help content for httpreport CLI."""

OVERVIEW = """
httpreport - HTTP exchange report printer

Render a stored HTTP request/response exchange as a readable text report.
In IPython or Jupyter, call httpreport.init() once and every Exchange result
is displayed as a report automatically.

COMMANDS:
  show    Print the report for an exchange JSON file
  help    Show detailed help and examples

QUICK START:
  # Full report
  httpreport show exchange.json

  # Headers only
  httpreport show exchange.json --preset header-only

  # First 200 characters of the response content
  httpreport show exchange.json -n 200

For more help on a specific command, use: httpreport help <command>
"""

SHOW_HELP = """
SHOW COMMAND

Print the report for an exchange stored as JSON.

USAGE:
  httpreport show FILE [OPTIONS]

OPTIONS:
  -p, --preset NAME         raw, header-only, preview, expand or show
  -n, --max-length N        Show response content up to N characters
  --no-format               Print response content as raw text
  --no-request-header       Omit request headers
  --no-request-body         Omit the request body
  --no-response-header      Omit response headers
  --debug                   Enable debug logging to stderr

PRESETS:
  raw           Skip the report, print the exchange record as JSON
  header-only   Headers without response content
  preview       Response content at the configured max length
  expand        Response content without a length limit
  show          Response content up to --max-length characters

EXAMPLES:
  httpreport show exchange.json --preset expand
  httpreport show exchange.json --no-request-body --no-format

CONFIGURATION:
  Defaults can be set with HTTPREPORT_* environment variables or a .env file,
  for example HTTPREPORT_RESPONSE_CONTENT_MAX_LENGTH=500.
"""

COMMAND_HELP = {
    "show": SHOW_HELP,
}


def get_help(command: str | None = None) -> str:
    """Get help text for a command or overview.

    Args:
        command: Optional command name

    Returns:
        Help text string
    """
    if command is None:
        return OVERVIEW.strip()

    help_text = COMMAND_HELP.get(command.lower())
    if help_text is None:
        return f"Unknown command: {command}\n\nAvailable commands: show"

    return help_text.strip()
