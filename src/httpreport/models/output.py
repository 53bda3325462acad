"""Output models and debug helpers."""

import sys

from pydantic import BaseModel, ConfigDict

from httpreport.models.exchange import Exchange


class PrintableExchange(BaseModel):
    """Marker wrapping an exchange that should be shown as a report."""

    model_config = ConfigDict(frozen=True)

    exchange: Exchange


def debug_log(message: str, enabled: bool = True) -> None:
    """Print a debug message to stderr if enabled."""
    if enabled:
        print(f"[DEBUG] {message}", file=sys.stderr)
