"""Exchange records stored as JSON files."""

from pathlib import Path

from pydantic import ValidationError

from httpreport.models.exchange import Exchange


class ExchangeLoadError(Exception):
    """Raised when an exchange file cannot be read."""

    def __init__(self, path: Path, reason: str, original_error: Exception | None = None):
        self.path = path
        self.original_error = original_error
        super().__init__(f"Cannot load exchange from {path}: {reason}")


def load_exchange(path: Path | str) -> Exchange:
    """Load an exchange from a JSON document.

    Args:
        path: Path of the JSON file

    Returns:
        The parsed exchange

    Raises:
        ExchangeLoadError: If the file is missing or not a valid exchange
    """
    path = Path(path)
    try:
        data = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ExchangeLoadError(path, e.strerror or str(e), e) from e

    try:
        return Exchange.model_validate_json(data)
    except ValidationError as e:
        errors = e.errors()
        first = errors[0]
        location = ".".join(str(item) for item in first["loc"]) or "document"
        reason = f"{first['msg']} at {location}"
        if len(errors) > 1:
            reason += f" (and {len(errors) - 1} more)"
        raise ExchangeLoadError(path, reason, e) from e
