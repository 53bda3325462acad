"""HTTP header collection model."""

from pydantic import RootModel


class HttpHeaders(RootModel[dict[str, list[str]]]):
    """HTTP headers, each name mapped to one or more values."""

    root: dict[str, list[str]] = {}

    def get_first(self, name: str) -> str | None:
        """Return the first value of a header, matching the name case-insensitively."""
        for key, values in self.root.items():
            if key.lower() == name.lower() and values:
                return values[0]
        return None
