"""Exchange models: a request paired with its received response."""

import json
from http import HTTPStatus
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from pydantic import BaseModel, ConfigDict, Field

from httpreport.models.content import EmptyBody, RequestBody
from httpreport.models.headers import HttpHeaders
from httpreport.models.hints import PrintHint, default_print_hint


class RequestConfig(BaseModel):
    """Per-request configuration carried along with the exchange."""

    model_config = ConfigDict(frozen=True)

    print_hint: PrintHint = Field(default_factory=default_print_hint)
    print_debug_messages: bool = False


class RequestData(BaseModel):
    """Outgoing HTTP request data."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: HttpHeaders = HttpHeaders({})  # Transport headers only
    body: RequestBody = EmptyBody()
    config: RequestConfig = Field(default_factory=RequestConfig)


class Exchange(BaseModel):
    """A completed request/response pair."""

    model_config = ConfigDict(frozen=True)

    request: RequestData
    version: str = "1.1"
    status_code: int
    reason: str | None = None
    headers: HttpHeaders = HttpHeaders({})
    content_headers: HttpHeaders = HttpHeaders({})
    content: bytes = b""

    @property
    def print_hint(self) -> PrintHint:
        """The print hint attached to the request."""
        return self.request.config.print_hint

    @property
    def status_text(self) -> str:
        """Reason phrase for the status code."""
        if self.reason:
            return self.reason
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:
            return "Unknown"

    @property
    def content_type(self) -> str:
        """The response content type, or empty string."""
        value = self.content_headers.get_first("Content-Type")
        if value is None:
            value = self.headers.get_first("Content-Type")
        return value or ""

    @property
    def charset(self) -> str:
        """Charset parameter of the content type, defaulting to utf-8."""
        for param in self.content_type.split(";")[1:]:
            key, _, value = param.partition("=")
            if key.strip().lower() == "charset" and value.strip():
                return value.strip().strip('"')
        return "utf-8"

    def to_text(self) -> str:
        """Decode the response content.

        Raises:
            UnicodeDecodeError: If the content is not valid in its charset
            LookupError: If the charset is unknown
        """
        return self.content.decode(self.charset)

    def to_formatted_text(self) -> str:
        """Decode the response content and pretty-print it per content type."""
        text = self.to_text()
        media_type = self.content_type.split(";")[0].strip().lower()
        if "json" in media_type:
            return _format_json(text)
        if "xml" in media_type:
            return _format_xml(text)
        return text


def _format_json(text: str) -> str:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return text  # Keep original if not valid JSON
    return json.dumps(parsed, indent=2, ensure_ascii=False)


def _format_xml(text: str) -> str:
    try:
        document = minidom.parseString(text)
    except ExpatError:
        return text
    pretty = document.toprettyxml(indent="  ")
    # minidom adds an XML declaration and blank lines
    lines = [line for line in pretty.split("\n") if line.strip()]
    if lines and lines[0].startswith("<?xml") and not text.lstrip().startswith("<?xml"):
        lines = lines[1:]
    return "\n".join(lines)
