"""Printer service rendering an exchange as a text report."""

import io
from typing import Any

from httpreport.models.content import (
    BytesContent,
    EmptyBody,
    FileContent,
    FormUrlEncodedContent,
    MultipartBody,
    RequestBody,
    SingleBody,
    StreamContent,
    TextContent,
)
from httpreport.models.exchange import Exchange
from httpreport.models.output import debug_log

CONTENT_INDICATOR = "===content==="


class PrinterService:
    """Service for formatting exchanges as text reports."""

    def format_exchange(self, exchange: Exchange) -> str:
        """Format an exchange as a report.

        Args:
            exchange: The exchange to format

        Returns:
            The report text
        """
        debug = exchange.request.config.print_debug_messages
        debug_log(
            f"print: {exchange.request.method} {exchange.request.url} -> {exchange.status_code}",
            debug,
        )

        lines: list[str] = [""]
        lines.extend(self._format_request(exchange))
        lines.extend(self._format_response(exchange, debug))
        return "\n".join(lines)

    def _format_request(self, exchange: Exchange) -> list[str]:
        """Build the request section lines."""
        request = exchange.request
        hint = request.config.print_hint.request_print_hint

        lines = self._build_section("REQUEST")
        lines.append(f"{request.method.upper()} {request.url} HTTP/{exchange.version}")

        if hint.print_header:
            headers: list[tuple[str, list[str]]] = list(request.headers.root.items())
            headers.extend(request.body.headers.root.items())
            if isinstance(request.body, MultipartBody):
                for part in request.body.parts:
                    headers.extend(part.headers.root.items())
            lines.extend(self._format_headers(headers))

        if hint.print_body:
            lines.append(CONTENT_INDICATOR)
            lines.append(self._format_body(request.body))

        lines.append("")
        return lines

    def _format_response(self, exchange: Exchange, debug: bool = False) -> list[str]:
        """Build the response section lines."""
        hint = exchange.request.config.print_hint.response_print_hint

        lines = self._build_section("RESPONSE")
        lines.append(f"HTTP/{exchange.version} {exchange.status_code} {exchange.status_text}")

        if hint.print_header:
            headers = list(exchange.headers.root.items())
            headers.extend(exchange.content_headers.root.items())
            lines.extend(self._format_headers(headers))

        content_hint = hint.print_content
        if content_hint.is_enabled:
            try:
                text = exchange.to_formatted_text() if content_hint.format else exchange.to_text()
                if len(text) > content_hint.max_length:
                    debug_log(
                        f"print: content truncated from {len(text)} to "
                        f"{content_hint.max_length} chars",
                        debug,
                    )
                    text = text[: content_hint.max_length] + "\n..."
            except Exception as e:
                debug_log(f"print: reading content failed: {e!r}", debug)
                text = f"ERROR reading response content: {e!r}"
            lines.append(CONTENT_INDICATOR)
            lines.append(text)

        lines.append("")
        return lines

    def _build_section(self, title: str) -> list[str]:
        """Build a section title followed by a rule of the same length."""
        return [title, "-" * len(title)]

    def _format_headers(self, headers: list[tuple[str, list[str]]]) -> list[str]:
        """Format headers as an aligned two-column table.

        Args:
            headers: Header names with their values, from all sources

        Returns:
            One line per header, names padded to the longest name plus three
        """
        width = max((len(name) for name, _ in headers), default=0) + 3
        return [f"{name:<{width}}: {', '.join(values)}" for name, values in headers]

    def _format_body(self, body: RequestBody) -> str:
        """Format a request body.

        Args:
            body: The request body

        Returns:
            Body text, empty for an empty body
        """
        match body:
            case EmptyBody():
                return ""
            case SingleBody(content=content):
                return self._format_content_data(content)
            case MultipartBody(parts=parts):
                lines = ["::Multipart"]
                for part in parts:
                    lines.append(f"-------- {part.name}")
                    lines.append(f"Part content type: {part.content_type or ''}")
                    lines.append(self._format_content_data(part.content))
                return "\n".join(lines)
            case _:
                return f"::Unknown ({type(body).__name__})"

    def _format_content_data(self, content: object) -> str:
        """Format a single payload according to its kind."""
        match content:
            case TextContent(text=text):
                return text
            case BytesContent(data=data):
                return f"::ByteArray (length = {len(data)})"
            case StreamContent(stream=stream):
                return f"::Stream (length = {self._stream_length(stream)})"
            case FormUrlEncodedContent(fields=fields):
                lines = ["::FormUrlEncoded"]
                lines.extend(f"    {key} = {value}" for key, value in fields)
                return "\n".join(lines)
            case FileContent(file_name=file_name):
                return f"::File (name = {file_name})"
            case _:
                return f"::Unknown ({type(content).__name__})"

    def _stream_length(self, stream: Any) -> str:
        """Measure a stream without moving its position.

        Returns:
            The length as a string, or "?" when the stream can't seek
        """
        try:
            if not stream.seekable():
                return "?"
            position = stream.tell()
            length = stream.seek(0, io.SEEK_END)
            stream.seek(position)
        except (AttributeError, OSError, ValueError):
            return "?"
        return str(length)


def print_exchange(exchange: Exchange) -> str:
    """Render an exchange as a text report."""
    return PrinterService().format_exchange(exchange)

