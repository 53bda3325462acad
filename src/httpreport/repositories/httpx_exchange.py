"""Build exchange records from completed httpx responses."""

from urllib.parse import parse_qsl

import httpx

from httpreport.models.content import (
    BytesContent,
    EmptyBody,
    FormUrlEncodedContent,
    RequestBody,
    SingleBody,
    TextContent,
)
from httpreport.models.exchange import Exchange, RequestConfig, RequestData
from httpreport.models.headers import HttpHeaders

TEXT_MEDIA_TYPES = ("application/json", "application/xml", "application/javascript")


def _split_headers(headers: httpx.Headers) -> tuple[HttpHeaders, HttpHeaders]:
    """Split headers into transport headers and content headers.

    Returns:
        Tuple of (transport, content) headers with lowercase names
    """
    transport: dict[str, list[str]] = {}
    content: dict[str, list[str]] = {}
    for name, value in headers.multi_items():
        target = content if name.lower().startswith("content-") else transport
        target.setdefault(name, []).append(value)
    return HttpHeaders(transport), HttpHeaders(content)


def _is_text(media_type: str) -> bool:
    return media_type.startswith("text/") or media_type in TEXT_MEDIA_TYPES or "+json" in media_type


def _body_from_request(request: httpx.Request, content_headers: HttpHeaders) -> RequestBody:
    """Derive a body model from the bytes sent with a request."""
    data = request.content
    if not data:
        return EmptyBody(headers=content_headers)

    content_type = content_headers.get_first("Content-Type") or ""
    media_type = content_type.split(";")[0].strip().lower()
    if media_type == "application/x-www-form-urlencoded":
        fields = parse_qsl(data.decode("ascii", errors="replace"), keep_blank_values=True)
        return SingleBody(content=FormUrlEncodedContent(fields=fields), headers=content_headers)
    if _is_text(media_type):
        try:
            return SingleBody(content=TextContent(text=data.decode("utf-8")), headers=content_headers)
        except UnicodeDecodeError:
            pass  # Fall through to bytes
    return SingleBody(content=BytesContent(data=data), headers=content_headers)


def exchange_from_response(
    response: httpx.Response,
    body: RequestBody | None = None,
    config: RequestConfig | None = None,
) -> Exchange:
    """Build an exchange from a completed httpx response.

    Args:
        response: A response that has been read, with its request attached
        body: Body model to use instead of one derived from the sent bytes
        config: Request configuration, defaults to the settings-based one

    Returns:
        The exchange record
    """
    request = response.request
    request_headers, request_content_headers = _split_headers(request.headers)
    if body is None:
        body = _body_from_request(request, request_content_headers)

    response_headers, response_content_headers = _split_headers(response.headers)
    return Exchange(
        request=RequestData(
            method=request.method,
            url=str(request.url),
            headers=request_headers,
            body=body,
            config=config if config is not None else RequestConfig(),
        ),
        version=response.http_version.removeprefix("HTTP/"),
        status_code=response.status_code,
        reason=response.reason_phrase or None,
        headers=response_headers,
        content_headers=response_content_headers,
        content=response.content,
    )
