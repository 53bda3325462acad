"""Readable reports for HTTP request/response exchanges."""

from httpreport.models import (
    BytesContent,
    ContentPrintHint,
    EmptyBody,
    Exchange,
    FileContent,
    FormUrlEncodedContent,
    HttpHeaders,
    MultipartBody,
    Part,
    PrintHint,
    RequestConfig,
    RequestData,
    RequestPrintHint,
    ResponsePrintHint,
    SingleBody,
    StreamContent,
    TextContent,
)
from httpreport.repositories import ExchangeLoadError, exchange_from_response, load_exchange
from httpreport.services.printer import PrinterService, print_exchange
from httpreport.services.shell import init
from httpreport.services.transformers import (
    compose,
    expand,
    header_only,
    modify_printer,
    no_custom_printing,
    no_request_body,
    no_request_header,
    no_response_content_formatting,
    no_response_content_printing,
    no_response_header,
    preview,
    raw,
    show,
    transform_exchange,
    with_response_content,
    with_response_content_max_length,
)

__all__ = [
    "BytesContent",
    "ContentPrintHint",
    "EmptyBody",
    "Exchange",
    "ExchangeLoadError",
    "FileContent",
    "FormUrlEncodedContent",
    "HttpHeaders",
    "MultipartBody",
    "Part",
    "PrintHint",
    "PrinterService",
    "RequestConfig",
    "RequestData",
    "RequestPrintHint",
    "ResponsePrintHint",
    "SingleBody",
    "StreamContent",
    "TextContent",
    "compose",
    "exchange_from_response",
    "expand",
    "header_only",
    "init",
    "load_exchange",
    "modify_printer",
    "no_custom_printing",
    "no_request_body",
    "no_request_header",
    "no_response_content_formatting",
    "no_response_content_printing",
    "no_response_header",
    "preview",
    "print_exchange",
    "raw",
    "show",
    "transform_exchange",
    "with_response_content",
    "with_response_content_max_length",
]
