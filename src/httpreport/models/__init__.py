"""Pydantic models for httpreport."""

from httpreport.models.content import (
    BytesContent,
    ContentData,
    EmptyBody,
    FileContent,
    FormUrlEncodedContent,
    MultipartBody,
    Part,
    RequestBody,
    SingleBody,
    StreamContent,
    TextContent,
)
from httpreport.models.exchange import Exchange, RequestConfig, RequestData
from httpreport.models.headers import HttpHeaders
from httpreport.models.hints import (
    ContentPrintHint,
    PrintHint,
    RequestPrintHint,
    ResponsePrintHint,
    default_print_hint,
)
from httpreport.models.output import PrintableExchange

__all__ = [
    "BytesContent",
    "ContentData",
    "ContentPrintHint",
    "EmptyBody",
    "Exchange",
    "FileContent",
    "FormUrlEncodedContent",
    "HttpHeaders",
    "MultipartBody",
    "Part",
    "PrintHint",
    "PrintableExchange",
    "RequestBody",
    "RequestConfig",
    "RequestData",
    "RequestPrintHint",
    "ResponsePrintHint",
    "SingleBody",
    "StreamContent",
    "TextContent",
    "default_print_hint",
]
