"""Request body models.

A body is empty, a single payload, or a list of named multipart parts.
Each payload is one of several content kinds.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from httpreport.models.headers import HttpHeaders


class TextContent(BaseModel):
    """Plain text payload."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class BytesContent(BaseModel):
    """Binary payload."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bytes"] = "bytes"
    data: bytes


class StreamContent(BaseModel):
    """Payload read from a file-like object."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["stream"] = "stream"
    stream: Any = Field(exclude=True)


class FormUrlEncodedContent(BaseModel):
    """URL-encoded form fields, in declaration order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["form"] = "form"
    fields: list[tuple[str, str]] = []


class FileContent(BaseModel):
    """Payload sent from a file on disk."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    file_name: str


ContentData = Annotated[
    TextContent | BytesContent | StreamContent | FormUrlEncodedContent | FileContent,
    Field(discriminator="kind"),
]


class Part(BaseModel):
    """A single named part of a multipart body."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: ContentData
    content_type: str | None = None
    headers: HttpHeaders = HttpHeaders({})


class EmptyBody(BaseModel):
    """A request without a body."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"
    headers: HttpHeaders = HttpHeaders({})


class SingleBody(BaseModel):
    """A request with one payload."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single"] = "single"
    content: ContentData
    headers: HttpHeaders = HttpHeaders({})  # Content headers, e.g. Content-Type


class MultipartBody(BaseModel):
    """A multipart request body."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multipart"] = "multipart"
    parts: list[Part] = []
    headers: HttpHeaders = HttpHeaders({})


RequestBody = Annotated[
    EmptyBody | SingleBody | MultipartBody,
    Field(discriminator="kind"),
]
