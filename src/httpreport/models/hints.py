"""Print hint models controlling what the report shows."""

from pydantic import BaseModel, ConfigDict, Field

from httpreport.settings import Settings, settings


class ContentPrintHint(BaseModel):
    """How response content is rendered."""

    model_config = ConfigDict(frozen=True)

    is_enabled: bool = True
    format: bool = True  # Pretty-print per content type, False = raw text
    max_length: int = Field(default=10000, ge=0)


class RequestPrintHint(BaseModel):
    """Which parts of the request are rendered."""

    model_config = ConfigDict(frozen=True)

    print_header: bool = True
    print_body: bool = True


class ResponsePrintHint(BaseModel):
    """Which parts of the response are rendered."""

    model_config = ConfigDict(frozen=True)

    print_header: bool = True
    print_content: ContentPrintHint = ContentPrintHint()


class PrintHint(BaseModel):
    """Top-level print configuration attached to a request."""

    model_config = ConfigDict(frozen=True)

    is_enabled: bool = True
    request_print_hint: RequestPrintHint = RequestPrintHint()
    response_print_hint: ResponsePrintHint = ResponsePrintHint()


def default_print_hint(source: Settings | None = None) -> PrintHint:
    """Build the default print hint from application settings.

    Args:
        source: Settings to read, defaults to the global settings

    Returns:
        A new PrintHint
    """
    cfg = source if source is not None else settings
    return PrintHint(
        request_print_hint=RequestPrintHint(
            print_header=cfg.print_request_header,
            print_body=cfg.print_request_body,
        ),
        response_print_hint=ResponsePrintHint(
            print_header=cfg.print_response_header,
            print_content=ContentPrintHint(
                is_enabled=cfg.print_response_content,
                format=cfg.format_response_content,
                max_length=cfg.response_content_max_length,
            ),
        ),
    )
