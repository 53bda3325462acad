"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from httpreport.models.content import (
    MultipartBody,
    Part,
    SingleBody,
    TextContent,
)
from httpreport.models.exchange import Exchange, RequestData
from httpreport.models.headers import HttpHeaders


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_exchange_path(fixtures_dir: Path) -> Path:
    """Return the path of the sample exchange document."""
    return fixtures_dir / "exchange.json"


@pytest.fixture
def sample_exchange_json(sample_exchange_path: Path) -> dict:
    """Load sample exchange JSON fixture."""
    with open(sample_exchange_path) as f:
        return json.load(f)


@pytest.fixture
def sample_exchange(sample_exchange_json: dict) -> Exchange:
    """Parse the sample exchange into a model."""
    return Exchange.model_validate(sample_exchange_json)


@pytest.fixture
def text_exchange() -> Exchange:
    """A GET exchange with a plain text response."""
    return Exchange(
        request=RequestData(
            method="GET",
            url="https://example.com/items",
            headers=HttpHeaders({"Accept": ["*/*"]}),
        ),
        status_code=200,
        headers=HttpHeaders({"Server": ["test"]}),
        content_headers=HttpHeaders({"Content-Type": ["text/plain"]}),
        content=b"hello",
    )


@pytest.fixture
def multipart_exchange() -> Exchange:
    """A POST exchange with a two-part multipart body."""
    return Exchange(
        request=RequestData(
            method="POST",
            url="https://example.com/upload",
            headers=HttpHeaders({"Accept": ["*/*"]}),
            body=MultipartBody(
                parts=[
                    Part(
                        name="a",
                        content=TextContent(text="first part"),
                        content_type="text/plain",
                        headers=HttpHeaders({"Content-Disposition": ['form-data; name="a"']}),
                    ),
                    Part(name="b", content=TextContent(text="second part")),
                ],
                headers=HttpHeaders({"Content-Type": ["multipart/form-data; boundary=xyz"]}),
            ),
        ),
        status_code=204,
    )


@pytest.fixture
def json_body_exchange(text_exchange: Exchange) -> Exchange:
    """The text exchange with a JSON request body."""
    request = text_exchange.request.model_copy(
        update={
            "method": "PUT",
            "body": SingleBody(
                content=TextContent(text='{"name": "widget"}'),
                headers=HttpHeaders({"Content-Type": ["application/json"]}),
            ),
        }
    )
    return text_exchange.model_copy(update={"request": request})
