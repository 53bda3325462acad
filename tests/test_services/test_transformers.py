"""Tests for print hint transformers."""

import sys

import pytest

from httpreport.models.exchange import Exchange
from httpreport.models.hints import PrintHint
from httpreport.services.transformers import (
    compose,
    expand,
    get_preset,
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


class TestTransformers:
    """Tests for single-field transformers."""

    def test_no_custom_printing(self) -> None:
        """Test disabling the report."""
        assert no_custom_printing(PrintHint()).is_enabled is False

    def test_no_request_header(self) -> None:
        """Test omitting request headers."""
        hint = no_request_header(PrintHint())
        assert hint.request_print_hint.print_header is False
        assert hint.request_print_hint.print_body is True

    def test_no_request_body(self) -> None:
        """Test omitting the request body."""
        hint = no_request_body(PrintHint())
        assert hint.request_print_hint.print_body is False
        assert hint.request_print_hint.print_header is True

    def test_no_response_header(self) -> None:
        """Test omitting response headers."""
        hint = no_response_header(PrintHint())
        assert hint.response_print_hint.print_header is False
        assert hint.response_print_hint.print_content.is_enabled is True

    def test_response_content_toggles(self) -> None:
        """Test enabling and disabling response content."""
        disabled = no_response_content_printing(PrintHint())
        assert disabled.response_print_hint.print_content.is_enabled is False
        assert with_response_content(disabled).response_print_hint.print_content.is_enabled

    def test_no_response_content_formatting(self) -> None:
        """Test switching to raw content."""
        hint = no_response_content_formatting(PrintHint())
        assert hint.response_print_hint.print_content.format is False
        assert hint.response_print_hint.print_content.is_enabled is True

    def test_with_response_content_max_length_enables_content(self) -> None:
        """Test that setting a max length also enables content."""
        hint = with_response_content_max_length(50)(no_response_content_printing(PrintHint()))
        assert hint.response_print_hint.print_content.max_length == 50
        assert hint.response_print_hint.print_content.is_enabled is True

    def test_negative_max_length_rejected(self) -> None:
        """Test a negative max length is refused up front."""
        with pytest.raises(ValueError, match="must not be negative"):
            with_response_content_max_length(-1)
        with pytest.raises(ValueError, match="must not be negative"):
            show(-1)
        with pytest.raises(ValueError, match="must not be negative"):
            get_preset("show", -5)

    def test_original_unchanged(self) -> None:
        """Test that transformers return new instances."""
        original = PrintHint()
        no_response_header(original)
        no_custom_printing(original)
        with_response_content_max_length(3)(original)
        assert original == PrintHint()


class TestCompose:
    """Tests for chaining transformers."""

    def test_later_wins(self) -> None:
        """Test that the last transformer touching a field wins."""
        hint = compose(no_response_content_printing, with_response_content)(PrintHint())
        assert hint.response_print_hint.print_content.is_enabled is True

        hint = compose(with_response_content, no_response_content_printing)(PrintHint())
        assert hint.response_print_hint.print_content.is_enabled is False

    def test_independent_fields(self) -> None:
        """Test combining transformers on different fields."""
        hint = compose(no_request_header, no_response_header)(PrintHint())
        assert hint.request_print_hint.print_header is False
        assert hint.response_print_hint.print_header is False


class TestPresets:
    """Tests for named presets."""

    def test_raw(self) -> None:
        """Test raw disables the report."""
        assert raw(PrintHint()).is_enabled is False

    def test_header_only(self) -> None:
        """Test header_only disables content but keeps headers."""
        hint = header_only(PrintHint())
        assert hint.response_print_hint.print_content.is_enabled is False
        assert hint.response_print_hint.print_header is True

    def test_show(self) -> None:
        """Test show sets the length and enables content."""
        hint = show(120)(header_only(PrintHint()))
        assert hint.response_print_hint.print_content.max_length == 120
        assert hint.response_print_hint.print_content.is_enabled is True

    def test_preview_keeps_max_length(self) -> None:
        """Test preview enables content at the current length."""
        hint = preview(header_only(show(30)(PrintHint())))
        assert hint.response_print_hint.print_content.max_length == 30
        assert hint.response_print_hint.print_content.is_enabled is True

    def test_expand(self) -> None:
        """Test expand removes the length limit."""
        hint = expand(header_only(show(10)(PrintHint())))
        assert hint.response_print_hint.print_content.max_length == sys.maxsize
        assert hint.response_print_hint.print_content.is_enabled is True


class TestGetPreset:
    """Tests for preset lookup."""

    def test_by_name(self) -> None:
        """Test looking up presets by name."""
        assert get_preset("raw") is raw
        assert get_preset("header-only") is header_only
        assert get_preset("header_only") is header_only
        assert get_preset("Expand") is expand

    def test_show_requires_max_length(self) -> None:
        """Test that show needs a length."""
        with pytest.raises(ValueError, match="requires a max length"):
            get_preset("show")

    def test_show_with_max_length(self) -> None:
        """Test show with a length."""
        hint = get_preset("show", 5)(PrintHint())
        assert hint.response_print_hint.print_content.max_length == 5

    def test_unknown(self) -> None:
        """Test unknown presets list the valid names."""
        with pytest.raises(ValueError, match="Valid presets: expand, header-only, preview, raw, show"):
            get_preset("verbose")


class TestModifyPrinter:
    """Tests for applying transformers to exchanges."""

    def test_modify_printer(self, text_exchange: Exchange) -> None:
        """Test the hint is replaced and debug messages turned on."""
        result = modify_printer(header_only, text_exchange)

        config = result.request.config
        assert config.print_hint.response_print_hint.print_content.is_enabled is False
        assert config.print_debug_messages is True

    def test_modify_printer_leaves_input(self, text_exchange: Exchange) -> None:
        """Test the original exchange is untouched."""
        modify_printer(raw, text_exchange)
        assert text_exchange.request.config.print_hint.is_enabled is True
        assert text_exchange.request.config.print_debug_messages is False

    def test_modify_printer_keeps_exchange_data(self, text_exchange: Exchange) -> None:
        """Test only the config changes."""
        result = modify_printer(raw, text_exchange)
        assert result.content == text_exchange.content
        assert result.request.url == text_exchange.request.url
        assert result.request.headers == text_exchange.request.headers

    def test_transform_exchange_without_debug(self, text_exchange: Exchange) -> None:
        """Test applying a transformer without turning on debug messages."""
        result = transform_exchange(raw, text_exchange)
        assert result.print_hint.is_enabled is False
        assert result.request.config.print_debug_messages is False
