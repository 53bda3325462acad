"""Print hint transformers and presets.

Every transformer is a pure function taking a ``PrintHint`` and returning a
new one; nothing is changed in place. Transformers chain with ``compose``,
where a later transformer wins when two touch the same field.

Named presets:
    raw: Disable the custom report, fall back to default display.
    header_only: Show headers but no response content.
    show: Show response content up to a given length.
    preview: Show response content at the current maximum length.
    expand: Show response content without a length limit.
"""

import sys
from collections.abc import Callable

from httpreport.models.exchange import Exchange
from httpreport.models.hints import PrintHint

HintTransformer = Callable[[PrintHint], PrintHint]


def no_custom_printing(hint: PrintHint) -> PrintHint:
    """Disable the custom report entirely."""
    return hint.model_copy(update={"is_enabled": False})


def no_request_header(hint: PrintHint) -> PrintHint:
    """Omit the request header table."""
    request = hint.request_print_hint.model_copy(update={"print_header": False})
    return hint.model_copy(update={"request_print_hint": request})


def no_request_body(hint: PrintHint) -> PrintHint:
    """Omit the request body."""
    request = hint.request_print_hint.model_copy(update={"print_body": False})
    return hint.model_copy(update={"request_print_hint": request})


def no_response_header(hint: PrintHint) -> PrintHint:
    """Omit the response header table."""
    response = hint.response_print_hint.model_copy(update={"print_header": False})
    return hint.model_copy(update={"response_print_hint": response})


def _update_content(hint: PrintHint, **changes: object) -> PrintHint:
    content = hint.response_print_hint.print_content.model_copy(update=changes)
    response = hint.response_print_hint.model_copy(update={"print_content": content})
    return hint.model_copy(update={"response_print_hint": response})


def with_response_content(hint: PrintHint) -> PrintHint:
    """Enable response content printing."""
    return _update_content(hint, is_enabled=True)


def no_response_content_printing(hint: PrintHint) -> PrintHint:
    """Disable response content printing."""
    return _update_content(hint, is_enabled=False)


def no_response_content_formatting(hint: PrintHint) -> PrintHint:
    """Print response content as raw text instead of pretty-printed."""
    return _update_content(hint, format=False)


def with_response_content_max_length(max_length: int) -> HintTransformer:
    """Build a transformer capping response content and enabling it.

    Args:
        max_length: Maximum number of content characters to print

    Returns:
        A transformer setting the length then enabling content printing

    Raises:
        ValueError: If max_length is negative
    """
    if max_length < 0:
        raise ValueError(f"Max length must not be negative: {max_length}")

    def transform(hint: PrintHint) -> PrintHint:
        return with_response_content(_update_content(hint, max_length=max_length))

    return transform


def compose(*transformers: HintTransformer) -> HintTransformer:
    """Chain transformers left to right."""

    def transform(hint: PrintHint) -> PrintHint:
        for transformer in transformers:
            hint = transformer(hint)
        return hint

    return transform


# Presets
raw = no_custom_printing
header_only = no_response_content_printing
preview = with_response_content


def show(max_length: int) -> HintTransformer:
    """Show response content up to ``max_length`` characters."""
    return compose(with_response_content_max_length(max_length), with_response_content)


expand = compose(with_response_content_max_length(sys.maxsize), with_response_content)

_PRESETS: dict[str, HintTransformer] = {
    "raw": raw,
    "header-only": header_only,
    "preview": preview,
    "expand": expand,
}


def get_preset(name: str, max_length: int | None = None) -> HintTransformer:
    """Look up a preset transformer by name.

    Args:
        name: One of ``raw``, ``header-only``, ``preview``, ``expand`` or ``show``
        max_length: Content length, required for ``show``

    Returns:
        The preset transformer

    Raises:
        ValueError: If the name is unknown or ``show`` has no max_length
    """
    key = name.strip().lower().replace("_", "-")
    if key == "show":
        if max_length is None:
            raise ValueError("Preset 'show' requires a max length")
        return show(max_length)
    transformer = _PRESETS.get(key)
    if transformer is None:
        valid = ", ".join(sorted([*_PRESETS, "show"]))
        raise ValueError(f"Unknown preset: {name!r}. Valid presets: {valid}")
    return transformer


def transform_exchange(
    transformer: HintTransformer,
    exchange: Exchange,
    debug: bool = False,
) -> Exchange:
    """Apply a hint transformer to an exchange's print hint.

    Args:
        transformer: The transformer to apply
        exchange: The exchange to update
        debug: Also turn on debug messages for the exchange

    Returns:
        A new exchange carrying the transformed hint
    """
    config = exchange.request.config
    update: dict[str, object] = {"print_hint": transformer(config.print_hint)}
    if debug:
        update["print_debug_messages"] = True
    request = exchange.request.model_copy(update={"config": config.model_copy(update=update)})
    return exchange.model_copy(update={"request": request})


def modify_printer(transformer: HintTransformer, exchange: Exchange) -> Exchange:
    """Apply a hint transformer to an exchange and turn on its debug messages."""
    return transform_exchange(transformer, exchange, debug=True)
