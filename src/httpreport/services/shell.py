"""Interactive shell integration.

Registers the exchange report as the display for ``Exchange`` results in an
IPython shell. Registration happens at most once per registry; failures are
reported and never raised.
"""

import sys
import threading
import traceback
from collections.abc import Callable, Mapping
from types import ModuleType
from typing import Any, Protocol

from rich.console import Console

from httpreport.models.exchange import Exchange
from httpreport.models.output import PrintableExchange
from httpreport.services.printer import print_exchange
from httpreport.settings import settings

console = Console(highlight=False, soft_wrap=True)


class HostAdapter(Protocol):
    """Display extension points of an interactive host."""

    def add_printer(self, target: type, printer: Callable[[Any], str]) -> None:
        """Register a function producing the display text for ``target`` values."""
        ...

    def add_print_transformer(self, target: type, transform: Callable[[Any], Any]) -> None:
        """Register a function replacing ``target`` values before display.

        Returning ``None`` from the transform keeps the default display.
        """
        ...


class IPythonHostAdapter:
    """Host adapter backed by an IPython shell's plain text formatter."""

    def __init__(self, shell: Any):
        self.shell = shell
        self._printers: dict[type, Callable[[Any], str]] = {}

    @property
    def _formatter(self) -> Any:
        return self.shell.display_formatter.formatters["text/plain"]

    def add_printer(self, target: type, printer: Callable[[Any], str]) -> None:
        self._printers[target] = printer

    def add_print_transformer(self, target: type, transform: Callable[[Any], Any]) -> None:
        def pretty(obj: Any, p: Any, cycle: bool) -> None:
            result = transform(obj)
            if result is None:
                p.text(repr(obj))
                return
            printer = self._printers.get(type(result))
            p.text(printer(result) if printer is not None else repr(result))

        self._formatter.for_type(target, pretty)


def is_interactive(modules: Mapping[str, ModuleType], marker: str) -> bool:
    """Check whether any loaded module marks an interactive shell."""
    return any(name.startswith(marker) for name in modules)


def find_ipython_host(modules: Mapping[str, ModuleType]) -> IPythonHostAdapter | None:
    """Locate the running IPython shell.

    Args:
        modules: Loaded modules to search

    Returns:
        An adapter for the shell, or None if no shell with a display
        formatter is running
    """
    ipython = modules.get("IPython")
    get_ipython = getattr(ipython, "get_ipython", None)
    if get_ipython is None:
        return None
    shell = get_ipython()
    if shell is None or getattr(shell, "display_formatter", None) is None:
        return None
    return IPythonHostAdapter(shell)


def print_transform(exchange: Exchange) -> PrintableExchange | None:
    """Wrap an exchange for the report printer, or None to keep the default display."""
    if exchange.request.config.print_hint.is_enabled:
        return PrintableExchange(exchange=exchange)
    return None


def printer(printable: PrintableExchange) -> str:
    """Render a wrapped exchange, returning the error text if rendering fails."""
    try:
        return print_exchange(printable.exchange)
    except Exception as e:
        return "".join(traceback.format_exception(e))


class ShellRegistry:
    """Tracks the one-time printer registration for a process."""

    def __init__(
        self,
        host_finder: Callable[[Mapping[str, ModuleType]], HostAdapter | None] = find_ipython_host,
        modules: Mapping[str, ModuleType] | None = None,
        marker: str | None = None,
    ):
        self.host_finder = host_finder
        self.modules = modules if modules is not None else sys.modules
        self.marker = marker if marker is not None else settings.shell_marker
        self._lock = threading.Lock()
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def init(self) -> None:
        """Register the exchange printer with the interactive host, once."""
        with self._lock:
            if self._initialized:
                return
            try:
                self._register()
            except Exception as e:
                console.print(f"--- httpreport: Printer registration failed: {e}", markup=False)
            finally:
                self._initialized = True

    def _register(self) -> None:
        if not is_interactive(self.modules, self.marker):
            return

        host = self.host_finder(self.modules)
        if host is None:
            console.print(
                "--- httpreport: Shell object not found "
                "(this is expected when running outside an interactive shell).",
                markup=False,
            )
            return

        host.add_printer(PrintableExchange, printer)
        host.add_print_transformer(Exchange, print_transform)
        console.print("--- httpreport: Printer successfully registered.", markup=False)


_registry = ShellRegistry()


def init() -> None:
    """Register the exchange printer with the current interactive shell."""
    _registry.init()
