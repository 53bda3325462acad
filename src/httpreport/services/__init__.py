"""Service layer for rendering and display."""

from httpreport.services.printer import PrinterService, print_exchange
from httpreport.services.shell import IPythonHostAdapter, ShellRegistry, init

__all__ = ["IPythonHostAdapter", "PrinterService", "ShellRegistry", "init", "print_exchange"]
