"""Repository layer for obtaining exchange records."""

from httpreport.repositories.files import ExchangeLoadError, load_exchange
from httpreport.repositories.httpx_exchange import exchange_from_response

__all__ = ["ExchangeLoadError", "exchange_from_response", "load_exchange"]
