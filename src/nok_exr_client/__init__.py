"""Public package exports for the Norges Bank exchange-rate client."""

from .async_client import AsyncNokExrClient
from .client import NokExrClient
from .config import NokExrClientConfig

__all__ = ["NokExrClient", "AsyncNokExrClient", "NokExrClientConfig"]
