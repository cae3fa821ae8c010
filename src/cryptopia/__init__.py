"""cryptopia: asyncio client for the Cryptopia exchange API."""

from .settings import Settings
from .api import CryptopiaClient, CryptopiaError, create_client

__all__ = [
    "Settings",
    "CryptopiaClient",
    "CryptopiaError",
    "create_client",
]
