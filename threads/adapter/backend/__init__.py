"""Backend-as-a-service adapter."""

from .client import BackendClient, Collection, Record
from .http import HttpBackendClient
from .memory import InMemoryBackendClient

__all__ = [
    "BackendClient",
    "Collection",
    "HttpBackendClient",
    "InMemoryBackendClient",
    "Record",
]
