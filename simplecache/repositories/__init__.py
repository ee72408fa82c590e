"""Single-file cache store: the StoreProtocol interface and its FileStore implementation."""

from .base import StoreProtocol
from .file_store import FileStore

__all__ = ["StoreProtocol", "FileStore"]
