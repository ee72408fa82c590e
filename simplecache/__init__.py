"""
SimpleCache: keep one value in a file as a Python literal, JSON or pickle.

    from simplecache import FileStore

    cache = FileStore({"path": "/tmp", "filename": "routes", "type": "json"})
    cache.store({"key1": "value1"})
    data = cache.load()
"""

from .errors import CorruptCache, InvalidConfiguration, StoreError, UnserializableValue
from .repositories import FileStore, StoreProtocol
from .schemas import FormatType, StoreOptions

__version__ = "1.0.0"

__all__ = [
    "FileStore",
    "StoreProtocol",
    "FormatType",
    "StoreOptions",
    "StoreError",
    "InvalidConfiguration",
    "CorruptCache",
    "UnserializableValue",
]
