"""
Errors raised by the cache store.
Filesystem failures are not wrapped: they surface as OSError.
"""

from pathlib import Path
from typing import Optional


class StoreError(Exception):
    """Base for store failures with a machine-readable code."""
    def __init__(self, message: str, code: str = "store_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidConfiguration(StoreError, ValueError):
    """Unknown option, unrecognized format or missing directory."""
    def __init__(self, message: str):
        super().__init__(message, code="invalid_configuration")


class CorruptCache(StoreError, ValueError):
    """Cache file content does not parse under the configured format."""
    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message, code="corrupt_cache")


class UnserializableValue(StoreError, TypeError):
    """Value cannot be encoded by the configured format."""
    def __init__(self, message: str):
        super().__init__(message, code="unserializable_value")
