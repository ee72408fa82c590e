"""Abstract persistence interface for a single-value cache."""

from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class StoreProtocol(Protocol):
    """What callers rely on: configure, write one value, read it back."""

    def configure(self, config: Optional[Mapping[str, Any]] = None, **options: Any) -> "StoreProtocol":
        ...

    def store(self, value: Any) -> Path:
        ...

    def load(self) -> Any:
        ...

    @property
    def full_path(self) -> Path:
        ...
