"""Pydantic schemas for store configuration."""

from .options import FormatType, StoreOptions

__all__ = ["FormatType", "StoreOptions"]
