"""Serialization services."""

from .codecs import BinaryCodec, Codec, JsonCodec, NativeCodec, get_codec

__all__ = ["Codec", "NativeCodec", "JsonCodec", "BinaryCodec", "get_codec"]
