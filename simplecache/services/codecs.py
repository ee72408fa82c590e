"""
Format codecs for the cache file.
Each codec turns a value into the bytes written to disk and back.

  py   : Python literal, parsed with ast.literal_eval (never executed)
  json : JSON text, compact or indented
  bin  : pickle stream
"""

import ast
import json
import pickle
import pprint
from abc import ABC, abstractmethod
from typing import Any

from ..errors import CorruptCache, UnserializableValue
from ..schemas import FormatType

ENCODING = "utf-8"
JSON_INDENT = 4


class Codec(ABC):
    """Base codec. Empty content always decodes to None."""

    format_type: FormatType

    @abstractmethod
    def encode(self, value: Any, minify: bool = True) -> bytes:
        ...

    def decode(self, data: bytes) -> Any:
        if self.is_empty(data):
            return None
        return self._decode(data)

    def is_empty(self, data: bytes) -> bool:
        return not data.strip()

    @abstractmethod
    def _decode(self, data: bytes) -> Any:
        ...

    def _text(self, data: bytes) -> str:
        try:
            return data.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise CorruptCache(f"Cache is not valid {ENCODING} text: {e}") from e


class NativeCodec(Codec):
    format_type = FormatType.NATIVE

    def encode(self, value: Any, minify: bool = True) -> bytes:
        text = repr(value) if minify else pprint.pformat(value, sort_dicts=False)
        # Reject values whose repr can't be read back (objects, nan, set()).
        try:
            ast.literal_eval(text)
        except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as e:
            raise UnserializableValue(
                f"{type(value).__name__} value has no Python literal form"
            ) from e
        return (text + "\n").encode(ENCODING)

    def _decode(self, data: bytes) -> Any:
        text = self._text(data)
        try:
            return ast.literal_eval(text.strip())
        except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as e:
            raise CorruptCache(f"Cache is not a Python literal: {e}") from e


class JsonCodec(Codec):
    format_type = FormatType.JSON

    def encode(self, value: Any, minify: bool = True) -> bytes:
        try:
            if minify:
                text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
            else:
                text = json.dumps(value, ensure_ascii=False, indent=JSON_INDENT)
        except (TypeError, ValueError, RecursionError) as e:
            raise UnserializableValue(f"Value is not JSON serializable: {e}") from e
        return text.encode(ENCODING)

    def _decode(self, data: bytes) -> Any:
        text = self._text(data)
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise CorruptCache(f"Cache is not valid JSON: {e}") from e


class BinaryCodec(Codec):
    format_type = FormatType.BINARY

    def encode(self, value: Any, minify: bool = True) -> bytes:
        try:
            return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
        except (pickle.PicklingError, TypeError, AttributeError, RecursionError) as e:
            raise UnserializableValue(f"Value cannot be pickled: {e}") from e

    def is_empty(self, data: bytes) -> bool:
        return not data

    def _decode(self, data: bytes) -> Any:
        # Malformed streams fail in open-ended ways (OverflowError, MemoryError, ...).
        try:
            return pickle.loads(data)
        except Exception as e:
            raise CorruptCache(f"Cache is not a valid pickle stream: {e}") from e


CODECS = {
    FormatType.NATIVE: NativeCodec(),
    FormatType.JSON: JsonCodec(),
    FormatType.BINARY: BinaryCodec(),
}


def get_codec(format_type: FormatType) -> Codec:
    """Return the codec registered for a format tag."""
    return CODECS[FormatType(format_type)]
