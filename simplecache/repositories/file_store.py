"""
File-based implementation of StoreProtocol.
Keeps one value in {path}/{filename}.{type}, encoded as a Python literal,
JSON or pickle.

No locking: concurrent writers to the same file race, and a failed write can
leave a truncated file behind.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ..errors import CorruptCache, InvalidConfiguration
from ..schemas import FormatType, StoreOptions
from ..services import Codec, get_codec

logger = logging.getLogger(__name__)


def _describe(error: ValidationError) -> str:
    """Flatten pydantic errors into one configuration message."""
    messages = []
    for err in error.errors():
        field = ".".join(str(p) for p in err["loc"]) or "config"
        if err["type"] == "extra_forbidden":
            messages.append(f'Parameter "{field}" doesn\'t exist.')
        elif field == "type":
            allowed = ", ".join(t.value for t in FormatType)
            messages.append(f'Bad save type "{err.get("input")}". Use one of: {allowed}.')
        else:
            messages.append(f"{field}: {err['msg']}")
    return " ".join(messages)


class FileStore:
    """
    Single-file cache.

        store = FileStore({"path": "/var/cache/app", "filename": "routes", "type": "json"})
        store.store({"key1": "value1", "key2": "value2"})
        data = store.load()
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None, **options: Any):
        self._options = StoreOptions()
        self.configure(config, **options)

    @classmethod
    def from_settings(cls, settings=None) -> "FileStore":
        """Build a store from SIMPLECACHE_* environment settings."""
        if settings is None:
            from ..config import get_settings
            settings = get_settings()
        return cls(settings.store_options())

    def configure(self, config: Optional[Mapping[str, Any]] = None, **options: Any) -> "FileStore":
        """
        Apply any subset of path, filename, type and minify.

        The merged options are validated before they replace the current ones,
        so a rejected call leaves the store unchanged.

        Raises:
            InvalidConfiguration: unknown option, bad type, or path that is not
                an existing directory.
        """
        updates = {**(config or {}), **options}
        if not updates:
            return self
        merged = {**self._options.model_dump(), **updates}
        try:
            self._options = StoreOptions.model_validate(merged)
        except ValidationError as e:
            raise InvalidConfiguration(_describe(e)) from e
        logger.debug("FileStore configured: %s", self.full_path)
        return self

    # Read/write

    def store(self, value: Any) -> Path:
        """Serialize value into the cache file, replacing previous content."""
        path = self.full_path
        data = self._codec.encode(value, minify=self.minify)
        with open(path, "wb") as f:
            f.write(data)
        logger.debug("Cached %d bytes to %s", len(data), path)
        return path

    def load(self) -> Any:
        """
        Read the cached value back.

        A missing cache file is created empty first; an empty file loads as
        None in every format.

        Raises:
            CorruptCache: content does not parse under the configured type.
        """
        path = self.full_path
        if not path.is_file():
            path.touch(exist_ok=True)
            logger.debug("Created empty cache file %s", path)
        with open(path, "rb") as f:
            data = f.read()
        try:
            return self._codec.decode(data)
        except CorruptCache as e:
            e.path = path
            logger.debug("Corrupt %s cache %s: %s", self.type.value, path, e.message)
            raise

    @property
    def _codec(self) -> Codec:
        return get_codec(self.type)

    # Options

    @property
    def options(self) -> StoreOptions:
        return self._options

    @property
    def path(self) -> Path:
        return self._options.path

    @property
    def filename(self) -> str:
        return self._options.filename

    @property
    def type(self) -> FormatType:
        return self._options.type

    @property
    def minify(self) -> bool:
        return self._options.minify

    @property
    def full_path(self) -> Path:
        return self.path / f"{self.filename}.{self._options.extension}"

    def get_full_filename(self) -> str:
        return str(self.full_path)

    def get_path(self) -> Path:
        return self.path

    def set_path(self, path: Union[str, Path]) -> "FileStore":
        return self.configure(path=path)

    def get_filename(self) -> str:
        return self.filename

    def set_filename(self, filename: str) -> "FileStore":
        return self.configure(filename=filename)

    def get_type(self) -> FormatType:
        return self.type

    def set_type(self, type: Union[str, FormatType]) -> "FileStore":
        return self.configure(type=type)

    def get_minify(self) -> bool:
        return self.minify

    def set_minify(self, minify: bool) -> "FileStore":
        """Compact output. Applies to json and py."""
        return self.configure(minify=minify)

    def __repr__(self) -> str:
        return f"FileStore({self.full_path!s}, minify={self.minify})"
