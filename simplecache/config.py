"""
SimpleCache configuration.
Single source of truth for environment defaults of a FileStore.
"""

import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

load_dotenv()

TRUTHY = ("1", "true", "yes", "on")
FALSY = ("0", "false", "no", "off")


def get_settings():
    """Return settings (read fresh from the environment on every call)."""
    return Settings()


class Settings:
    """
    Store defaults loaded from environment.
    Unrecognized SIMPLECACHE_TYPE / SIMPLECACHE_MINIFY values are passed
    through as-is so FileStore rejects them instead of guessing.
    """

    # Cache file location
    SIMPLECACHE_DIR: Path
    SIMPLECACHE_FILENAME: str = "classCache"

    # Format: "py" | "json" | "bin"
    SIMPLECACHE_TYPE: str = "py"

    # Compact output (json and py only)
    SIMPLECACHE_MINIFY: Union[bool, str] = True

    def __init__(self):
        self.SIMPLECACHE_DIR = Path(os.environ.get("SIMPLECACHE_DIR") or ".")
        self.SIMPLECACHE_FILENAME = (
            os.environ.get("SIMPLECACHE_FILENAME") or "classCache"
        ).strip()
        self.SIMPLECACHE_TYPE = (os.environ.get("SIMPLECACHE_TYPE") or "py").strip().lower()
        minify = (os.environ.get("SIMPLECACHE_MINIFY") or "").strip().lower()
        if not minify or minify in TRUTHY:
            self.SIMPLECACHE_MINIFY = True
        elif minify in FALSY:
            self.SIMPLECACHE_MINIFY = False
        else:
            self.SIMPLECACHE_MINIFY = minify

    def store_options(self) -> dict:
        """Options mapping accepted by FileStore.configure()."""
        return {
            "path": self.SIMPLECACHE_DIR,
            "filename": self.SIMPLECACHE_FILENAME,
            "type": self.SIMPLECACHE_TYPE,
            "minify": self.SIMPLECACHE_MINIFY,
        }
