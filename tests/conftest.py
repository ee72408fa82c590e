"""
Pytest configuration.

Shared fixtures: an isolated cache directory and a clean SIMPLECACHE_* environment.
"""

import pytest

from simplecache import FileStore

ENV_KEYS = (
    "SIMPLECACHE_DIR",
    "SIMPLECACHE_FILENAME",
    "SIMPLECACHE_TYPE",
    "SIMPLECACHE_MINIFY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment out of every test."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cache_dir(tmp_path):
    d = tmp_path / "cache"
    d.mkdir()
    return d


@pytest.fixture
def make_store(cache_dir):
    """FileStore factory rooted in the temporary cache directory."""
    def _make(**options):
        options.setdefault("path", cache_dir)
        options.setdefault("filename", "data")
        return FileStore(options)
    return _make


@pytest.fixture
def sample_value():
    return {
        "name": "routes",
        "count": 3,
        "ratio": 0.5,
        "enabled": True,
        "missing": None,
        "tags": ["a", "b", "ü"],
        "nested": {"inner": [1, 2, {"deep": "yes"}]},
    }
