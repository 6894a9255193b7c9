"""Shared test fixtures."""

from pathlib import Path

import pytest
from tinywiki.config import Config, ServerConfig, StoreConfig, WikiConfig


def make_config(tmp_path: Path, backend: str = "sqlite") -> Config:
    """Build a Config rooted in tmp_path for the given store backend."""
    return Config(
        server=ServerConfig(port_file=tmp_path / "final-port.txt"),
        store=StoreConfig(
            backend=backend,
            data_dir=tmp_path / "data",
            database=tmp_path / "wiki.db",
        ),
        wiki=WikiConfig(),
    )


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Create a test configuration using the SQLite store under tmp_path."""
    return make_config(tmp_path)


@pytest.fixture(params=["file", "sqlite"])
def any_backend_config(request: pytest.FixtureRequest, tmp_path: Path) -> Config:
    """Create a test configuration for each store backend."""
    return make_config(tmp_path, backend=request.param)


@pytest.fixture
def file_config(tmp_path: Path) -> Config:
    """Create a test configuration using the file store under tmp_path."""
    return make_config(tmp_path, backend="file")
