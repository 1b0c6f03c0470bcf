"""Pytest configuration and shared fixtures."""

import shutil
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from portfolio.config import PACKAGE_DIR, Settings
from portfolio.core.app_factory import create_app


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Writable copy of the bundled data, templates and static files."""
    for name in ("data", "templates", "static"):
        shutil.copytree(PACKAGE_DIR / name, tmp_path / name)
    return tmp_path


@pytest.fixture
def test_settings(content_dir: Path) -> Settings:
    """Settings pointing at the writable content copy."""
    return Settings(
        _env_file=None,
        host="127.0.0.1",
        port=8080,
        data_dir=content_dir / "data",
        templates_dir=content_dir / "templates",
        static_dir=content_dir / "static",
    )


@pytest.fixture
def test_app(test_settings: Settings):
    """Application built from the test settings."""
    return create_app(test_settings)


@pytest.fixture
def test_client(test_app):
    """FastAPI test client with lifespan context."""
    with TestClient(test_app) as client:
        yield client
