"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test settings, catalog store, and client fixtures.

==============================================================================
"""

import pytest
from pathlib import Path
from typing import Generator
from fastapi.testclient import TestClient

from catalog_api.catalog.store import CatalogStore
from catalog_api.config import Settings
from catalog_api.main import Application


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Empty upload directory for a single test."""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir: Path) -> Settings:
    """Settings with an isolated upload directory and an empty catalog."""
    return Settings(
        upload_directory=str(upload_dir),
        public_base_url="http://cdn.example.test/",
        seed_demo_data=False,
    )


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Test client for an application with an empty catalog."""
    app = Application(settings).app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(settings: Settings) -> Generator[TestClient, None, None]:
    """Test client for an application started with the demo catalog."""
    app = Application(settings.model_copy(update={"seed_demo_data": True})).app
    with TestClient(app) as test_client:
        yield test_client


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def store() -> CatalogStore:
    """Empty catalog store."""
    return CatalogStore()


@pytest.fixture
def product_payload() -> dict:
    """Complete product creation payload."""
    return {
        "name": "Krogelni ventil 1/2",
        "description": "Medeninast krogelni ventil z ročko.",
        "category": "Ventili",
        "price": 7.49,
        "image": "",
    }
