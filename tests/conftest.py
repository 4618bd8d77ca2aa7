"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from storenav.config import Config, ServerConfig, StoreConfig
from storenav.core.navigation import NavigationConfig

SAMPLE_SITE = {
    "pages": [
        {"id": "p-home", "name": "Home", "slug": "/", "status": "published"},
        {"id": "p-about", "name": "About Us", "slug": "/about", "status": "published"},
        {
            "id": "p-contact",
            "name": "Contact",
            "slug": "/contact",
            "status": "published",
            "footerColumn": 3,
        },
        {"id": "p-sale", "name": "Summer Sale", "slug": "/sale", "status": "draft"},
        {
            "id": "p-careers",
            "name": "Careers",
            "slug": "/careers",
            "status": "published",
            "navigationPlacement": "none",
        },
    ],
    "policies": {
        "privacy_policy": "We respect your privacy.",
        "about_us": "Founded in 2020.",
    },
}


@pytest.fixture
def pages_file(tmp_path: Path) -> Path:
    """Write the sample site export and return its path."""
    path = tmp_path / "pages.json"
    path.write_text(json.dumps(SAMPLE_SITE))
    return path


@pytest.fixture
def test_config(pages_file: Path) -> Config:
    """Create a test configuration pointing at the sample pages file."""
    return Config(
        server=ServerConfig(),
        store=StoreConfig(pages_file=pages_file),
        navigation=NavigationConfig(),
    )
