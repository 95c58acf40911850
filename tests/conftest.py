"""Pytest configuration and shared fixtures for testing."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from briar.core.config import ThemeConfig
from briar.core.theme import Theme


@pytest.fixture
def make_config():
    """Factory for ThemeConfig instances with the given theme mods."""
    def _make(show_on_front: str = "posts", **theme_mods) -> ThemeConfig:
        return ThemeConfig(
            theme_mods=dict(theme_mods),
            options={"show_on_front": show_on_front},
            site_name="Briar",
            site_description="A clean blog theme",
            authors={7: {"display_name": "Jo Writer", "description": "Writes things"}},
        )
    return _make


@pytest.fixture
def theme(make_config):
    return Theme(make_config()).setup()


@pytest.fixture
def legacy_theme(make_config):
    """Theme on a host without title tag support."""
    config = make_config()
    config.wp_version = "4.0.1"
    return Theme(config).setup()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove BRIAR_* variables so tests see only what they set."""
    import os
    for name in list(os.environ):
        if name.startswith("BRIAR_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def client_for():
    """Build a TestClient serving the given theme."""
    from fastapi.testclient import TestClient
    from briar.web.app import create_app
    from briar.web.dependencies import set_theme

    def _client(theme: Theme) -> TestClient:
        set_theme(theme)
        return TestClient(create_app())

    yield _client
    set_theme(None)


@pytest.fixture
def client(client_for, theme):
    return client_for(theme)
