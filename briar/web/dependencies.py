# briar/web/dependencies.py
"""Dependency injection for FastAPI routes."""

import os
import logging
import threading
from typing import Optional
from pathlib import Path

from briar.core.theme import Theme
from briar.core.config_validator import load_validated_config

logger = logging.getLogger(__name__)

# Global instance (initialized once)
_theme: Optional[Theme] = None
_lock = threading.Lock()


def initialize_theme(config_dir: Optional[Path] = None) -> Theme:
    """Load the validated config and set up the theme hooks."""
    global _theme
    with _lock:
        if _theme is None:
            config_dir = config_dir or Path(os.getenv("BRIAR_CONFIG_DIR", "./config"))
            config = load_validated_config(config_dir)
            _theme = Theme(config).setup()
            logger.info(f"Theme initialized from {config_dir}")
        return _theme


def set_theme(theme: Optional[Theme]):
    """Replace the theme instance (startup and tests)."""
    global _theme
    with _lock:
        _theme = theme.setup() if theme is not None else None


def get_theme() -> Theme:
    """Get theme instance (dependency)."""
    if _theme is None:
        return initialize_theme()
    return _theme
