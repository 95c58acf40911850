"""Theme Configuration

Theme mods, site options and site info read by the layout resolver and the
markup helpers. Values come from defaults, then an optional YAML file, then
``BRIAR_*`` environment variables; the environment wins.
"""

import os
import logging
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, field

import yaml

from .contracts import Author, LAYOUT_DISABLED, LayoutMode

logger = logging.getLogger(__name__)

# Per-page-type layout settings and their defaults
GLOBAL_LAYOUT_MOD = "briar_global_layout"
HOME_LAYOUT_MOD = "briar_home_layout"
BLOG_LAYOUT_MOD = "briar_blog_layout"
ARCHIVE_LAYOUT_MOD = "briar_archive_layout"
CATEGORY_LAYOUT_MOD = "briar_category_archive_layout"
SEARCH_LAYOUT_MOD = "briar_search_layout"
NOT_FOUND_LAYOUT_MOD = "briar_404_layout"
SINGLE_LAYOUT_MOD = "briar_single_layout"
PAGE_LAYOUT_MOD = "briar_page_layout"

LAYOUT_MOD_DEFAULTS: Dict[str, str] = {
    GLOBAL_LAYOUT_MOD: LayoutMode.LEFT.value,
    HOME_LAYOUT_MOD: LAYOUT_DISABLED,
    BLOG_LAYOUT_MOD: LAYOUT_DISABLED,
    ARCHIVE_LAYOUT_MOD: LAYOUT_DISABLED,
    CATEGORY_LAYOUT_MOD: LAYOUT_DISABLED,
    SEARCH_LAYOUT_MOD: LAYOUT_DISABLED,
    NOT_FOUND_LAYOUT_MOD: LAYOUT_DISABLED,
    SINGLE_LAYOUT_MOD: LAYOUT_DISABLED,
    PAGE_LAYOUT_MOD: LAYOUT_DISABLED,
}

SHOW_ON_FRONT_OPTION = "show_on_front"
SHOW_ON_FRONT_ENV = "BRIAR_SHOW_ON_FRONT"


def layout_mod_env_var(mod_name: str) -> str:
    """Environment variable overriding a layout mod (BRIAR_SEARCH_LAYOUT, ...)."""
    return mod_name.upper()


@dataclass
class ThemeConfig:
    """Main configuration class."""

    # Paths
    config_dir: Path = field(default_factory=lambda: Path("./config"))

    # Administrator-editable settings
    theme_mods: Dict[str, Any] = field(default_factory=dict)
    options: Dict[str, Any] = field(default_factory=lambda: {SHOW_ON_FRONT_OPTION: "posts"})

    # Site info
    site_name: str = "Briar"
    site_description: str = ""

    # Host version, drives the title-tag shim
    wp_version: str = "6.4"

    # Known users, keyed by id (backs the author lookup)
    authors: Dict[int, Dict[str, Any]] = field(default_factory=dict)

    # Logging
    log_level: str = "INFO"

    def get_theme_mod(self, name: str, default: Any = None) -> Any:
        """Read a theme mod, returning ``default`` when it is unset."""
        return self.theme_mods.get(name, default)

    def set_theme_mod(self, name: str, value: Any) -> None:
        self.theme_mods[name] = value

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    @property
    def static_front_page(self) -> bool:
        """True when the front page displays a static page."""
        return self.get_option(SHOW_ON_FRONT_OPTION) == "page"

    def get_userdata(self, user_id: Optional[int]) -> Optional[Author]:
        if user_id is None:
            return None
        data = self.authors.get(int(user_id))
        if data is None:
            logger.debug(f"No user data for author {user_id}")
            return None
        return Author.from_dict({"id": user_id, **data})

    def load_from_env(self):
        """Load configuration from environment variables."""

        for mod_name in LAYOUT_MOD_DEFAULTS:
            value = os.getenv(layout_mod_env_var(mod_name))
            if value:
                self.theme_mods[mod_name] = value.strip().lower()

        show_on_front = os.getenv(SHOW_ON_FRONT_ENV)
        if show_on_front:
            self.options[SHOW_ON_FRONT_OPTION] = show_on_front.strip().lower()

        # Site info
        self.site_name = os.getenv("BRIAR_SITE_NAME", self.site_name)
        self.site_description = os.getenv("BRIAR_SITE_DESCRIPTION", self.site_description)
        self.wp_version = os.getenv("BRIAR_WP_VERSION", self.wp_version)

        # Logging
        self.log_level = os.getenv("BRIAR_LOG_LEVEL", self.log_level)

    def update_from_dict(self, data: Dict[str, Any]):
        """Merge a parsed config file into this instance."""
        self.theme_mods.update(data.get("theme_mods") or {})
        self.options.update(data.get("options") or {})

        site = data.get("site") or {}
        self.site_name = site.get("name", self.site_name)
        self.site_description = site.get("description", self.site_description)
        self.wp_version = str(site.get("wp_version", self.wp_version))

        for user_id, user in (data.get("authors") or {}).items():
            self.authors[int(user_id)] = dict(user or {})

        self.log_level = data.get("log_level", self.log_level)

    @classmethod
    def from_yaml(cls, path: Path) -> 'ThemeConfig':
        """Build a config from a YAML file. Missing files give the defaults."""
        path = Path(path)
        config = cls(config_dir=path.parent)
        if not path.exists():
            logger.warning("Theme config not found at %s, using defaults", path)
            return config
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config.update_from_dict(data)
        logger.debug(f"Loaded theme config from {path}")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theme_mods": dict(self.theme_mods),
            "options": dict(self.options),
            "site": {
                "name": self.site_name,
                "description": self.site_description,
                "wp_version": self.wp_version,
            },
            "authors": {str(k): v for k, v in self.authors.items()},
            "log_level": self.log_level,
        }


def load_config(config_file: Optional[str] = None) -> ThemeConfig:
    """Load configuration from an optional YAML file, then the environment.

    Args:
        config_file: Optional path to the theme config (e.g. 'config/theme.yaml').

    Returns:
        ThemeConfig with file values applied and environment overrides on top.
    """
    if config_file:
        config = ThemeConfig.from_yaml(Path(config_file))
    else:
        config = ThemeConfig()
    config.load_from_env()
    return config


__all__ = [
    'ThemeConfig', 'load_config',
    'LAYOUT_MOD_DEFAULTS', 'SHOW_ON_FRONT_OPTION', 'SHOW_ON_FRONT_ENV', 'layout_mod_env_var',
    'GLOBAL_LAYOUT_MOD', 'HOME_LAYOUT_MOD', 'BLOG_LAYOUT_MOD', 'ARCHIVE_LAYOUT_MOD',
    'CATEGORY_LAYOUT_MOD', 'SEARCH_LAYOUT_MOD', 'NOT_FOUND_LAYOUT_MOD',
    'SINGLE_LAYOUT_MOD', 'PAGE_LAYOUT_MOD',
]
