"""Configuration Validator - defaults, structural checks and snapshots of the theme config."""

import os
import json
import hashlib
import logging
from pathlib import Path
from typing import Any, Dict
from datetime import datetime
from dataclasses import dataclass, asdict

import yaml

from .config import (
    ThemeConfig, LAYOUT_MOD_DEFAULTS, SHOW_ON_FRONT_OPTION, SHOW_ON_FRONT_ENV,
    GLOBAL_LAYOUT_MOD, layout_mod_env_var,
)
from .contracts import LayoutMode, LAYOUT_DISABLED

logger = logging.getLogger(__name__)

THEME_CONFIG_FILE = 'theme.yaml'
ENVIRONMENT_SOURCE = 'environment'


@dataclass
class ValidationError(Exception):
    """Configuration validation error."""
    field: str
    message: str
    config_file: str

    def __str__(self) -> str:
        return f"{self.config_file}: {self.field}: {self.message}"


@dataclass
class ConfigSchema:
    """Configuration schema definitions."""

    MAPPING_SECTIONS = ['theme_mods', 'options', 'site', 'authors']

    OPTIONS_DEFAULTS = {
        SHOW_ON_FRONT_OPTION: 'posts',
    }
    SITE_DEFAULTS = {
        'name': 'Briar',
        'description': '',
        'wp_version': '6.4',
    }

    SHOW_ON_FRONT_VALUES = ['posts', 'page']


class ConfigValidator:
    """Validates theme configuration and merges it with defaults."""

    def __init__(self, config_dir: Path = None):
        """Initialize validator.

        Args:
            config_dir: Path to config directory (default: ./config)
        """
        self.config_dir = Path(config_dir) if config_dir else Path("./config")

    def validate_theme_config(self, config: Dict[str, Any],
                              config_file: str = THEME_CONFIG_FILE) -> Dict[str, Any]:
        """Validate theme configuration with defaults.

        Args:
            config: Raw theme configuration

        Returns:
            Validated configuration with defaults applied

        Raises:
            ValidationError: If validation fails
        """
        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ValidationError(
                field='root',
                message="Theme config must be a mapping",
                config_file=config_file
            )

        for section in ConfigSchema.MAPPING_SECTIONS:
            value = config.get(section)
            if value is None:
                config[section] = {}
            elif not isinstance(value, dict):
                raise ValidationError(
                    field=section,
                    message=f"'{section}' must be a dictionary",
                    config_file=config_file
                )

        # Apply defaults
        for key, value in LAYOUT_MOD_DEFAULTS.items():
            config['theme_mods'].setdefault(key, value)
        for key, value in ConfigSchema.OPTIONS_DEFAULTS.items():
            config['options'].setdefault(key, value)
        for key, value in ConfigSchema.SITE_DEFAULTS.items():
            config['site'].setdefault(key, value)

        self._check_show_on_front(
            config['options'][SHOW_ON_FRONT_OPTION], f"options.{SHOW_ON_FRONT_OPTION}", config_file
        )
        self._check_authors(config['authors'], config_file)

        # Unknown layouts degrade to the global default at render time
        for key in LAYOUT_MOD_DEFAULTS:
            value = config['theme_mods'][key]
            if not self.is_accepted_layout(key, value):
                logger.warning(f"{config_file}: theme_mods.{key}={value!r} is not a known layout")

        return config

    @staticmethod
    def _check_show_on_front(value: Any, field: str, config_file: str):
        if value not in ConfigSchema.SHOW_ON_FRONT_VALUES:
            raise ValidationError(
                field=field,
                message=f"Expected one of {ConfigSchema.SHOW_ON_FRONT_VALUES}, got {value!r}",
                config_file=config_file
            )

    @staticmethod
    def _check_authors(authors: Dict[Any, Any], config_file: str):
        """User ids must be integers and each user a mapping (or empty)."""
        for user_id, user in authors.items():
            try:
                int(user_id)
            except (TypeError, ValueError):
                raise ValidationError(
                    field=f"authors.{user_id}",
                    message=f"User id must be an integer, got {user_id!r}",
                    config_file=config_file
                )
            if user is not None and not isinstance(user, dict):
                raise ValidationError(
                    field=f"authors.{user_id}",
                    message="User entry must be a dictionary",
                    config_file=config_file
                )

    def validate_environment(self, config: ThemeConfig) -> ThemeConfig:
        """Check the values ``BRIAR_*`` overrides put into ``config``.

        Raises:
            ValidationError: For an unknown ``show_on_front`` override
        """
        for key in LAYOUT_MOD_DEFAULTS:
            env_name = layout_mod_env_var(key)
            if os.getenv(env_name) and not self.is_accepted_layout(key, config.get_theme_mod(key)):
                logger.warning(f"{env_name}={config.get_theme_mod(key)!r} is not a known layout for {key}")

        if os.getenv(SHOW_ON_FRONT_ENV):
            self._check_show_on_front(
                config.get_option(SHOW_ON_FRONT_OPTION), SHOW_ON_FRONT_ENV, ENVIRONMENT_SOURCE
            )
        return config

    @staticmethod
    def is_accepted_layout(key: str, value: Any) -> bool:
        """True when ``value`` is a layout the ``key`` setting accepts."""
        if LayoutMode.is_valid(value):
            return True
        # Only per-page-type settings can defer to the global default
        return key in LAYOUT_MOD_DEFAULTS and key != GLOBAL_LAYOUT_MOD and value == LAYOUT_DISABLED

    def load_and_validate(self) -> Dict[str, Any]:
        """Load and validate ``theme.yaml``.

        Returns:
            Validated configuration; defaults only when the file is missing

        Raises:
            ValidationError: If validation fails
        """
        theme_path = self.config_dir / THEME_CONFIG_FILE
        raw: Any = {}
        if theme_path.exists():
            with open(theme_path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        else:
            logger.warning(f"Theme config not found: {theme_path}, using defaults")

        return self.validate_theme_config(raw)


@dataclass
class ConfigSnapshot:
    """Frozen configuration snapshot with hash"""
    theme_config: Dict[str, Any]
    config_hash: str
    timestamp: str
    engine_version: str = "1.0.0"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def snapshot_config(config: ThemeConfig) -> ConfigSnapshot:
    """Snapshot a live ThemeConfig; the hash changes whenever a value does."""
    data = config.to_dict()
    config_str = json.dumps(data, sort_keys=True, default=str)
    config_hash = hashlib.md5(config_str.encode()).hexdigest()[:8]
    return ConfigSnapshot(
        theme_config=data,
        config_hash=config_hash,
        timestamp=datetime.now().isoformat()
    )


def load_validated_config(config_dir: Path = Path("./config")) -> ThemeConfig:
    """
    Main entry point: load ``theme.yaml``, validate it, apply environment
    overrides. Returns the ready-to-use ThemeConfig.
    """
    validator = ConfigValidator(config_dir)
    data = validator.load_and_validate()

    config = ThemeConfig(config_dir=Path(config_dir))
    config.update_from_dict(data)
    config.load_from_env()
    return validator.validate_environment(config)


__all__ = [
    'ValidationError', 'ConfigSchema', 'ConfigValidator',
    'ConfigSnapshot', 'snapshot_config', 'load_validated_config',
]
