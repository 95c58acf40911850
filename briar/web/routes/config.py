"""Configuration management API routes."""

import logging
from fastapi import APIRouter, Depends, HTTPException

from briar.core.theme import Theme
from briar.core.config import LAYOUT_MOD_DEFAULTS
from briar.core.config_validator import ConfigValidator, snapshot_config
from briar.web.dependencies import get_theme
from briar.web.models import ConfigSnapshotResponse, ThemeModUpdate, ThemeModResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/config", tags=["config"])


@router.get("/snapshot", response_model=ConfigSnapshotResponse)
async def get_config_snapshot(theme: Theme = Depends(get_theme)):
    """Get the live theme configuration with its hash."""
    snapshot = snapshot_config(theme.config)
    data = snapshot.theme_config
    return ConfigSnapshotResponse(
        theme_mods=data.get("theme_mods", {}),
        options=data.get("options", {}),
        site=data.get("site", {}),
        title_shim_active=theme.title_shim_active,
        config_hash=snapshot.config_hash,
        timestamp=snapshot.timestamp,
        version=snapshot.engine_version,
    )


@router.put("/theme-mods/{name}", response_model=ThemeModResponse)
async def set_theme_mod(name: str, body: ThemeModUpdate, theme: Theme = Depends(get_theme)):
    """Set a layout theme mod. Takes effect on the next resolution."""
    if name not in LAYOUT_MOD_DEFAULTS:
        raise HTTPException(status_code=404, detail=f"Unknown theme mod: {name}")

    value = body.value.strip().lower()
    if not ConfigValidator.is_accepted_layout(name, value):
        raise HTTPException(status_code=400, detail=f"Invalid value for {name}: {body.value!r}")

    theme.config.set_theme_mod(name, value)
    logger.info(f"Theme mod {name} set to {value!r}")
    return ThemeModResponse(name=name, value=value, config_hash=snapshot_config(theme.config).config_hash)
