"""Core Infrastructure

Contracts, configuration, the hook registry and layout resolution.
"""

from .contracts import (
    LayoutMode, LAYOUT_DISABLED, Post, Author, RequestContext, MenuItem, MenuArgs,
)
from .config import ThemeConfig, load_config
from .hooks import HookRegistry
from .layout import resolve_layout, main_classes, sidebar_classes, select_thumbnail_size

__all__ = [
    'LayoutMode', 'LAYOUT_DISABLED', 'Post', 'Author', 'RequestContext', 'MenuItem', 'MenuArgs',
    'ThemeConfig', 'load_config', 'HookRegistry',
    'resolve_layout', 'main_classes', 'sidebar_classes', 'select_thumbnail_size',
]
