"""Layout Resolution

Chooses the sidebar position for the current view and maps it to the grid
classes of the main column and the sidebar.

Module overview
- Purpose: resolve_layout walks LAYOUT_RULES in order; every rule whose
  predicate holds overwrites the working value, so later (more specific) page
  types win when several predicates are true at once. The class builders and
  the thumbnail selector are pure functions of the resolved layout.
- Collaborators: briar.core.config.ThemeConfig (settings),
  briar.core.contracts.RequestContext (predicates), briar.core.theme.Theme.
- Error surface: none. Unknown or disabled settings fall back to the global
  default; an unknown global default falls back to DEFAULT_LAYOUT.

Example:
    >>> config = ThemeConfig(theme_mods={"briar_search_layout": "none"})
    >>> resolve_layout(RequestContext(is_search=True, is_archive=True), config)
    <LayoutMode.NONE: 'none'>
"""

import logging
from typing import Callable, List, Optional, Tuple, Union
from dataclasses import dataclass

from .contracts import LayoutMode, RequestContext
from .config import (
    ThemeConfig, LAYOUT_MOD_DEFAULTS,
    GLOBAL_LAYOUT_MOD, HOME_LAYOUT_MOD, BLOG_LAYOUT_MOD, ARCHIVE_LAYOUT_MOD,
    CATEGORY_LAYOUT_MOD, SEARCH_LAYOUT_MOD, NOT_FOUND_LAYOUT_MOD,
    SINGLE_LAYOUT_MOD, PAGE_LAYOUT_MOD,
)

logger = logging.getLogger(__name__)

# Used when the global default itself is not an accepted layout
DEFAULT_LAYOUT = LayoutMode.LEFT

BLOG_POST_IMAGE_SIZE = "blog-post-image"
FULL_WIDTH_BLOG_POST_IMAGE_SIZE = "full-width-blog-post-image"

# Wider image variants used when the content spans the full width
FULL_WIDTH_IMAGE_SIZES = {
    BLOG_POST_IMAGE_SIZE: FULL_WIDTH_BLOG_POST_IMAGE_SIZE,
}

MAIN_PREVIEW_CLASSES = ['col-md-12', 'briar-main-class']
SIDEBAR_PREVIEW_CLASSES = ['col-md-4', 'briar-sidebar-class']


@dataclass(frozen=True)
class LayoutRule:
    """One step of the layout cascade.

    ``setting`` names the theme mod holding the layout for this page type;
    it may depend on the config (the blog listing reads a different mod when
    the front page is static).
    """
    name: str
    applies: Callable[[RequestContext, ThemeConfig], bool]
    setting: Callable[[ThemeConfig], str]


def _blog_listing_setting(config: ThemeConfig) -> str:
    return BLOG_LAYOUT_MOD if config.static_front_page else HOME_LAYOUT_MOD


# Evaluation order matters: last matching rule wins
LAYOUT_RULES: Tuple[LayoutRule, ...] = (
    LayoutRule("static_front_page",
               lambda request, config: request.is_front_page and config.static_front_page,
               lambda config: HOME_LAYOUT_MOD),
    LayoutRule("home", lambda request, config: request.is_home, _blog_listing_setting),
    LayoutRule("archive", lambda request, config: request.is_archive, lambda config: ARCHIVE_LAYOUT_MOD),
    LayoutRule("category", lambda request, config: request.is_category, lambda config: CATEGORY_LAYOUT_MOD),
    LayoutRule("search", lambda request, config: request.is_search, lambda config: SEARCH_LAYOUT_MOD),
    LayoutRule("404", lambda request, config: request.is_404, lambda config: NOT_FOUND_LAYOUT_MOD),
    LayoutRule("single", lambda request, config: request.is_single, lambda config: SINGLE_LAYOUT_MOD),
    LayoutRule("page", lambda request, config: request.is_page, lambda config: PAGE_LAYOUT_MOD),
)


def _read_layout_mod(config: ThemeConfig, name: str):
    return config.get_theme_mod(name, LAYOUT_MOD_DEFAULTS[name])


def resolve_layout(request: RequestContext, config: ThemeConfig) -> LayoutMode:
    """Return the sidebar position for ``request``.

    Args:
        request: Page-type predicates of the current view
        config: Theme settings, read fresh on every call

    Returns:
        LayoutMode; always one of none, left or right
    """
    layout = None
    matched = None
    for rule in LAYOUT_RULES:
        if rule.applies(request, config):
            layout = _read_layout_mod(config, rule.setting(config))
            matched = rule.name

    if not LayoutMode.is_valid(layout):
        global_layout = _read_layout_mod(config, GLOBAL_LAYOUT_MOD)
        if not LayoutMode.is_valid(global_layout):
            logger.warning(
                f"Invalid global layout {global_layout!r}, using '{DEFAULT_LAYOUT.value}'"
            )
            global_layout = DEFAULT_LAYOUT
        layout = global_layout

    logger.debug(f"Resolved layout {layout!r} (last matching rule: {matched})")
    return LayoutMode(layout)


def main_classes(layout: Union[LayoutMode, str], is_single: bool = False,
                 is_preview: bool = False) -> List[str]:
    """Grid classes of the main content column."""
    if is_preview:
        return list(MAIN_PREVIEW_CLASSES)

    if layout == LayoutMode.NONE:
        if is_single:
            return ['col-lg-8 col-md-10 col-lg-offset-2 col-md-offset-1']
        return ['col-md-12']

    classes = ['col-md-8']
    if layout == LayoutMode.LEFT:
        # Content comes first in the markup; push it past the sidebar
        classes.append('col-md-push-4')
    return classes


def sidebar_classes(layout: Union[LayoutMode, str], is_preview: bool = False) -> Optional[List[str]]:
    """Grid classes of the sidebar, or None when no sidebar is rendered."""
    if is_preview:
        return list(SIDEBAR_PREVIEW_CLASSES)

    if layout == LayoutMode.NONE:
        return None

    classes = ['col-md-4']
    if layout == LayoutMode.LEFT:
        classes.append('col-md-pull-8')
    return classes


def select_thumbnail_size(size: str, layout: Union[LayoutMode, str]) -> str:
    """Swap in the full-width image size when there is no sidebar."""
    if layout == LayoutMode.NONE:
        return FULL_WIDTH_IMAGE_SIZES.get(size, size)
    return size


def join_classes(classes: Optional[List[str]]) -> str:
    """Render a class list as the value of an HTML class attribute."""
    return ' '.join(classes or [])


__all__ = [
    'LayoutRule', 'LAYOUT_RULES', 'DEFAULT_LAYOUT',
    'BLOG_POST_IMAGE_SIZE', 'FULL_WIDTH_BLOG_POST_IMAGE_SIZE',
    'resolve_layout', 'main_classes', 'sidebar_classes',
    'select_thumbnail_size', 'join_classes',
]
