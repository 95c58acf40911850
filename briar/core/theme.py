"""Theme

Binds the theme configuration to a hook registry and exposes the template
helpers (layout, column classes, body classes, menus, title) through it.

Module overview
- Purpose: Theme.setup() registers every theme callback on the registry;
  the public helpers apply the matching filter or fire the matching action,
  so other code registered on the same hooks takes part.
- Lifecycle: one Theme per site configuration; setup() once at startup.
- Collaborators: briar.core.hooks.HookRegistry, briar.core.layout,
  briar.utils.menu, briar.utils.content, briar.utils.title, briar.utils.author
- Concurrency: registration is guarded by the registry lock; the helpers
  read the config fresh on every call.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .config import ThemeConfig
from .contracts import LayoutMode, MenuArgs, MenuItem, RequestContext
from .hooks import HookRegistry
from .layout import (
    resolve_layout, main_classes, sidebar_classes,
    select_thumbnail_size, join_classes,
)
from briar.utils.menu import page_menu_args, nav_menu_css_class, nav_menu_link_attributes
from briar.utils.content import the_content_more_link, body_classes
from briar.utils.title import needs_title_shim, wp_title, render_title
from briar.utils.author import setup_author

logger = logging.getLogger(__name__)


class Theme:
    """Template-facing entry point of the theme."""

    def __init__(self, config: Optional[ThemeConfig] = None, registry: Optional[HookRegistry] = None):
        self.config = config or ThemeConfig()
        self.registry = registry or HookRegistry()
        self._is_setup = False

    # ------------------------------------------------------------------
    # Hook registration
    # ------------------------------------------------------------------

    def setup(self) -> 'Theme':
        """Register the theme callbacks. Safe to call more than once."""
        if self._is_setup:
            return self

        registry = self.registry
        registry.add_filter('wp_page_menu_args', page_menu_args)
        registry.add_filter('nav_menu_css_class', nav_menu_css_class, 10, 4)
        registry.add_filter('nav_menu_link_attributes', nav_menu_link_attributes, 10, 4)
        registry.add_filter('the_content_more_link', the_content_more_link, 10, 1)
        registry.add_filter('body_class', body_classes, 10, 2)
        registry.add_action('wp', self._setup_author, 10, 1)
        registry.add_filter('post_thumbnail_size', self._post_thumbnail_size, 10, 2)

        if needs_title_shim(self.config.wp_version):
            logger.info(f"Host version {self.config.wp_version} lacks title tag support, enabling shim")
            registry.add_filter('wp_title', self._wp_title, 10, 3)
            registry.add_action('wp_head', self._render_title, 10, 1)

        self._is_setup = True
        return self

    @property
    def title_shim_active(self) -> bool:
        return self.registry.has_filter('wp_title')

    def _setup_author(self, request: RequestContext):
        return setup_author(request, self.config.get_userdata)

    def _post_thumbnail_size(self, size: str, request: RequestContext) -> str:
        return select_thumbnail_size(size, self.get_layout(request))

    def _wp_title(self, title: str, sep: str, request: RequestContext) -> str:
        return wp_title(title, sep, request, self.config)

    def _render_title(self, request: RequestContext) -> str:
        return render_title(self.registry, request)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def get_layout(self, request: RequestContext) -> LayoutMode:
        return resolve_layout(request, self.config)

    def main_class(self, request: RequestContext, echo: bool = False) -> Union[List[str], str]:
        """Main column classes; the class attribute string when ``echo``."""
        classes = main_classes(
            self.get_layout(request),
            is_single=request.is_single,
            is_preview=request.is_customize_preview,
        )
        return join_classes(classes) if echo else classes

    def sidebar_class(self, request: RequestContext, echo: bool = False) -> Union[List[str], str, None]:
        """Sidebar classes, or None when the layout has no sidebar."""
        classes = sidebar_classes(self.get_layout(request), is_preview=request.is_customize_preview)
        if classes is None:
            return None
        return join_classes(classes) if echo else classes

    def thumbnail_size(self, size: str, request: RequestContext) -> str:
        return self.registry.apply_filters('post_thumbnail_size', size, request)

    # ------------------------------------------------------------------
    # Markup
    # ------------------------------------------------------------------

    def body_class(self, request: RequestContext, classes: Optional[List[str]] = None) -> List[str]:
        return self.registry.apply_filters('body_class', list(classes or []), request)

    def more_link(self, link: str) -> str:
        return self.registry.apply_filters('the_content_more_link', link)

    def page_menu_args(self, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.registry.apply_filters('wp_page_menu_args', dict(args or {}))

    def menu_item_classes(self, classes: List[str], item: Optional[MenuItem] = None,
                          args: Optional[MenuArgs] = None, depth: int = 0) -> List[str]:
        return self.registry.apply_filters('nav_menu_css_class', list(classes), item, args, depth)

    def menu_link_attributes(self, atts: Dict[str, Any], item: Optional[MenuItem] = None,
                             args: Optional[MenuArgs] = None, depth: int = 0) -> Dict[str, Any]:
        return self.registry.apply_filters('nav_menu_link_attributes', dict(atts), item, args, depth)

    def document_title(self, request: RequestContext, title: str = '', sep: str = '|') -> str:
        return self.registry.apply_filters('wp_title', title, sep, request)

    # ------------------------------------------------------------------
    # Request lifecycle
    # ------------------------------------------------------------------

    def bootstrap(self, request: RequestContext) -> RequestContext:
        """Fire the ``wp`` action once the request's query is known."""
        self.registry.do_action('wp', request)
        return request

    def head(self, request: RequestContext) -> str:
        """Output of the ``wp_head`` action."""
        return "\n".join(str(out) for out in self.registry.do_action('wp_head', request) if out)


__all__ = ['Theme']
