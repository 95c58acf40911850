"""Navigation menu filters.

Lets a menu call site pass ``item_class`` and ``link_class`` in its args to
style the generated ``<li>`` and ``<a>`` elements.
"""

import logging
from typing import Dict, Any, List, Optional

from briar.core.contracts import MenuArgs, MenuItem

logger = logging.getLogger(__name__)


def page_menu_args(args: Dict[str, Any]) -> Dict[str, Any]:
    """Show a home link in the page-menu fallback."""
    args['show_home'] = True
    return args


def nav_menu_css_class(classes: List[str], item: Optional[MenuItem] = None,
                       args: Optional[MenuArgs] = None, depth: int = 0) -> List[str]:
    """Append ``args.item_class`` to the classes of a menu item."""
    if args is not None and args.item_class is not None:
        classes.append(args.item_class)
    return classes


def nav_menu_link_attributes(atts: Dict[str, Any], item: Optional[MenuItem] = None,
                             args: Optional[MenuArgs] = None, depth: int = 0) -> Dict[str, Any]:
    """Set the class attribute of a menu link to ``args.link_class``."""
    if args is not None and args.link_class is not None:
        atts['class'] = args.link_class
    return atts


__all__ = ['page_menu_args', 'nav_menu_css_class', 'nav_menu_link_attributes']
