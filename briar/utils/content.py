"""Post content and body markup helpers."""

import logging
from typing import List

from briar.core.contracts import RequestContext

logger = logging.getLogger(__name__)

MORE_LINK_CLASS = '"more-link"'
MORE_LINK_THEME_CLASS = '"post-item__btn btn--transition"'


def the_content_more_link(link: str) -> str:
    """Restyle the "read more" link as a theme button."""
    return link.replace(MORE_LINK_CLASS, MORE_LINK_THEME_CLASS)


def body_classes(classes: List[str], request: RequestContext) -> List[str]:
    """Add theme classes to the ``<body>`` element.

    Args:
        classes: Classes computed so far
        request: Current view

    Returns:
        The same list with ``group-blog``, ``customize-preview`` and
        ``single--featured`` appended where they apply
    """
    # More than one published author
    if request.is_multi_author:
        classes.append('group-blog')

    if request.is_customize_preview:
        classes.append('customize-preview')

    if request.is_singular and request.has_post_thumbnail:
        classes.append('single--featured')

    return classes


__all__ = ['the_content_more_link', 'body_classes', 'MORE_LINK_CLASS', 'MORE_LINK_THEME_CLASS']
