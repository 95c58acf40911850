"""Title tag shim for hosts older than 4.1.

Newer hosts render the ``<title>`` tag themselves. On older ones the theme
filters the document title and prints the tag from the ``wp_head`` action.
"""

import re
import logging
from typing import List, Tuple

from markupsafe import escape

from briar.core.contracts import RequestContext
from briar.core.config import ThemeConfig

logger = logging.getLogger(__name__)

TITLE_TAG_SUPPORT_VERSION = "4.1"

# Pre-release and patch markers, ranked around plain numbers
_SPECIAL_FORMS = {
    'dev': 0,
    'alpha': 1, 'a': 1,
    'beta': 2, 'b': 2,
    'rc': 3,
    'pl': 5, 'p': 5,
}
_NUMBER_RANK = 4

_VERSION_RE = re.compile(r'^\d')
_TOKEN_RE = re.compile(r'\d+|[A-Za-z]+')


def _version_key(version: str) -> List[Tuple[int, int]]:
    """Split ``version`` into comparable parts.

    ``4.1-beta1`` becomes 4, 1, beta, 1; a marker ranks below a number in
    the same position, so every pre-release of 4.1 sorts before 4.1.
    """
    version = str(version).strip()
    if not _VERSION_RE.match(version):
        raise ValueError(f"Unparseable version: {version!r}")
    key = []
    for token in _TOKEN_RE.findall(version):
        if token.isdigit():
            key.append((_NUMBER_RANK, int(token)))
        else:
            key.append((_SPECIAL_FORMS.get(token.lower(), -1), 0))
    return key


def version_lt(version: str, other: str) -> bool:
    """True when ``version`` sorts before ``other``; missing parts count as 0."""
    a, b = _version_key(version), _version_key(other)
    padding = [(_NUMBER_RANK, 0)] * abs(len(a) - len(b))
    if len(a) < len(b):
        a = a + padding
    else:
        b = b + padding
    return a < b


def needs_title_shim(wp_version: str) -> bool:
    """True when the host predates built-in title tag support."""
    try:
        return version_lt(wp_version, TITLE_TAG_SUPPORT_VERSION)
    except ValueError as e:
        logger.warning(f"{e}; assuming title tag support")
        return False


def wp_title(title: str, sep: str, request: RequestContext, config: ThemeConfig) -> str:
    """Build the document title for the current view.

    Args:
        title: Title computed by the host so far
        sep: Separator placed between title parts
        request: Current view
        config: Supplies the site name and description

    Returns:
        ``title`` followed by the site name, the description on the home or
        front page, and a page number on paginated views other than 404s.
    """
    if request.is_feed:
        return title

    # Add the blog name.
    title += config.site_name

    # Add the blog description for the home/front page.
    if config.site_description and (request.is_home or request.is_front_page):
        title += f" {sep} {config.site_description}"

    # Add a page number if necessary.
    if (request.paged >= 2 or request.page >= 2) and not request.is_404:
        title += f" {sep} Page {max(request.paged, request.page)}"

    return title


def render_title(registry, request: RequestContext, sep: str = '|', base_title: str = '') -> str:
    """Return the ``<title>`` element, running the ``wp_title`` filter.

    ``base_title`` is the view's own title; as with a right-hand separator
    it is followed by ``sep`` before the site name is appended.
    """
    title = f"{base_title} {sep} " if base_title else ''
    title = registry.apply_filters('wp_title', title, sep, request)
    return f"<title>{escape(title)}</title>"


__all__ = ['needs_title_shim', 'version_lt', 'wp_title', 'render_title', 'TITLE_TAG_SUPPORT_VERSION']
