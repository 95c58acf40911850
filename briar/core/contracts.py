"""Theme Contracts

Value types shared by the layout resolver, the markup helpers and the web layer.

Module overview
- Purpose: Models the host environment explicitly. A RequestContext carries the
  page-type predicates of the current request, the menu types carry what the
  navigation filters receive, and LayoutMode is the allow-list of layouts.
- Collaborators: briar.core.layout, briar.core.theme, briar.utils.*, briar.web.models
- External deps: typing, dataclasses, enum.
"""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, asdict
from enum import Enum


# ============================================================================
# LAYOUT
# ============================================================================

class LayoutMode(str, Enum):
    """Sidebar position, or its absence."""
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def values(cls) -> List[str]:
        return [mode.value for mode in cls]

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """True when ``value`` is one of the accepted layout strings."""
        if isinstance(value, cls):
            return True
        return isinstance(value, str) and value in cls.values()


# Sentinel stored in a per-page-type setting to defer to the global default
LAYOUT_DISABLED = "disabled"


# ============================================================================
# REQUEST
# ============================================================================

# View names accepted by RequestContext.from_views
VIEW_FLAGS: Dict[str, str] = {
    "front_page": "is_front_page",
    "home": "is_home",
    "archive": "is_archive",
    "category": "is_category",
    "search": "is_search",
    "404": "is_404",
    "single": "is_single",
    "page": "is_page",
    "author": "is_author",
    "feed": "is_feed",
}


@dataclass
class Post:
    """The queried post of the current request."""
    id: int
    title: str = ""
    author_id: Optional[int] = None


@dataclass
class Author:
    """A site user as returned by the user lookup."""
    id: int
    display_name: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Author':
        return cls(
            id=int(data["id"]),
            display_name=data.get("display_name", ""),
            description=data.get("description", ""),
        )


@dataclass
class RequestContext:
    """Page-type predicates and per-request data of the current view.

    Predicates overlap the way the host's conditional tags do: a category
    archive is also an archive, a static front page is also a page.
    """
    is_front_page: bool = False
    is_home: bool = False
    is_archive: bool = False
    is_category: bool = False
    is_search: bool = False
    is_404: bool = False
    is_single: bool = False
    is_page: bool = False
    is_author: bool = False
    is_feed: bool = False
    is_customize_preview: bool = False
    is_multi_author: bool = False
    has_post_thumbnail: bool = False
    paged: int = 0
    page: int = 0
    post: Optional[Post] = None
    # Set by the author bootstrap on author archives
    authordata: Optional[Author] = None

    @property
    def is_singular(self) -> bool:
        return self.is_single or self.is_page

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["is_singular"] = self.is_singular
        return data

    @classmethod
    def from_views(cls, views: List[str], **kwargs: Any) -> 'RequestContext':
        """Build a context with the predicates named in ``views`` set.

        Raises:
            ValueError: For a view name not in VIEW_FLAGS
        """
        flags = {}
        for view in views:
            if view not in VIEW_FLAGS:
                raise ValueError(f"Unknown view '{view}', expected one of {sorted(VIEW_FLAGS)}")
            flags[VIEW_FLAGS[view]] = True
        flags.update(kwargs)
        return cls(**flags)


# ============================================================================
# NAVIGATION
# ============================================================================

@dataclass
class MenuItem:
    """A navigation menu entry."""
    id: int
    title: str = ""
    url: str = ""


@dataclass
class MenuArgs:
    """Options object passed to the menu walker.

    ``item_class`` is appended to each ``<li>``; ``link_class`` replaces the
    class attribute of each ``<a>``.
    """
    theme_location: Optional[str] = None
    item_class: Optional[str] = None
    link_class: Optional[str] = None


__all__ = [
    'LayoutMode', 'LAYOUT_DISABLED', 'VIEW_FLAGS',
    'Post', 'Author', 'RequestContext',
    'MenuItem', 'MenuArgs',
]
