"""Pydantic models for the FastAPI web application."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from briar.core.contracts import MenuArgs, MenuItem, Post, RequestContext


class PostModel(BaseModel):
    """Queried post."""
    id: int
    title: str = ""
    author_id: Optional[int] = None


class PageContext(BaseModel):
    """Page-type predicates and request data of the view being rendered."""
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
    is_customize_preview: bool = Field(default=False, description="Live customizer preview")
    is_multi_author: bool = Field(default=False, description="More than one published author")
    has_post_thumbnail: bool = False
    paged: int = Field(default=0, ge=0)
    page: int = Field(default=0, ge=0)
    post: Optional[PostModel] = None

    def to_request(self) -> RequestContext:
        data = self.model_dump(exclude={"post"})
        post = Post(**self.post.model_dump()) if self.post else None
        return RequestContext(post=post, **data)


class LayoutResponse(BaseModel):
    """Resolved layout and column classes."""
    layout: str
    main_classes: List[str]
    sidebar_classes: Optional[List[str]] = None
    has_sidebar: bool
    main_class_attr: str
    sidebar_class_attr: str = ""


class ThumbnailSizeRequest(BaseModel):
    size: str = Field(..., description="Requested image size key")
    context: PageContext = Field(default_factory=PageContext)


class ThumbnailSizeResponse(BaseModel):
    requested: str
    size: str


class BodyClassRequest(BaseModel):
    classes: List[str] = Field(default_factory=list)
    context: PageContext = Field(default_factory=PageContext)


class ClassListResponse(BaseModel):
    classes: List[str]


class MoreLinkRequest(BaseModel):
    html: str = Field(..., description="Rendered read-more link")


class MoreLinkResponse(BaseModel):
    html: str


class TitleRequest(BaseModel):
    title: str = ""
    sep: str = "|"
    context: PageContext = Field(default_factory=PageContext)


class TitleResponse(BaseModel):
    title: str
    shim_active: bool


class MenuItemModel(BaseModel):
    id: int
    title: str = ""
    url: str = ""

    def to_item(self) -> MenuItem:
        return MenuItem(**self.model_dump())


class MenuArgsModel(BaseModel):
    theme_location: Optional[str] = None
    item_class: Optional[str] = None
    link_class: Optional[str] = None

    def to_args(self) -> MenuArgs:
        return MenuArgs(**self.model_dump())


class MenuItemClassesRequest(BaseModel):
    classes: List[str] = Field(default_factory=list)
    item: Optional[MenuItemModel] = None
    args: MenuArgsModel = Field(default_factory=MenuArgsModel)
    depth: int = Field(default=0, ge=0)


class LinkAttributesRequest(BaseModel):
    atts: Dict[str, Any] = Field(default_factory=dict)
    item: Optional[MenuItemModel] = None
    args: MenuArgsModel = Field(default_factory=MenuArgsModel)
    depth: int = Field(default=0, ge=0)


class LinkAttributesResponse(BaseModel):
    atts: Dict[str, Any]


class ThemeModUpdate(BaseModel):
    value: str = Field(..., description="New value of the theme mod")


class ThemeModResponse(BaseModel):
    name: str
    value: Any
    config_hash: str


class ConfigSnapshotResponse(BaseModel):
    """Full configuration snapshot."""
    theme_mods: Dict[str, Any] = Field(default_factory=dict)
    options: Dict[str, Any] = Field(default_factory=dict)
    site: Dict[str, Any] = Field(default_factory=dict)
    title_shim_active: bool = False
    config_hash: str
    timestamp: str
    version: str = "1.0.0"
