"""
Page routes rendering the theme preview template.
"""

import logging
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from briar.core.contracts import MenuArgs, MenuItem, Post, RequestContext
from briar.core.theme import Theme
from briar.web.dependencies import get_theme

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

PRIMARY_MENU = [
    MenuItem(id=1, title="Home", url="/"),
    MenuItem(id=2, title="Blog", url="/blog"),
    MenuItem(id=3, title="About", url="/about"),
]
PRIMARY_MENU_ARGS = MenuArgs(theme_location="primary", item_class="nav__item", link_class="nav__link")


@router.get("/preview", response_class=HTMLResponse)
async def preview_page(
    request: Request,
    view: List[str] = Query(default=[]),
    paged: int = Query(default=0, ge=0),
    preview: bool = False,
    multi_author: bool = False,
    thumbnail: bool = False,
    author_id: Optional[int] = Query(default=None),
    theme: Theme = Depends(get_theme),
):
    """Render a page skeleton for the given views with the theme's classes."""
    post = Post(id=1, title="Sample post", author_id=author_id) if author_id is not None else None
    try:
        context = RequestContext.from_views(
            view,
            paged=paged,
            is_customize_preview=preview,
            is_multi_author=multi_author,
            has_post_thumbnail=thumbnail,
            post=post,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    theme.bootstrap(context)

    menu = []
    for item in PRIMARY_MENU:
        menu.append({
            "item": item,
            "classes": " ".join(theme.menu_item_classes(["menu-item"], item, PRIMARY_MENU_ARGS, 0)),
            "atts": theme.menu_link_attributes({"href": item.url}, item, PRIMARY_MENU_ARGS, 0),
        })

    return templates.TemplateResponse(request, "preview.html", {
        "title_tag": theme.head(context),
        "body_class": " ".join(theme.body_class(context)),
        "main_class": theme.main_class(context, echo=True),
        "sidebar_class": theme.sidebar_class(context, echo=True),
        "thumbnail_size": theme.thumbnail_size("blog-post-image", context),
        "more_link": theme.more_link('<a href="#more" class="more-link">Continue reading</a>'),
        "menu": menu,
        "author": context.authordata,
        "site_name": theme.config.site_name,
    })
