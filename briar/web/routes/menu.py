"""Navigation menu routes."""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends

from briar.core.theme import Theme
from briar.web.dependencies import get_theme
from briar.web.models import (
    MenuItemClassesRequest, ClassListResponse, LinkAttributesRequest, LinkAttributesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/menu", tags=["menu"])


@router.get("/page-args")
async def page_args(theme: Theme = Depends(get_theme)) -> Dict[str, Any]:
    """Arguments for the page-menu fallback."""
    return theme.page_menu_args()


@router.post("/item-classes", response_model=ClassListResponse)
async def item_classes(body: MenuItemClassesRequest, theme: Theme = Depends(get_theme)):
    item = body.item.to_item() if body.item else None
    classes = theme.menu_item_classes(body.classes, item, body.args.to_args(), body.depth)
    return ClassListResponse(classes=classes)


@router.post("/link-attributes", response_model=LinkAttributesResponse)
async def link_attributes(body: LinkAttributesRequest, theme: Theme = Depends(get_theme)):
    item = body.item.to_item() if body.item else None
    atts = theme.menu_link_attributes(body.atts, item, body.args.to_args(), body.depth)
    return LinkAttributesResponse(atts=atts)
