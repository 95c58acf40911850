"""Layout resolution API routes."""

import logging
from fastapi import APIRouter, Depends

from briar.core.theme import Theme
from briar.core.layout import join_classes
from briar.web.dependencies import get_theme
from briar.web.models import (
    PageContext, LayoutResponse, ThumbnailSizeRequest, ThumbnailSizeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/layout", tags=["layout"])


@router.post("/resolve", response_model=LayoutResponse)
async def resolve(context: PageContext, theme: Theme = Depends(get_theme)):
    """Resolve the layout of a view and its column classes."""
    request = context.to_request()
    layout = theme.get_layout(request)
    main = theme.main_class(request)
    sidebar = theme.sidebar_class(request)

    return LayoutResponse(
        layout=layout.value,
        main_classes=main,
        sidebar_classes=sidebar,
        has_sidebar=sidebar is not None,
        main_class_attr=join_classes(main),
        sidebar_class_attr=join_classes(sidebar),
    )


@router.post("/thumbnail-size", response_model=ThumbnailSizeResponse)
async def thumbnail_size(body: ThumbnailSizeRequest, theme: Theme = Depends(get_theme)):
    """Image size to use for a post thumbnail in this view."""
    size = theme.thumbnail_size(body.size, body.context.to_request())
    return ThumbnailSizeResponse(requested=body.size, size=size)
