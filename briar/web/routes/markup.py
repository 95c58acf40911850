"""Body class, read-more link and document title routes."""

import logging
from fastapi import APIRouter, Depends

from briar.core.theme import Theme
from briar.web.dependencies import get_theme
from briar.web.models import (
    BodyClassRequest, ClassListResponse, MoreLinkRequest, MoreLinkResponse,
    TitleRequest, TitleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/markup", tags=["markup"])


@router.post("/body-classes", response_model=ClassListResponse)
async def body_classes(body: BodyClassRequest, theme: Theme = Depends(get_theme)):
    return ClassListResponse(classes=theme.body_class(body.context.to_request(), body.classes))


@router.post("/more-link", response_model=MoreLinkResponse)
async def more_link(body: MoreLinkRequest, theme: Theme = Depends(get_theme)):
    return MoreLinkResponse(html=theme.more_link(body.html))


@router.post("/title", response_model=TitleResponse)
async def document_title(body: TitleRequest, theme: Theme = Depends(get_theme)):
    """Filtered document title.

    Hosts with built-in title tag support get the title back unchanged.
    """
    title = theme.document_title(body.context.to_request(), body.title, body.sep)
    return TitleResponse(title=title, shim_active=theme.title_shim_active)
