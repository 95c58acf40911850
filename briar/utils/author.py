"""Author archive bootstrap."""

import logging
from typing import Callable, Optional

from briar.core.contracts import Author, RequestContext

logger = logging.getLogger(__name__)


def setup_author(request: RequestContext,
                 get_userdata: Callable[[Optional[int]], Optional[Author]]) -> Optional[Author]:
    """Attach the archive's author to the request on author archives.

    Author templates can then print author details without looping over
    the posts first.

    Returns:
        The author that was set, or None when the request is not an author
        archive with a queried post
    """
    if not request.is_author or request.post is None:
        return None

    request.authordata = get_userdata(request.post.author_id)
    if request.authordata is None:
        logger.warning(f"Author archive for unknown user {request.post.author_id}")
    return request.authordata


__all__ = ['setup_author']
