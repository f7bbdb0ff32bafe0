"""
Shared API dependencies.
"""

from typing import Optional

from fastapi import Query
from slowapi import Limiter
from slowapi.util import get_remote_address

from shopapp.config import settings
from shopapp.pagination import PageRequest

limiter = Limiter(key_func=get_remote_address)


def get_page_request(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: Optional[int] = Query(None, ge=1, le=settings.MAX_PAGE_SIZE),
) -> PageRequest:
    """Build the page request from the ``page``/``size`` query parameters."""
    return PageRequest(page=page, size=size or settings.DEFAULT_PAGE_SIZE)
