"""Shared API dependencies.

Request-scoped services and the domain error to HTTP error conversion.
"""

from typing import Annotated

from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from petmall.catalog.service import CatalogService
from petmall.domain.exceptions import DomainError
from petmall.infrastructure.database import get_session
from petmall.wishlist.service import WishlistService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_catalog_service(session: SessionDep) -> CatalogService:
    """Get catalog service bound to the request session."""
    return CatalogService(session)


def get_wishlist_service(session: SessionDep) -> WishlistService:
    """Get wishlist service bound to the request session."""
    return WishlistService(session)


def http_error(status_code: int, error: DomainError) -> HTTPException:
    """Build an HTTPException carrying a domain error's code and message.

    Args:
        status_code: HTTP status to respond with.
        error: Domain error raised by a service.

    Returns:
        HTTPException for the app-level handler to render.
    """
    return HTTPException(
        status_code=status_code,
        detail={
            "error_code": error.error_code,
            "message": error.message,
        },
    )
