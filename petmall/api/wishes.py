"""Wishlist API endpoints.

Provides endpoints for a user's saved products:
- POST /users/{user_id}/wishes - save a product
- GET /users/{user_id}/wishes - list saved products
- DELETE /users/{user_id}/wishes/{product_id} - remove a saved product
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from petmall.api.dependencies import get_wishlist_service, http_error
from petmall.api.products import product_to_response
from petmall.api.schemas import (
    ErrorResponse,
    WishCreateRequest,
    WishItemSchema,
    WishListResponse,
    WishResponse,
)
from petmall.domain.exceptions import (
    AlreadyInWishlistError,
    NotInWishlistError,
    ProductNotFoundError,
    UserNotFoundError,
)
from petmall.wishlist.service import WishlistService

router = APIRouter(prefix="/users/{user_id}/wishes", tags=["Wishlist"])

WishlistServiceDep = Annotated[WishlistService, Depends(get_wishlist_service)]


@router.post(
    "",
    response_model=WishResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Add product to wishlist",
)
async def add_wish(
    user_id: int,
    request: WishCreateRequest,
    service: WishlistServiceDep,
) -> WishResponse:
    """Save a product to the user's wishlist.

    Raises:
        HTTPException: 404 if user or product is missing, 409 if already saved.
    """
    try:
        wish = await service.add_wish(user_id, request.product_id)
    except (UserNotFoundError, ProductNotFoundError) as e:
        raise http_error(status.HTTP_404_NOT_FOUND, e) from e
    except AlreadyInWishlistError as e:
        raise http_error(status.HTTP_409_CONFLICT, e) from e

    return WishResponse.model_validate(wish)


@router.get(
    "",
    response_model=WishListResponse,
    responses={404: {"model": ErrorResponse}},
    summary="List wishlist",
)
async def list_wishes(
    user_id: int,
    service: WishlistServiceDep,
) -> WishListResponse:
    """List the user's saved products; empty if none."""
    try:
        wishes = await service.list_wishes(user_id)
    except UserNotFoundError as e:
        raise http_error(status.HTTP_404_NOT_FOUND, e) from e

    return WishListResponse(
        items=[
            WishItemSchema(wish_id=w.id, product=product_to_response(w.product))
            for w in wishes
        ],
        total=len(wishes),
    )


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Remove product from wishlist",
)
async def remove_wish(
    user_id: int,
    product_id: int,
    service: WishlistServiceDep,
) -> Response:
    """Remove a product from the user's wishlist.

    Raises:
        HTTPException: If the product is not in the wishlist.
    """
    try:
        await service.remove_wish(user_id, product_id)
    except NotInWishlistError as e:
        raise http_error(status.HTTP_404_NOT_FOUND, e) from e

    return Response(status_code=status.HTTP_204_NO_CONTENT)
