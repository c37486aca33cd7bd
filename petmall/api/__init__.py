"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from petmall.api.health import router as health_router
from petmall.api.products import router as products_router
from petmall.api.wishes import router as wishes_router

__all__ = [
    "health_router",
    "products_router",
    "wishes_router",
]
