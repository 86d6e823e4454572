"""API routers package."""

from dup_portfolio.api.routers.entries import router as entries_router
from dup_portfolio.api.routers.portfolio import router as portfolio_router

__all__ = [
    "entries_router",
    "portfolio_router",
]
