"""API v1 router configuration."""

from fastapi import APIRouter

from finance_engine.api.v1.endpoints import catalog, health, pricing

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    pricing.router,
    tags=["pricing"],
)

api_router.include_router(
    catalog.router,
    prefix="/catalog",
    tags=["catalog"],
)
