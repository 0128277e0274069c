"""API routes mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from app.api.routes import accounts, health, products

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(accounts.router, tags=["auth"])
router.include_router(products.router, prefix="/products", tags=["products"])
