from fastapi import APIRouter

from rentx.api.endpoints import auth, health, listings

# Create API router
api_router = APIRouter()

api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(listings.router, tags=["listings"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
