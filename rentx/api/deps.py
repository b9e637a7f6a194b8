"""
Request-scoped dependencies.

The store is created once per application and kept on ``app.state``; the
services are thin and built per request around it.
"""

from fastapi import Request

from rentx.core.config import Settings
from rentx.db.store import Store
from rentx.services.identity_service import IdentityService
from rentx.services.image_store import ImageStore
from rentx.services.listing_service import ListingService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_identity_service(request: Request) -> IdentityService:
    return IdentityService(get_store(request))


def get_listing_service(request: Request) -> ListingService:
    settings = get_settings(request)
    return ListingService(
        get_store(request),
        ImageStore(settings.UPLOAD_DIR),
        max_image_bytes=settings.max_upload_size_bytes,
    )
