import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException

from rentx.api.deps import get_listing_service
from rentx.core.exceptions import ClientInputError
from rentx.services.listing_service import ListingService

logger = logging.getLogger(__name__)

router = APIRouter()

def _form_text(form, key: str, default: Optional[str] = "") -> Optional[str]:
    # Missing fields and stray file parts both read as the default.
    value = form.get(key)
    return value if isinstance(value, str) else default

@router.post("/create", response_class=PlainTextResponse)
async def create_listing(
    request: Request,
    listings: ListingService = Depends(get_listing_service)
) -> str:
    """
    Create a listing from a multipart form.

    Fields: user_id, name, description, paymentPerDay and the image file.
    The image is stored before the row is inserted.
    """
    try:
        form = await request.form()
    except StarletteHTTPException as e:
        logger.warning(f"ParseMultipartForm error: {e.detail}")
        raise ClientInputError(f"Could not parse form: {e.detail}") from e

    try:
        image = form.get("image")
        upload = image if isinstance(image, UploadFile) else None
        await run_in_threadpool(
            listings.create,
            _form_text(form, "user_id", default=None),
            _form_text(form, "name"),
            _form_text(form, "description"),
            _form_text(form, "paymentPerDay", default=None),
            upload.file if upload is not None else None,
            upload.filename if upload is not None else None,
        )
    finally:
        await form.close()

    return "Listing created\n"

@router.get("/listings", response_class=PlainTextResponse)
def list_listings(
    listings: ListingService = Depends(get_listing_service)
) -> str:
    """All listings, one line each."""
    return "".join(f"{view.to_line()}\n" for view in listings.list_all())

@router.get("/dashboard/{user_id:path}", response_class=PlainTextResponse)
def dashboard(
    user_id: str,
    listings: ListingService = Depends(get_listing_service)
) -> str:
    """
    Listings owned by one user.

    Everything after /dashboard/ must be the numeric owner id; anything else is 400.
    """
    views = listings.list_by_owner(user_id)
    return "".join(f"{view.to_line(description_label='Desc')}\n" for view in views)
