"""
Listing submission and listing queries.

Creating a listing validates everything it can before touching the disk,
then writes the image, then inserts the row. A row therefore always has its
image on disk. If the insert fails after the write, the image is left behind
as an orphan; nothing cleans it up.
"""

import logging
import re
from typing import BinaryIO, List, Optional

from rentx.core.exceptions import (
    ClientInputError,
    ConstraintViolationError,
    StoreError,
)
from rentx.db.store import Store
from rentx.schemas.listing import ListingView
from rentx.services.image_store import ImageStore

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Range of an SQLite INTEGER column.
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


def parse_int(value: Optional[str], field: str) -> int:
    """Parse a form value as a plain decimal integer or raise ClientInputError."""
    if value is None or not _INTEGER.fullmatch(value):
        logger.warning(f"Invalid {field}: {value!r}")
        raise ClientInputError(f"Invalid {field}")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        logger.warning(f"Invalid {field}: {value!r} is out of range")
        raise ClientInputError(f"Invalid {field}")
    return number


class ListingService:
    def __init__(self, store: Store, images: ImageStore, max_image_bytes: int):
        self.store = store
        self.images = images
        self.max_image_bytes = max_image_bytes

    def _read_image(self, image: Optional[BinaryIO]) -> bytes:
        if image is None:
            logger.warning("Image upload error: no image in request")
            raise ClientInputError("Image upload error: no image in request")
        try:
            # One byte over the limit is enough to reject.
            data = image.read(self.max_image_bytes + 1)
        except (OSError, ValueError) as e:
            logger.warning(f"Image upload error: {e}")
            raise ClientInputError(f"Image upload error: {e}") from e
        if len(data) > self.max_image_bytes:
            logger.warning(f"Image upload error: image exceeds {self.max_image_bytes} bytes")
            raise ClientInputError(
                f"Image upload error: image exceeds {self.max_image_bytes} bytes"
            )
        return data

    def create(
        self,
        user_id: Optional[str],
        name: str,
        description: str,
        payment_per_day: Optional[str],
        image: Optional[BinaryIO],
        filename: Optional[str],
    ) -> int:
        """
        Validate a submission, store its image and insert the listing.

        Args:
            user_id: Owner id as received in the form.
            name: Listing name.
            description: Free-text description.
            payment_per_day: Price per day as received in the form.
            image: Readable image payload, or None when the request had none.
            filename: Name the client gave the image.

        Returns:
            int: Id of the new listing.

        Raises:
            ClientInputError: non-numeric ids or price, negative price,
                missing, unreadable or oversized image. Nothing is written.
            ImageWriteError: the image could not be stored. No row is created.
            ConstraintViolationError: the owner does not exist. The image
                stays on disk.
            StoreError: the insert failed for any other reason.
        """
        owner_id = parse_int(user_id, "user_id")
        payment = parse_int(payment_per_day, "paymentPerDay")
        if payment < 0:
            logger.warning(f"Invalid paymentPerDay: {payment} is negative")
            raise ClientInputError("Invalid paymentPerDay")

        data = self._read_image(image)
        image_path = self.images.save(owner_id, filename or "", data)

        try:
            listing_id = self.store.insert_listing(
                owner_id, name, description, payment, image_path
            )
        except (ConstraintViolationError, StoreError) as exc:
            logger.error(f"Failed to create listing: {exc.message}")
            raise exc.prefixed("Failed to create listing") from exc

        logger.info(f"Listing created for user {owner_id}, listing name: {name}")
        return listing_id

    def list_all(self) -> List[ListingView]:
        try:
            listings = self.store.list_all()
        except StoreError as exc:
            logger.error(f"Failed to fetch listings: {exc.message}")
            raise StoreError("Failed to fetch listings") from exc
        return [ListingView.model_validate(listing) for listing in listings]

    def list_by_owner(self, user_id: Optional[str]) -> List[ListingView]:
        """Listings of one owner. The id is validated before the store is queried."""
        owner_id = parse_int(user_id, "userID")
        try:
            listings = self.store.list_by_owner(owner_id)
        except StoreError as exc:
            logger.error(f"Failed to fetch user listings: {exc.message}")
            raise StoreError("Failed to fetch user listings") from exc
        return [ListingView.model_validate(listing) for listing in listings]
