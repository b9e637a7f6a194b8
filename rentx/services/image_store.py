"""
Persistence of uploaded listing images.

Images are written to a single content directory as
``<owner id>_<sanitized original filename>``. The owner prefix keeps users
apart but does not make names unique: a second upload by the same owner
whose name sanitizes to the same value replaces the first file
(last writer wins, no locking).
"""

import logging
import re
from pathlib import Path

from rentx.core.exceptions import ImageWriteError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")

FALLBACK_FILENAME = "upload"


def sanitize_filename(filename: str) -> str:
    """
    Reduce a client-supplied filename to a safe base name.

    Directory components are dropped (both separator styles) and every
    whitespace character becomes an underscore.

    >>> sanitize_filename("../../etc/my photo.png")
    'my_photo.png'
    """
    base = filename.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]
    if base in ("", ".", ".."):
        base = FALLBACK_FILENAME
    return _WHITESPACE.sub("_", base)


class ImageStore:
    """Writes image bytes into the content directory."""

    def __init__(self, upload_dir: str):
        self.upload_dir = Path(upload_dir)

    def path_for(self, owner_id: int, filename: str) -> Path:
        return self.upload_dir / f"{owner_id}_{sanitize_filename(filename)}"

    def save(self, owner_id: int, filename: str, data: bytes) -> str:
        """
        Write the image and return its path as stored on the listing.

        Raises:
            ImageWriteError: the directory or the file could not be written.
        """
        path = self.path_for(owner_id, filename)
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            logger.error(f"Failed to save image: {e}")
            raise ImageWriteError(f"Failed to save image: {e}") from e

        logger.info(f"Stored image {path} ({len(data)} bytes)")
        return str(path)
