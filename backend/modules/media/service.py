"""
Media storage implementations.

Provides both in-memory (for testing) and Cloudinary-backed (for production)
implementations of image storage.
"""

import logging
import uuid
from pathlib import PurePath
from typing import Optional

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from starlette.concurrency import run_in_threadpool

from shared.config import Settings

from .exceptions import MediaUploadError, UnsupportedImageFormatError
from .models import MediaReference

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_FORMATS = ["jpg", "png", "jpeg", "webp"]

_CONTENT_TYPE_FORMATS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/pjpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}


def resolve_image_format(filename: Optional[str], content_type: Optional[str]) -> Optional[str]:
    """Guess the image format from the file extension, then the content type."""
    if filename:
        suffix = PurePath(filename).suffix.lower().lstrip(".")
        if suffix:
            return suffix
    if content_type:
        return _CONTENT_TYPE_FORMATS.get(content_type.split(";")[0].strip().lower())
    return None


def validate_image_format(
    filename: Optional[str],
    content_type: Optional[str],
    allowed: list[str],
) -> str:
    """
    Check an upload against the allow-list of image encodings.

    Returns:
        The resolved format

    Raises:
        UnsupportedImageFormatError: If the format is unknown or not allowed
    """
    image_format = resolve_image_format(filename, content_type)
    if image_format not in allowed:
        raise UnsupportedImageFormatError(image_format, allowed)
    return image_format


class InMemoryMediaStorage:
    """
    Image storage kept in process memory.

    For testing and local development. URLs are fake but stable.
    """

    def __init__(self, allowed_formats: Optional[list[str]] = None):
        self._allowed_formats = allowed_formats or DEFAULT_ALLOWED_FORMATS
        self.files: dict[str, bytes] = {}

    async def upload(
        self,
        data: bytes,
        filename: Optional[str],
        content_type: Optional[str],
        folder: str,
    ) -> MediaReference:
        image_format = validate_image_format(filename, content_type, self._allowed_formats)
        public_id = f"{folder}/{uuid.uuid4().hex}"
        self.files[public_id] = data
        return MediaReference(
            url=f"memory://{public_id}.{image_format}",
            public_id=public_id,
            format=image_format,
            size_bytes=len(data),
        )

    async def delete(self, public_id: str) -> bool:
        return self.files.pop(public_id, None) is not None


class CloudinaryMediaStorage:
    """
    Image storage on Cloudinary.

    The Cloudinary SDK is blocking, so calls run in the threadpool.
    """

    def __init__(self, settings: Settings):
        self._allowed_formats = settings.allowed_image_formats
        cloudinary.config(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            secure=True,
        )

    async def upload(
        self,
        data: bytes,
        filename: Optional[str],
        content_type: Optional[str],
        folder: str,
    ) -> MediaReference:
        validate_image_format(filename, content_type, self._allowed_formats)

        try:
            result = await run_in_threadpool(
                cloudinary.uploader.upload,
                data,
                folder=folder,
                resource_type="image",
                allowed_formats=self._allowed_formats,
            )
        except cloudinary.exceptions.Error as e:
            logger.warning("Cloudinary upload failed: %s", e)
            raise MediaUploadError(str(e), original_error=type(e).__name__) from e

        if not result.get("secure_url") or not result.get("public_id"):
            raise MediaUploadError("host returned no URL")

        return MediaReference(
            url=result["secure_url"],
            public_id=result["public_id"],
            format=result.get("format"),
            width=result.get("width"),
            height=result.get("height"),
            size_bytes=result.get("bytes"),
        )

    async def delete(self, public_id: str) -> bool:
        try:
            result = await run_in_threadpool(cloudinary.uploader.destroy, public_id)
        except cloudinary.exceptions.Error as e:
            logger.error("Failed to delete image %s from Cloudinary: %s", public_id, e)
            return False
        return result.get("result") == "ok"
