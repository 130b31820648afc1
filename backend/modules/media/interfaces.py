"""
Media module interface.

The wardrobe module depends on IMediaStorage so that tests can swap the
Cloudinary implementation for an in-memory one.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import MediaReference


@runtime_checkable
class IMediaStorage(Protocol):
    """Contract for storing binary images on an external host."""

    async def upload(
        self,
        data: bytes,
        filename: Optional[str],
        content_type: Optional[str],
        folder: str,
    ) -> MediaReference:
        """
        Store an image and return its reference.

        Raises:
            UnsupportedImageFormatError: If the encoding is not allowed
            MediaUploadError: If the host fails the upload
        """
        ...

    async def delete(self, public_id: str) -> bool:
        """Remove a stored image. Returns True if the host deleted it."""
        ...
