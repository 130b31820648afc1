"""
Media module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError, ValidationError


class UnsupportedImageFormatError(ValidationError):
    """Raised when an upload is not one of the allowed image encodings."""

    def __init__(self, image_format: Optional[str], allowed: list[str]):
        super().__init__(
            f"Unsupported image format: {image_format or 'unknown'}. "
            f"Allowed formats: {', '.join(allowed)}",
            code="UNSUPPORTED_IMAGE_FORMAT",
            details={"format": image_format, "allowed": allowed},
        )


class MediaUploadError(ExternalServiceError):
    """Raised when the media host rejects or fails an upload."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(
            f"Image upload failed: {message}",
            service="cloudinary",
            code="MEDIA_UPLOAD_FAILED",
            details={"original_error": original_error},
        )
