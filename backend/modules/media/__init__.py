"""
Media ingestion module.

Stores uploaded images on an external host and hands back a stable URL.

Public API:
- IMediaStorage: Interface for image storage
- CloudinaryMediaStorage / InMemoryMediaStorage: Implementations
- MediaReference: Result of an upload
"""

from .interfaces import IMediaStorage
from .models import MediaReference
from .exceptions import MediaUploadError, UnsupportedImageFormatError
from .service import (
    CloudinaryMediaStorage,
    InMemoryMediaStorage,
    validate_image_format,
)

__all__ = [
    "IMediaStorage",
    "MediaReference",
    "MediaUploadError",
    "UnsupportedImageFormatError",
    "CloudinaryMediaStorage",
    "InMemoryMediaStorage",
    "validate_image_format",
]
