"""
Media module data models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class MediaReference(BaseModel):
    """Where an uploaded image lives on the media host."""

    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(..., description="Stable HTTPS URL of the stored image")
    public_id: str = Field(..., description="Host-side identifier, used for deletion")
    format: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    size_bytes: Optional[int] = Field(None, alias="bytes")
