"""
Wardrobe API endpoints.

Items are created from a multipart upload (form fields plus an image file)
and listed for the authenticated user. The dashboard router reports
per-user statistics.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from api.dependencies import get_wardrobe_service
from api.middleware.auth import get_current_user
from modules.auth.exceptions import UserNotFoundError
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .interfaces import IWardrobeService
from .models import DashboardStats, Item, ItemForm

logger = logging.getLogger(__name__)

router = APIRouter()
dashboard_router = APIRouter()


@router.post("", response_model=Item, status_code=201)
async def create_item(
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    sub_category: Optional[str] = Form(None, alias="subCategory"),
    seasons: Optional[str] = Form(None),
    color: Optional[str] = Form(None),
    warmth: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IWardrobeService = Depends(get_wardrobe_service),
) -> Item:
    """
    Upload an image and create a clothing item.

    ``seasons`` is a JSON-encoded array of strings, e.g. ``["summer","fall"]``.
    """
    form = ItemForm(
        name=name,
        category=category,
        sub_category=sub_category,
        seasons=seasons,
        color=color,
        warmth=warmth,
    )
    data = await image.read() if image is not None else None

    try:
        return await service.create_item(
            user.id,
            form,
            data,
            filename=image.filename if image is not None else None,
            content_type=image.content_type if image is not None else None,
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.exception("Creating item failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("", response_model=list[Item])
async def list_items(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IWardrobeService = Depends(get_wardrobe_service),
) -> list[Item]:
    """List every item owned by the current user."""
    try:
        return await service.list_items(user.id)
    except Exception as e:
        logger.exception("Listing items failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@dashboard_router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IWardrobeService = Depends(get_wardrobe_service),
) -> DashboardStats:
    """
    Get the dashboard summary for the current user.

    ``isNewUser`` is true while the wardrobe is empty.
    """
    try:
        return await service.get_dashboard_stats(user.id)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except Exception as e:
        logger.exception("Computing dashboard stats failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
