"""
Preferences API Routes

Read and update the stored pace range, VMA, split interval and theme.
"""

import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..deps import get_preferences_service
from ...services.preferences_service import PreferencesService

logger = logging.getLogger(__name__)
router = APIRouter()


class PreferencesResponse(BaseModel):
    """Current user preferences."""
    max_pace_seconds: int
    min_pace_seconds: int
    pace_interval_seconds: int
    vma: str
    split_interval_meters: int
    theme: Literal["light", "dark"]


class UpdatePreferencesRequest(BaseModel):
    """Fields to change; omitted fields keep their stored value."""
    max_pace_seconds: Optional[int] = None
    min_pace_seconds: Optional[int] = None
    pace_interval_seconds: Optional[int] = None
    vma: Optional[str] = None
    split_interval_meters: Optional[int] = None
    theme: Optional[Literal["light", "dark"]] = None


@router.get("", response_model=PreferencesResponse)
async def get_preferences(
    service: PreferencesService = Depends(get_preferences_service),
):
    """Get the stored preferences, defaults filled in."""
    return PreferencesResponse(**service.get_preferences().to_dict())


@router.put("", response_model=PreferencesResponse)
async def update_preferences(
    request: UpdatePreferencesRequest,
    service: PreferencesService = Depends(get_preferences_service),
):
    """Update some preferences."""
    updated = service.update_preferences(**request.model_dump(exclude_none=True))
    return PreferencesResponse(**updated.to_dict())
