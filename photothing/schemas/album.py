"""Album schemas."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from photothing.schemas.pagination import PageResponse
from photothing.schemas.photo import PhotoResponse


class NewAlbum(BaseModel):
    """Schema for creating an album."""
    name: Optional[str] = Field(None, max_length=255, description="Album name")


class PhotoIdsRequest(BaseModel):
    """Photo ids to add to or remove from an album."""
    photo_ids: List[int] = Field(..., max_length=500)


class AlbumEntry(BaseModel):
    """A photo in an album, with its membership details."""
    photo: PhotoResponse
    ordering: Optional[int] = None
    caption: Optional[str] = None
    updated_at: datetime


class AlbumResponse(BaseModel):
    id: int
    created_at: datetime
    name: Optional[str] = None
    photos: PageResponse[AlbumEntry] = Field(default_factory=PageResponse[AlbumEntry])
