"""Published album schemas."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PublishedAlbumResponse(BaseModel):
    """A published album, addressed by its public hash."""
    hash: str = Field(..., description="Public id used in share links")
    album_id: int
    active: bool
    created_at: datetime
    share_url: str
    qr_code: Optional[str] = Field(None, description="PNG data URL of the share link")


class PublishedToggleRequest(BaseModel):
    active: bool
