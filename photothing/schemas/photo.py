"""Photo and upload schemas."""
from datetime import datetime
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from photothing.models.photo import Photo, PhotoAttr


class PhotoResponse(BaseModel):
    """Photo as shown to its owner or on a published album."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    uuid: str
    present: bool = False
    created_at: datetime
    attributes: Dict[str, str] = Field(default_factory=dict)
    url: Optional[str] = None

    @classmethod
    def build(cls, photo: Photo, attrs: Iterable[PhotoAttr], url: Optional[str] = None) -> "PhotoResponse":
        return cls(
            id=photo.id,
            uuid=photo.uuid,
            present=bool(photo.present),
            created_at=photo.created_at,
            attributes={attr.key: attr.value for attr in attrs},
            url=url,
        )


class UploadRequest(BaseModel):
    """Request to start a direct-to-storage upload."""
    filename: str = Field(..., description="Original filename")
    file_type: str = Field(..., description="MIME type sent with the PUT")


class UploadResponse(BaseModel):
    """Presigned PUT target for an upload."""
    url: str
    directory: str
    filename: str
    get_url: str


class PendingUpload(BaseModel):
    photo: PhotoResponse
    upload: UploadResponse
