"""Photo endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from photothing.api.deps import get_current_user, get_pagination, get_storage, get_subscriber
from photothing.db.base import get_db
from photothing.db.pagination import Pagination
from photothing.models.user import User
from photothing.schemas.pagination import PageResponse
from photothing.schemas.photo import PendingUpload, PhotoResponse, UploadRequest
from photothing.services import photos as photo_service
from photothing.services.storage.s3 import S3Service

router = APIRouter()


@router.get("/photos", response_model=PageResponse[PhotoResponse])
def list_photos(
    page: Pagination = Depends(get_pagination),
    current_user: User = Depends(get_current_user),
    storage: S3Service = Depends(get_storage),
    db: Session = Depends(get_db),
):
    """The caller's photos, oldest first."""
    return photo_service.user_photos(db, current_user, storage, page)


@router.post("/upload", response_model=PendingUpload, status_code=status.HTTP_201_CREATED)
def start_upload(
    upload: UploadRequest,
    current_user: User = Depends(get_subscriber),
    storage: S3Service = Depends(get_storage),
    db: Session = Depends(get_db),
):
    """
    Start a photo upload (subscribers only).

    - **filename**: stored as the photo's `filename` attribute
    - **file_type**: content type the client must PUT with
    """
    return photo_service.create_photo(db, current_user, storage, upload)


@router.post("/photos/{uuid}/confirm", response_model=PhotoResponse)
def confirm_upload(
    uuid: str,
    current_user: User = Depends(get_current_user),
    storage: S3Service = Depends(get_storage),
    db: Session = Depends(get_db),
):
    return photo_service.confirm_photo(db, current_user, storage, uuid)
