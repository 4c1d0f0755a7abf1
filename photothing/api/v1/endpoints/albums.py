"""Album endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from photothing.api.deps import get_codec, get_current_user, get_pagination, get_storage
from photothing.core.hashing import PublicIdCodec
from photothing.db.base import get_db
from photothing.db.pagination import Pagination
from photothing.models.user import User
from photothing.schemas.album import AlbumResponse, NewAlbum, PhotoIdsRequest
from photothing.schemas.pagination import PageResponse
from photothing.schemas.published import PublishedAlbumResponse
from photothing.services import albums as album_service
from photothing.services import publishing
from photothing.services.storage.s3 import S3Service

router = APIRouter()


@router.get('', response_model=PageResponse[AlbumResponse])
def list_albums(
    page: Pagination = Depends(get_pagination),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """The caller's albums, without photos."""
    return album_service.user_albums(db, current_user, page)


@router.post('', response_model=AlbumResponse, status_code=status.HTTP_201_CREATED)
def create_album(
    details: NewAlbum,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return album_service.create_album(db, current_user, details.name)


@router.get('/{album_id}', response_model=AlbumResponse)
def get_album(
    album_id: int,
    page: Pagination = Depends(get_pagination),
    current_user: User = Depends(get_current_user),
    storage: S3Service = Depends(get_storage),
    db: Session = Depends(get_db)
):
    """
    Get an album with one page of its photos.

    Albums owned by other users are reported as not found.
    """
    return album_service.fetch_album(db, current_user, storage, album_id, page)


@router.put('/{album_id}/photos', response_model=AlbumResponse)
def add_photos(
    album_id: int,
    request: PhotoIdsRequest,
    current_user: User = Depends(get_current_user),
    storage: S3Service = Depends(get_storage),
    db: Session = Depends(get_db)
):
    """Add photos to an album. Photos already in it are left as they are."""
    return album_service.add_photos_to_album(db, current_user, storage, album_id, request.photo_ids)


@router.delete('/{album_id}/photos', response_model=AlbumResponse)
def remove_photos(
    album_id: int,
    request: PhotoIdsRequest,
    current_user: User = Depends(get_current_user),
    storage: S3Service = Depends(get_storage),
    db: Session = Depends(get_db)
):
    return album_service.remove_photos_from_album(db, current_user, storage, album_id, request.photo_ids)


@router.post('/{album_id}/publish', response_model=PublishedAlbumResponse, status_code=status.HTTP_201_CREATED)
def publish_album(
    album_id: int,
    current_user: User = Depends(get_current_user),
    codec: PublicIdCodec = Depends(get_codec),
    db: Session = Depends(get_db)
):
    """Publish an album. Returns its share link and a QR code for it."""
    return publishing.publish_album(db, current_user, codec, album_id)
