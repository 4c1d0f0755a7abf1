"""Published album endpoints."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from photothing.api.deps import get_codec, get_current_user, get_pagination, get_storage
from photothing.core.hashing import PublicIdCodec
from photothing.db.base import get_db
from photothing.db.pagination import Pagination
from photothing.models.user import User
from photothing.schemas.album import AlbumResponse
from photothing.schemas.published import PublishedAlbumResponse, PublishedToggleRequest
from photothing.services import publishing
from photothing.services.storage.s3 import S3Service

router = APIRouter()


@router.get('', response_model=List[PublishedAlbumResponse])
def list_published(
    current_user: User = Depends(get_current_user),
    codec: PublicIdCodec = Depends(get_codec),
    db: Session = Depends(get_db)
):
    return publishing.user_published_albums(db, current_user, codec)


@router.put('/{hashid}', response_model=PublishedAlbumResponse)
def toggle_published(
    hashid: str,
    request: PublishedToggleRequest,
    current_user: User = Depends(get_current_user),
    codec: PublicIdCodec = Depends(get_codec),
    db: Session = Depends(get_db)
):
    """Activate or deactivate a published album."""
    return publishing.toggle_published_album(db, current_user, codec, hashid, request.active)


@router.delete('/{hashid}', status_code=status.HTTP_204_NO_CONTENT)
def delete_published(
    hashid: str,
    current_user: User = Depends(get_current_user),
    codec: PublicIdCodec = Depends(get_codec),
    db: Session = Depends(get_db)
):
    publishing.delete_published_album(db, current_user, codec, hashid)


@router.get('/{hashid}/photos', response_model=AlbumResponse)
def published_photos(
    hashid: str,
    page: Pagination = Depends(get_pagination),
    storage: S3Service = Depends(get_storage),
    codec: PublicIdCodec = Depends(get_codec),
    db: Session = Depends(get_db)
):
    """
    Public view of a published album.

    No authentication. Unknown, inactive and deleted publishes all answer 404.
    """
    return publishing.get_published_photos(db, storage, codec, hashid, page)
