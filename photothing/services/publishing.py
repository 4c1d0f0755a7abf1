"""
Published albums.

A publish is addressed by the hashed id of its row. Every way a public
lookup can fail (bad hash, inactive publish, missing owner or album, wrong
owner) produces the same NotFoundError so a link reveals nothing about why
it stopped working.
"""
from io import BytesIO
from typing import List, Optional
import base64

import qrcode
from sqlalchemy.orm import Session

from photothing.app.config import settings
from photothing.app.exceptions import NotFoundError, server_errors
from photothing.core.hashing import PublicIdCodec
from photothing.db.pagination import Pagination
from photothing.models.published_album import PublishedAlbum
from photothing.models.user import User
from photothing.repositories.album_repo import AlbumRepository
from photothing.repositories.published_album_repo import PublishedAlbumRepository
from photothing.repositories.user_repo import UserRepository
from photothing.schemas.album import AlbumResponse
from photothing.schemas.published import PublishedAlbumResponse
from photothing.services.albums import fetch_db_album, load_photos_page

PUBLISHED_NOT_FOUND = "could not find published album"


def share_url(hashid: str) -> str:
    return f"{settings.APP_URL.rstrip('/')}/p/{hashid}"


def qr_data_url(url: str) -> str:
    """PNG QR code for ``url`` as a data URL."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=4
    )
    qr.add_data(url)
    qr.make(fit=True)

    img = qr.make_image(fill_color='black', back_color='white')
    buffer = BytesIO()
    img.save(buffer, format='PNG')
    return f"data:image/png;base64,{base64.b64encode(buffer.getvalue()).decode()}"


def published_response(
    published: PublishedAlbum, codec: PublicIdCodec, with_qr: bool = False
) -> PublishedAlbumResponse:
    hashid = codec.encode(published.id)
    url = share_url(hashid)
    return PublishedAlbumResponse(
        hash=hashid,
        album_id=published.album_id,
        active=published.active,
        created_at=published.created_at,
        share_url=url,
        qr_code=qr_data_url(url) if with_qr else None,
    )


def publish_album(db: Session, user: User, codec: PublicIdCodec, album_id: int) -> PublishedAlbumResponse:
    album = fetch_db_album(db, user, album_id)
    with server_errors(db):
        published = PublishedAlbumRepository(db).publish(album)
    return published_response(published, codec, with_qr=True)


def get_published_photos(
    db: Session, storage, codec: PublicIdCodec, hashid: str, page: Pagination
) -> AlbumResponse:
    published_id = codec.decode(hashid)
    if published_id is None:
        raise NotFoundError(PUBLISHED_NOT_FOUND)

    with server_errors(db):
        published = PublishedAlbumRepository(db).by_id(published_id, active_only=True)
        if published is None:
            raise NotFoundError(PUBLISHED_NOT_FOUND)
        owner = UserRepository(db).get(published.user_id)
        if owner is None:
            raise NotFoundError(PUBLISHED_NOT_FOUND)
        album = AlbumRepository(db).by_id(owner, published.album_id)
        if album is None:
            raise NotFoundError(PUBLISHED_NOT_FOUND)

    return load_photos_page(db, owner, storage, album, page)


def toggle_published_album(
    db: Session, user: User, codec: PublicIdCodec, hashid: str, active: bool
) -> PublishedAlbumResponse:
    repo = PublishedAlbumRepository(db)
    with server_errors(db):
        published = repo.set_active(_owned_publish(repo, user, codec, hashid), active)
    return published_response(published, codec, with_qr=True)


def delete_published_album(db: Session, user: User, codec: PublicIdCodec, hashid: str) -> None:
    repo = PublishedAlbumRepository(db)
    with server_errors(db):
        repo.delete(_owned_publish(repo, user, codec, hashid))


def user_published_albums(db: Session, user: User, codec: PublicIdCodec) -> List[PublishedAlbumResponse]:
    with server_errors(db):
        published = PublishedAlbumRepository(db).for_user(user)
    return [published_response(p, codec) for p in published]


def _owned_publish(
    repo: PublishedAlbumRepository, user: User, codec: PublicIdCodec, hashid: str
) -> PublishedAlbum:
    published_id: Optional[int] = codec.decode(hashid)
    published = repo.owned_by(user, published_id) if published_id is not None else None
    if published is None:
        raise NotFoundError(PUBLISHED_NOT_FOUND)
    return published
