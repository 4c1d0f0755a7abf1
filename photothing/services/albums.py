"""Album orchestration: ownership-scoped loads, membership edits, photo pages."""
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from photothing.app.exceptions import not_found, server_errors
from photothing.db.pagination import Page, Pagination
from photothing.models.album import Album, AlbumMembership
from photothing.models.photo import Photo, PhotoAttr
from photothing.models.user import User
from photothing.repositories.album_repo import AlbumRepository
from photothing.schemas.album import AlbumEntry, AlbumResponse
from photothing.schemas.pagination import PageResponse
from photothing.schemas.photo import PhotoResponse


def create_album(db: Session, user: User, name: Optional[str]) -> AlbumResponse:
    with server_errors(db):
        album = AlbumRepository(db).create_album(user, name)
    return album_response(album, Page.empty())


def fetch_album(db: Session, user: User, storage, album_id: int, page: Pagination) -> AlbumResponse:
    album = fetch_db_album(db, user, album_id)
    return load_photos_page(db, user, storage, album, page)


def add_photos_to_album(
    db: Session, user: User, storage, album_id: int, photo_ids: Iterable[int]
) -> AlbumResponse:
    album = fetch_db_album(db, user, album_id)
    with server_errors(db):
        AlbumRepository(db).add_photos(album, photo_ids)
    return load_photos_page(db, user, storage, album, Pagination.first())


def remove_photos_from_album(
    db: Session, user: User, storage, album_id: int, photo_ids: Iterable[int]
) -> AlbumResponse:
    album = fetch_db_album(db, user, album_id)
    with server_errors(db):
        AlbumRepository(db).remove_photos(album, photo_ids)
    return load_photos_page(db, user, storage, album, Pagination.first())


def user_albums(db: Session, user: User, page: Pagination) -> PageResponse[AlbumResponse]:
    with server_errors(db):
        albums = AlbumRepository(db).for_user(user, page)
    albums = albums.map(lambda album: album_response(album, Page.empty()))
    return PageResponse[AlbumResponse].from_page(albums)


def fetch_db_album(db: Session, user: User, album_id: int) -> Album:
    with server_errors(db):
        album = AlbumRepository(db).by_id(user, album_id)
    return not_found(album, f"could not find album with id={album_id}")


def load_photos_page(db: Session, owner: User, storage, album: Album, page: Pagination) -> AlbumResponse:
    """
    Album plus one page of its photos. Photo URLs are resolved against
    ``owner``, who must own the album.
    """
    with server_errors(db):
        rows = AlbumRepository(db).get_photos(album, page)
    entries = rows.map(lambda row: album_entry(owner, storage, *row))
    return album_response(album, entries)


def album_entry(
    owner: User, storage, photo: Photo, membership: AlbumMembership, attrs: List[PhotoAttr]
) -> AlbumEntry:
    return AlbumEntry(
        photo=PhotoResponse.build(photo, attrs, storage.resolve_public_url(owner.uuid, photo.uuid)),
        ordering=membership.ordering,
        caption=membership.caption,
        updated_at=membership.updated_at,
    )


def album_response(album: Album, photos: Page) -> AlbumResponse:
    return AlbumResponse(
        id=album.id,
        created_at=album.created_at,
        name=album.name,
        photos=PageResponse[AlbumEntry].from_page(photos),
    )
