"""Album repository for database operations."""
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from photothing.db.pagination import Page, Pagination, paginate
from photothing.models.album import Album, AlbumMembership
from photothing.models.base import valid_id
from photothing.models.photo import Photo, PhotoAttr
from photothing.models.user import User
from photothing.repositories.base import BaseRepository, insert_ignore
from photothing.repositories.photo_repo import PhotoRepository

AlbumEntry = Tuple[Photo, AlbumMembership, List[PhotoAttr]]


class AlbumRepository(BaseRepository[Album]):
    """
    Repository for album database operations.

    Every lookup is scoped to an owner: an album belonging to someone else
    is indistinguishable from one that does not exist.
    """

    def __init__(self, db: Session):
        super().__init__(Album, db)

    def create_album(self, user: User, name: Optional[str]) -> Album:
        return self.create({'user_id': user.id, 'name': name})

    def by_id(self, user: User, album_id: int) -> Optional[Album]:
        if not valid_id(album_id):
            return None
        return self.db.scalars(
            select(Album).where(Album.id == album_id, Album.user_id == user.id)
        ).first()

    def for_user(self, user: User, page: Pagination) -> Page[Album]:
        query = select(Album).where(Album.user_id == user.id)
        return paginate(query, page).load_and_count_pages(self.db, Album)

    def add_photos(self, album: Album, photo_ids: Iterable[int]) -> int:
        """
        Add photos to an album.

        Only photos owned by the album's owner are added, and photos already
        in the album are left alone, so repeating a call changes nothing.
        Ids that cannot exist are skipped.

        Returns:
            Number of memberships created
        """
        requested = {photo_id for photo_id in photo_ids if valid_id(photo_id)}
        if not requested:
            return 0
        owned = self.db.scalars(
            select(Photo.id).where(Photo.id.in_(requested), Photo.owner == album.user_id)
        ).all()
        if not owned:
            return 0

        stmt = insert_ignore(self.db, AlbumMembership.__table__).on_conflict_do_nothing(
            index_elements=['photo_id', 'album_id']
        )
        result = self.db.execute(
            stmt, [{'photo_id': photo_id, 'album_id': album.id} for photo_id in sorted(owned)]
        )
        self.commit()
        return max(result.rowcount, 0)

    def remove_photos(self, album: Album, photo_ids: Iterable[int]) -> int:
        """
        Remove photos from an album. Ids that are not in the album are ignored.

        Returns:
            Number of memberships removed
        """
        requested = {photo_id for photo_id in photo_ids if valid_id(photo_id)}
        if not requested:
            return 0
        result = self.db.execute(
            delete(AlbumMembership).where(
                AlbumMembership.album_id == album.id,
                AlbumMembership.photo_id.in_(requested),
            )
        )
        self.commit()
        return max(result.rowcount, 0)

    def get_photos(self, album: Album, page: Pagination) -> Page[AlbumEntry]:
        """A page of the album's photos with membership metadata and attributes."""
        query = (
            select(Photo, AlbumMembership)
            .join(AlbumMembership, AlbumMembership.photo_id == Photo.id)
            .where(AlbumMembership.album_id == album.id)
        )
        rows = paginate(query, page).load_and_count_pages(self.db, Photo, AlbumMembership)
        attrs = PhotoRepository(self.db).attrs_for(photo.id for photo, _ in rows.items)
        return rows.map(
            lambda row: (row[0], row[1], attrs.get(row[0].id, []))
        )
