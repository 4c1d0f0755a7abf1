"""Photo repository for database operations."""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from photothing.core.security import new_uuid
from photothing.db.pagination import Page, Pagination, paginate
from photothing.models.photo import Photo, PhotoAttr, validate_attribute
from photothing.models.user import User
from photothing.repositories.base import BaseRepository

FILENAME_ATTR = "filename"

PhotoWithAttrs = Tuple[Photo, List[PhotoAttr]]


class PhotoRepository(BaseRepository[Photo]):
    """Repository for photo database operations."""

    def __init__(self, db: Session):
        super().__init__(Photo, db)

    def create_with_filename(self, owner: User, filename: str) -> PhotoWithAttrs:
        """
        Create a photo row and its ``filename`` attribute in one transaction.

        Args:
            owner: Uploading user
            filename: Original filename, stored as an attribute

        Returns:
            The new photo and its attributes

        Raises:
            InvalidAttribute: filename is empty or too long
        """
        key, value = validate_attribute(FILENAME_ATTR, filename)
        photo = self.create({'uuid': new_uuid(), 'owner': owner.id}, commit=False)
        attr = PhotoAttr(photo_id=photo.id, key=key, value=value)
        self.db.add(attr)
        self.commit()
        return photo, [attr]

    def by_user(self, user: User, page: Pagination) -> Page[PhotoWithAttrs]:
        """A page of the user's photos, each with its attributes."""
        query = select(Photo).where(Photo.owner == user.id)
        photos = paginate(query, page).load_and_count_pages(self.db, Photo)
        attrs = self.attrs_for(photo.id for photo in photos.items)
        return photos.map(lambda photo: (photo, attrs.get(photo.id, [])))

    def by_uuid(self, user: User, uuid: str) -> Optional[Photo]:
        """Photo with ``uuid`` owned by ``user``, or None."""
        return self.db.scalars(
            select(Photo).where(Photo.uuid == uuid, Photo.owner == user.id)
        ).first()

    def mark_present(self, photo: Photo) -> Photo:
        photo.present = True
        self.commit()
        self.refresh(photo)
        return photo

    def attrs_for(self, photo_ids: Iterable[int]) -> Dict[int, List[PhotoAttr]]:
        """Attributes of the given photos, grouped by photo id."""
        ids = list(photo_ids)
        grouped: Dict[int, List[PhotoAttr]] = defaultdict(list)
        if not ids:
            return grouped
        rows = self.db.scalars(
            select(PhotoAttr)
            .where(PhotoAttr.photo_id.in_(ids))
            .order_by(PhotoAttr.photo_id, PhotoAttr.key)
        )
        for attr in rows:
            grouped[attr.photo_id].append(attr)
        return grouped

    def count_created(self) -> int:
        return self.count()

    def count_uploaded(self) -> int:
        return self.count(Photo.present.isnot(None))
