"""Published album repository."""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from photothing.models.album import Album
from photothing.models.published_album import PublishedAlbum
from photothing.models.user import User
from photothing.repositories.base import BaseRepository


class PublishedAlbumRepository(BaseRepository[PublishedAlbum]):
    """Repository for published album database operations."""

    def __init__(self, db: Session):
        super().__init__(PublishedAlbum, db)

    def publish(self, album: Album) -> PublishedAlbum:
        return self.create({'album_id': album.id, 'user_id': album.user_id, 'active': True})

    def by_id(self, published_id: int, active_only: bool = False) -> Optional[PublishedAlbum]:
        query = select(PublishedAlbum).where(PublishedAlbum.id == published_id)
        if active_only:
            query = query.where(PublishedAlbum.active.is_(True))
        return self.db.scalars(query).first()

    def owned_by(self, user: User, published_id: int) -> Optional[PublishedAlbum]:
        return self.db.scalars(
            select(PublishedAlbum).where(
                PublishedAlbum.id == published_id,
                PublishedAlbum.user_id == user.id,
            )
        ).first()

    def for_user(self, user: User) -> List[PublishedAlbum]:
        return list(self.db.scalars(
            select(PublishedAlbum)
            .where(PublishedAlbum.user_id == user.id)
            .order_by(PublishedAlbum.id)
        ))

    def set_active(self, published: PublishedAlbum, active: bool) -> PublishedAlbum:
        published.active = active
        self.commit()
        self.refresh(published)
        return published
