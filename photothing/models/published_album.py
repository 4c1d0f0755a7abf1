"""Published album model."""
from sqlalchemy import Boolean, Column, ForeignKey, Integer, text
from sqlalchemy.orm import relationship

from photothing.db.base import Base
from .base import CreatedAtMixin


class PublishedAlbum(Base, CreatedAtMixin):
    """
    Public, shareable reference to an album.

    ``active`` allows un-publishing while keeping the URL around.
    """

    __tablename__ = 'published_albums'

    id = Column(Integer, primary_key=True, autoincrement=True)
    album_id = Column(Integer, ForeignKey('photo_albums.id'), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    active = Column(Boolean, default=True, server_default=text('true'), nullable=False)

    album = relationship('Album', back_populates='publishes')

    def __repr__(self) -> str:
        return f'<PublishedAlbum(id={self.id}, album_id={self.album_id}, active={self.active})>'
