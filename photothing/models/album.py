"""Album and album membership models."""
from sqlalchemy import Column, ForeignKey, Integer, SmallInteger, Text, func
from sqlalchemy.orm import relationship

from photothing.db.base import Base
from .base import CreatedAtMixin, UTCDateTime, utcnow


class Album(Base, CreatedAtMixin):
    """Named collection of a user's photos."""

    __tablename__ = 'photo_albums'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    name = Column(Text, nullable=True)

    user = relationship('User', back_populates='albums')
    memberships = relationship('AlbumMembership', back_populates='album', cascade='all, delete-orphan')
    publishes = relationship('PublishedAlbum', back_populates='album', cascade='all, delete-orphan')

    def __repr__(self) -> str:
        return f'<Album(id={self.id}, name={self.name})>'


class AlbumMembership(Base):
    """Links a photo to an album, with presentation metadata."""

    __tablename__ = 'album_membership'

    photo_id = Column(Integer, ForeignKey('photos.id'), primary_key=True)
    album_id = Column(Integer, ForeignKey('photo_albums.id'), primary_key=True, index=True)
    ordering = Column(SmallInteger, nullable=True)
    caption = Column(Text, nullable=True)
    updated_at = Column(
        UTCDateTime(), default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False
    )

    album = relationship('Album', back_populates='memberships')

    def __repr__(self) -> str:
        return f'<AlbumMembership(album_id={self.album_id}, photo_id={self.photo_id})>'
