"""Import all models for Alembic."""
from .base import CreatedAtMixin, TimestampMixin
from .user import User, PasswordReset, ADMIN_PREFIX
from .photo import Photo, PhotoAttr, InvalidAttribute, validate_attribute
from .album import Album, AlbumMembership
from .published_album import PublishedAlbum

__all__ = [
    "CreatedAtMixin",
    "TimestampMixin",
    "User",
    "PasswordReset",
    "ADMIN_PREFIX",
    "Photo",
    "PhotoAttr",
    "InvalidAttribute",
    "validate_attribute",
    "Album",
    "AlbumMembership",
    "PublishedAlbum",
]
