"""Photo and photo attribute models."""
from typing import Tuple

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from photothing.db.base import Base
from .base import TimestampMixin

ATTR_KEY_MAX_LENGTH = 30
ATTR_VALUE_MAX_LENGTH = 100


class InvalidAttribute(ValueError):
    """Raised when a photo attribute key or value is out of bounds."""


class Photo(Base, TimestampMixin):
    """
    Uploaded photo.

    The row is created when an upload is started; ``present`` is set once
    the object has been confirmed in storage.
    """

    __tablename__ = 'photos'

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(String(32), unique=True, nullable=False, index=True)
    owner = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    present = Column(Boolean, nullable=True)

    owner_user = relationship('User', back_populates='photos')
    attrs = relationship('PhotoAttr', back_populates='photo', cascade='all, delete-orphan')

    def __repr__(self) -> str:
        return f'<Photo(id={self.id}, uuid={self.uuid})>'


class PhotoAttr(Base, TimestampMixin):
    """Free-form key/value metadata attached to a photo (filename, tags...)."""

    __tablename__ = 'photo_attrs'

    photo_id = Column(Integer, ForeignKey('photos.id'), primary_key=True)
    key = Column(String(ATTR_KEY_MAX_LENGTH), primary_key=True)
    value = Column(String(ATTR_VALUE_MAX_LENGTH), nullable=False)

    photo = relationship('Photo', back_populates='attrs')

    def __repr__(self) -> str:
        return f'<PhotoAttr(photo_id={self.photo_id}, key={self.key})>'


def validate_attribute(key: str, value: str) -> Tuple[str, str]:
    """
    Check an attribute pair and normalize the key to lowercase.

    Raises:
        InvalidAttribute: empty or over-long key/value
    """
    key = (key or "").strip().lower()
    value = value or ""
    if not key or len(key) > ATTR_KEY_MAX_LENGTH:
        raise InvalidAttribute(f"attribute key must be 1-{ATTR_KEY_MAX_LENGTH} characters")
    if not value or len(value) > ATTR_VALUE_MAX_LENGTH:
        raise InvalidAttribute(f"attribute '{key}' must be 1-{ATTR_VALUE_MAX_LENGTH} characters")
    return key, value
