"""User and password reset models."""
from sqlalchemy import Column, Date, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from photothing.db.base import Base
from .base import CreatedAtMixin, UTCDateTime, utcnow

ADMIN_PREFIX = "ADMINx"


class User(Base):
    """Registered user. Admins are flagged by a uuid prefix."""

    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(254), unique=True, nullable=False, index=True)
    uuid = Column(String(32), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    name = Column(String(100), nullable=True)
    subscription_expires = Column(Date, nullable=True)
    joined = Column(UTCDateTime(), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        UTCDateTime(), default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False
    )

    photos = relationship('Photo', back_populates='owner_user')
    albums = relationship('Album', back_populates='user')
    password_resets = relationship('PasswordReset', back_populates='user', cascade='all, delete-orphan')

    @property
    def is_admin(self) -> bool:
        return self.uuid.startswith(ADMIN_PREFIX)

    def __repr__(self) -> str:
        return f'<User(id={self.id}, email={self.email})>'


class PasswordReset(Base, CreatedAtMixin):
    """One-time password reset token."""

    __tablename__ = 'password_resets'

    uuid = Column(String(32), primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    user = relationship('User', back_populates='password_resets')

    def __repr__(self) -> str:
        return f'<PasswordReset(user_id={self.user_id})>'
